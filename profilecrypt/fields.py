"""
Field Specs
Static size tables for each encrypted profile field.

Each field has a short ascending list of padded lengths (buckets) and,
index-aligned with it, the base64 length the ciphertext must have for
each bucket. The tables are plain immutable configuration passed into
the codec; there is no process-wide mutable state.

The base64 lengths follow from the encryption framing
(12-byte nonce + padded bytes + 16-byte tag), but each table is kept as
independent data so the server's published allow-list is explicit.
"""

from dataclasses import dataclass

from profilecrypt.errors import ConfigInvariantViolation
from profilecrypt.padding import check_buckets


# Max bytes of a single name component, encoded in UTF-8.
MAX_NAME_COMPONENT_BYTES = 128
# Given name + separator + family name.
MAX_NAME_LENGTH_BYTES = MAX_NAME_COMPONENT_BYTES * 2 + 1

MAX_BIO_LENGTH_CHARS = 100
MAX_BIO_LENGTH_BYTES = 512

MAX_BIO_EMOJI_LENGTH_CHARS = 1
MAX_BIO_EMOJI_LENGTH_BYTES = 32


@dataclass(frozen=True)
class FieldSpec:
    """Size configuration for one profile field type."""
    name: str
    max_byte_length: int
    padded_lengths: tuple[int, ...]
    valid_base64_lengths: tuple[int, ...]
    max_char_length: int | None = None  # Enforced by the caller, not the codec

    @property
    def max_padded_length(self) -> int:
        return self.padded_lengths[-1]


def check_field_spec(spec: FieldSpec) -> None:
    """
    Verify a FieldSpec table is internally consistent.

    Checks:
    1. Buckets are non-empty, positive and strictly ascending
    2. Each bucket has exactly one allowed base64 length
    3. Allowed lengths are strictly ascending too
    4. The largest bucket matches the field's byte limit

    Raises:
        ConfigInvariantViolation: On the first failed check.
    """
    try:
        check_buckets(spec.padded_lengths)
    except ConfigInvariantViolation as e:
        raise ConfigInvariantViolation(f"{spec.name}: {e}", spec.name) from e

    if len(spec.valid_base64_lengths) != len(spec.padded_lengths):
        raise ConfigInvariantViolation(
            f"{spec.name}: {len(spec.padded_lengths)} buckets but "
            f"{len(spec.valid_base64_lengths)} allowed base64 lengths",
            spec.name,
        )

    lengths = spec.valid_base64_lengths
    if any(a >= b for a, b in zip(lengths, lengths[1:])):
        raise ConfigInvariantViolation(
            f"{spec.name}: base64 lengths have incorrect ordering: {list(lengths)}",
            spec.name,
        )

    if spec.max_padded_length != spec.max_byte_length:
        raise ConfigInvariantViolation(
            f"{spec.name}: largest bucket {spec.max_padded_length} "
            f"!= max byte length {spec.max_byte_length}",
            spec.name,
        )


NAME_SPEC = FieldSpec(
    name="name",
    max_byte_length=MAX_NAME_LENGTH_BYTES,
    padded_lengths=(53, 257),
    valid_base64_lengths=(108, 380),
)

BIO_SPEC = FieldSpec(
    name="bio",
    max_byte_length=MAX_BIO_LENGTH_BYTES,
    padded_lengths=(128, 254, 512),
    valid_base64_lengths=(208, 376, 720),
    max_char_length=MAX_BIO_LENGTH_CHARS,
)

BIO_EMOJI_SPEC = FieldSpec(
    name="bio-emoji",
    max_byte_length=MAX_BIO_EMOJI_LENGTH_BYTES,
    padded_lengths=(32,),
    valid_base64_lengths=(80,),
    max_char_length=MAX_BIO_EMOJI_LENGTH_CHARS,
)

FIELD_SPECS = {spec.name: spec for spec in (NAME_SPEC, BIO_SPEC, BIO_EMOJI_SPEC)}

# Fail at import time if a built-in table is malformed
for _spec in FIELD_SPECS.values():
    check_field_spec(_spec)
