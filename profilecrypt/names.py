"""
Name Packing
Serialize a (given name, family name) pair into one byte string.

Wire format:
    UTF8(given) [0x00 UTF8(family)] 0x00*

The trailing 0x00 run is bucket padding. Unpacking splits on 0x00 and
drops empty segments, so the padding disappears without a length header.
The separator and the padding are the same byte and are told apart only
by position. A name component that itself contains 0x00 therefore shifts
the boundary and corrupts the round trip silently.
"""

import logging
from dataclasses import dataclass

from profilecrypt.errors import InvalidUTF8, MissingGivenName

log = logging.getLogger(__name__)

SEPARATOR = 0x00


@dataclass(frozen=True)
class NameComponents:
    """A decoded profile name."""
    given_name: str
    family_name: str | None = None

    @property
    def full_name(self) -> str:
        """Given and family name joined by a space, skipping absent parts."""
        return " ".join(part for part in (self.given_name, self.family_name) if part)


def _encode(value: str) -> bytes:
    try:
        return value.encode("utf-8")
    except (UnicodeEncodeError, AttributeError) as e:
        raise InvalidUTF8("Name component is not representable as UTF-8.") from e


def pack_name(given_name: str, family_name: str | None = None) -> bytes:
    """
    Pack a name into its unpadded wire form.

    An empty given name and embedded 0x00 bytes are accepted here even
    though unpack_name cannot recover them.

    Raises:
        InvalidUTF8: If the given name is missing or a component cannot
            be encoded.
    """
    if given_name is None:
        raise InvalidUTF8("Given name is missing.")

    packed = bytearray(_encode(given_name))
    if family_name is not None:
        packed.append(SEPARATOR)
        packed += _encode(family_name)
    return bytes(packed)


def split_on_null(data: bytes) -> list[bytes]:
    """Split on 0x00 and discard the empty segments."""
    return [segment for segment in bytes(data).split(bytes([SEPARATOR])) if segment]


def unpack_name(data: bytes) -> NameComponents:
    """
    Recover a name from its decrypted (padded) wire form.

    The first segment is the given name and is required. The second, if
    present, is the family name; if it is not valid UTF-8 it is dropped
    rather than failing the whole name. Extra segments are ignored.

    Raises:
        MissingGivenName: If there is no segment, or the first one does
            not decode to a non-empty string.
    """
    segments = split_on_null(data)

    if not segments:
        raise MissingGivenName("Unexpectedly missing given name.")
    try:
        given_name = segments[0].decode("utf-8")
    except UnicodeDecodeError as e:
        raise MissingGivenName("Given name is not valid UTF-8.") from e
    if not given_name:
        raise MissingGivenName("Unexpectedly missing given name.")

    family_name = None
    if len(segments) > 1:
        try:
            family_name = segments[1].decode("utf-8")
        except UnicodeDecodeError:
            log.warning("Dropping family name that is not valid UTF-8")

    return NameComponents(given_name=given_name, family_name=family_name)
