"""
Bucket Padding
Pad every field value to one of a few fixed sizes before encryption.

An observer of the ciphertext learns only which bucket a value fell into,
at most log2(len(buckets)) bits, regardless of the value's true length.

Unlike length-prefixed padding, the filler here is a run of 0x00 bytes.
The field format must therefore never place meaningful 0x00 bytes at the
end of a value (see names.py for how names cope with this).
"""

import logging

from profilecrypt.errors import ConfigInvariantViolation, OversizeValue

log = logging.getLogger(__name__)

PADDING_BYTE = b"\x00"


def check_buckets(buckets) -> None:
    """
    Verify a bucket table is usable.

    Raises:
        ConfigInvariantViolation: If the table is empty, holds a
            non-positive size, or is not strictly ascending.
    """
    if not buckets:
        raise ConfigInvariantViolation("Bucket list is empty.")
    if any(size <= 0 for size in buckets):
        raise ConfigInvariantViolation(f"Bucket sizes must be positive: {list(buckets)}")
    for smaller, larger in zip(buckets, buckets[1:]):
        if smaller >= larger:
            raise ConfigInvariantViolation(
                f"Bucket sizes have incorrect ordering: {list(buckets)}"
            )


def select_bucket(length: int, buckets) -> int:
    """
    Pick the smallest bucket that can hold `length` bytes.

    Args:
        length: Size of the unpadded value in bytes.
        buckets: Strictly ascending bucket sizes.

    Returns:
        The chosen bucket size.

    Raises:
        ConfigInvariantViolation: If `buckets` is malformed.
        OversizeValue: If `length` exceeds the largest bucket.
    """
    check_buckets(buckets)

    for size in buckets:
        if length <= size:
            return size

    raise OversizeValue(length, buckets)


def pad_to_bucket(data: bytes, buckets) -> bytes:
    """
    Right-pad data with zero bytes to the smallest bucket that fits.

    Args:
        data: The raw bytes to pad.
        buckets: Strictly ascending bucket sizes.

    Returns:
        Padded bytes, exactly one bucket long.
    """
    bucket_size = select_bucket(len(data), buckets)
    padded = bytes(data) + PADDING_BYTE * (bucket_size - len(data))
    log.debug("Padded %d bytes to bucket %d", len(data), bucket_size)
    return padded


def strip_padding(padded: bytes) -> bytes:
    """Remove the trailing run of zero bytes."""
    return padded.rstrip(PADDING_BYTE)
