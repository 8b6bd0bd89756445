"""
Tests for bucket selection, zero padding and name packing.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from profilecrypt.errors import ConfigInvariantViolation, InvalidUTF8, MissingGivenName, OversizeValue
from profilecrypt.fields import NAME_SPEC
from profilecrypt.names import NameComponents, pack_name, split_on_null, unpack_name
from profilecrypt.padding import check_buckets, pad_to_bucket, select_bucket, strip_padding


NAME_BUCKETS = NAME_SPEC.padded_lengths


def test_select_smallest_fitting_bucket():
    """Every length up to the largest bucket picks the smallest bucket >= length."""
    print("Testing bucket selection...", end=" ")
    buckets = (128, 254, 512)
    for length in range(0, buckets[-1] + 1):
        expected = min(b for b in buckets if b >= length)
        assert select_bucket(length, buckets) == expected, f"Wrong bucket for {length}"
    print("PASS")


def test_select_bucket_boundaries():
    """Exact bucket sizes stay in their own bucket."""
    print("Testing bucket boundaries...", end=" ")
    assert select_bucket(0, NAME_BUCKETS) == 53
    assert select_bucket(53, NAME_BUCKETS) == 53
    assert select_bucket(54, NAME_BUCKETS) == 257
    assert select_bucket(257, NAME_BUCKETS) == 257
    print("PASS")


def test_oversize_value_rejected():
    """Lengths past the largest bucket fail with OversizeValue."""
    print("Testing oversize values...", end=" ")
    for length in [258, 300, 10_000]:
        try:
            select_bucket(length, NAME_BUCKETS)
        except OversizeValue as e:
            assert e.length == length
            assert e.buckets == NAME_BUCKETS
        else:
            raise AssertionError(f"{length} should have raised OversizeValue")
    print("PASS")


def test_malformed_buckets_rejected():
    """Unsorted, duplicated, empty or non-positive tables are config defects."""
    print("Testing malformed bucket tables...", end=" ")
    for buckets in [(257, 53), (53, 53), (), (0, 53), (-1,)]:
        try:
            check_buckets(buckets)
        except ConfigInvariantViolation:
            pass
        else:
            raise AssertionError(f"{buckets} should have been rejected")

    # Checked before selection, even when the length would fit
    try:
        select_bucket(1, (257, 53))
    except ConfigInvariantViolation:
        pass
    else:
        raise AssertionError("Unsorted buckets should fail before selection")
    print("PASS")


def test_pad_to_bucket():
    """Padding fills with zero bytes to exactly the bucket size."""
    print("Testing zero padding...", end=" ")
    padded = pad_to_bucket(b"Alice", NAME_BUCKETS)
    assert len(padded) == 53
    assert padded.startswith(b"Alice")
    assert padded[5:] == b"\x00" * 48
    assert strip_padding(padded) == b"Alice"

    assert pad_to_bucket(b"", NAME_BUCKETS) == b"\x00" * 53
    assert len(pad_to_bucket(b"x" * 257, NAME_BUCKETS)) == 257
    print("PASS")


def test_pack_name():
    """Given and family name are joined by a single null byte."""
    print("Testing name packing...", end=" ")
    assert pack_name("Alice", "Smith") == b"Alice\x00Smith"
    assert len(pack_name("Alice", "Smith")) == 11
    assert pack_name("Alice") == b"Alice"
    assert pack_name("Alice", "") == b"Alice\x00"
    assert pack_name("Zoë", "Ångström") == "Zoë".encode() + b"\x00" + "Ångström".encode()
    print("PASS")


def test_pack_name_invalid_utf8():
    """Unencodable components and a missing given name fail with InvalidUTF8."""
    print("Testing name packing failures...", end=" ")
    for given, family in [("\ud800", None), ("Alice", "\udfff"), (None, "Smith")]:
        try:
            pack_name(given, family)
        except InvalidUTF8:
            pass
        else:
            raise AssertionError(f"{given!r}/{family!r} should have raised InvalidUTF8")
    print("PASS")


def test_pack_name_is_lenient():
    """Packing accepts an empty given name and embedded nulls."""
    print("Testing lenient packing...", end=" ")
    assert pack_name("") == b""
    assert pack_name("Al\x00ice") == b"Al\x00ice"
    print("PASS")


def test_split_on_null_drops_empty_segments():
    """Runs of nulls (separator + padding) never produce empty segments."""
    print("Testing null splitting...", end=" ")
    assert split_on_null(b"Alice\x00Smith\x00\x00\x00") == [b"Alice", b"Smith"]
    assert split_on_null(b"\x00\x00Alice\x00\x00Smith") == [b"Alice", b"Smith"]
    assert split_on_null(b"\x00" * 53) == []
    assert split_on_null(b"") == []
    print("PASS")


def test_unpack_name():
    """Padded wire bytes unpack to the original components."""
    print("Testing name unpacking...", end=" ")
    padded = pad_to_bucket(pack_name("Alice", "Smith"), NAME_BUCKETS)
    assert unpack_name(padded) == NameComponents("Alice", "Smith")

    padded = pad_to_bucket(pack_name("Alice"), NAME_BUCKETS)
    assert unpack_name(padded) == NameComponents("Alice", None)

    # An empty family name leaves only the separator, which is dropped
    padded = pad_to_bucket(pack_name("Alice", ""), NAME_BUCKETS)
    assert unpack_name(padded) == NameComponents("Alice", None)

    # Segments past the family name are ignored
    assert unpack_name(b"A\x00B\x00C") == NameComponents("A", "B")
    print("PASS")


def test_unpack_name_missing_given_name():
    """All-padding or undecodable first segments fail with MissingGivenName."""
    print("Testing missing given name...", end=" ")
    for data in [b"\x00" * 53, b"", b"\xff\xfe\x00Smith"]:
        try:
            unpack_name(data)
        except MissingGivenName:
            pass
        else:
            raise AssertionError(f"{data!r} should have raised MissingGivenName")
    print("PASS")


def test_unpack_name_bad_family_name_dropped():
    """A family name that is not UTF-8 is treated as absent."""
    print("Testing undecodable family name...", end=" ")
    assert unpack_name(b"Alice\x00\xff\xfe\x00\x00") == NameComponents("Alice", None)
    print("PASS")


def test_embedded_null_shifts_boundary():
    """A null inside a name is indistinguishable from the separator."""
    print("Testing embedded null corruption...", end=" ")
    padded = pad_to_bucket(pack_name("Al\x00ice", "Smith"), NAME_BUCKETS)
    assert unpack_name(padded) == NameComponents("Al", "ice")

    # A leading null is swallowed like padding
    assert unpack_name(b"\x00Smith") == NameComponents("Smith", None)
    print("PASS")


def test_full_name():
    print("Testing full name...", end=" ")
    assert NameComponents("Alice", "Smith").full_name == "Alice Smith"
    assert NameComponents("Alice").full_name == "Alice"
    print("PASS")


def main():
    print("=" * 50)
    print("  Padding + Name Packing Tests")
    print("=" * 50)
    print()

    tests = [
        test_select_smallest_fitting_bucket,
        test_select_bucket_boundaries,
        test_oversize_value_rejected,
        test_malformed_buckets_rejected,
        test_pad_to_bucket,
        test_pack_name,
        test_pack_name_invalid_utf8,
        test_pack_name_is_lenient,
        test_split_on_null_drops_empty_segments,
        test_unpack_name,
        test_unpack_name_missing_given_name,
        test_unpack_name_bad_family_name_dropped,
        test_embedded_null_shifts_boundary,
        test_full_name,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"FAIL: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print()
    print(f"Results: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
