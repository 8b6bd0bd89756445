"""
Profile Field Errors
Typed failures for the profile field pipeline.

Two families:
1. ProfileDataError — driven by user data or keys. The field is treated
   as unset; nothing else is affected.
2. ProfileConfigError — a defect in the static FieldSpec tables. These
   indicate a programming mistake, not bad input, and should fail loudly.
"""


class ProfileFieldError(Exception):
    """Base class for all profile field failures."""

    def __init__(self, message: str = "", field: str | None = None):
        super().__init__(message)
        self.field = field


class ProfileDataError(ProfileFieldError):
    """A per-call failure caused by the value or key being processed."""


class ProfileConfigError(ProfileFieldError):
    """A failure caused by a malformed field configuration table."""


class InvalidUTF8(ProfileDataError):
    """Text could not be converted to or from UTF-8."""


class MissingGivenName(ProfileDataError):
    """A decrypted name payload has no usable given name."""


class OversizeValue(ProfileDataError):
    """The value is larger than every padding bucket of the field."""

    def __init__(self, length: int, buckets, field: str | None = None):
        super().__init__(f"Oversize value: {length} > {list(buckets)}", field)
        self.length = length
        self.buckets = tuple(buckets)


class EncryptionFailure(ProfileDataError):
    """The encryption service declined to encrypt (e.g. malformed key)."""


class DecryptionFailure(ProfileDataError):
    """Authentication failed or the ciphertext was malformed."""


class ConfigInvariantViolation(ProfileConfigError):
    """A bucket table is empty, unsorted, or misaligned with its lengths."""


class UnexpectedEncodedLength(ProfileConfigError):
    """Ciphertext landed outside the field's allowed base64 lengths."""

    def __init__(self, length: int, allowed, field: str | None = None):
        super().__init__(
            f"Value has invalid base64 length: {length} not in {list(allowed)}",
            field,
        )
        self.length = length
        self.allowed = tuple(allowed)
