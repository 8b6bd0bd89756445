"""
profilecrypt — Length-hiding profile field encryption
Client-side encryption of small profile fields for an untrusted server.

Each field (name, bio, bio emoji) is:
1. Serialized — names are packed as "<given>\\0<family>"
2. Padded — zero-filled to one of a few fixed bucket sizes
3. Encrypted — AES-256-GCM, nonce and tag framed around the ciphertext
4. Checked — the base64 length must be one the server will accept

The server sees only a handful of possible sizes per field, so the
ciphertext leaks at most which bucket a value fell into.

Usage:
    from profilecrypt import generate_profile_key, encrypt_profile_name
    key = generate_profile_key()
    value = encrypt_profile_name("Alice", "Smith", key)
    upload(value.encrypted_base64)
"""

from profilecrypt.aead import generate_profile_key, encrypt_profile_data, decrypt_profile_data
from profilecrypt.codec import (
    FieldCodec,
    attempt,
    encrypt_profile_name,
    decrypt_profile_name,
    encrypt_profile_bio,
    decrypt_profile_bio,
    encrypt_profile_bio_emoji,
    decrypt_profile_bio_emoji,
)
from profilecrypt.config import Settings, get_settings, configure_logging
from profilecrypt.errors import (
    ProfileFieldError,
    ProfileDataError,
    ProfileConfigError,
    InvalidUTF8,
    MissingGivenName,
    OversizeValue,
    EncryptionFailure,
    DecryptionFailure,
    ConfigInvariantViolation,
    UnexpectedEncodedLength,
)
from profilecrypt.fields import FieldSpec, NAME_SPEC, BIO_SPEC, BIO_EMOJI_SPEC, FIELD_SPECS
from profilecrypt.names import NameComponents, pack_name, unpack_name
from profilecrypt.padding import select_bucket, pad_to_bucket
from profilecrypt.value import EncryptedProfileValue, is_valid_length

__version__ = "0.1.0"
__all__ = [
    "FieldCodec",
    "attempt",
    "encrypt_profile_name",
    "decrypt_profile_name",
    "encrypt_profile_bio",
    "decrypt_profile_bio",
    "encrypt_profile_bio_emoji",
    "decrypt_profile_bio_emoji",
    "generate_profile_key",
    "encrypt_profile_data",
    "decrypt_profile_data",
    "Settings",
    "get_settings",
    "configure_logging",
    "ProfileFieldError",
    "ProfileDataError",
    "ProfileConfigError",
    "InvalidUTF8",
    "MissingGivenName",
    "OversizeValue",
    "EncryptionFailure",
    "DecryptionFailure",
    "ConfigInvariantViolation",
    "UnexpectedEncodedLength",
    "FieldSpec",
    "NAME_SPEC",
    "BIO_SPEC",
    "BIO_EMOJI_SPEC",
    "FIELD_SPECS",
    "NameComponents",
    "pack_name",
    "unpack_name",
    "select_bucket",
    "pad_to_bucket",
    "EncryptedProfileValue",
    "is_valid_length",
]
