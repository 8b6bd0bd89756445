"""
Field Codec
Encrypt and decrypt profile fields through the padding pipeline.

Flow for encrypting a field:
1. Serialize the content (pack the name, or UTF-8 encode the text)
2. Pick the smallest bucket that fits and zero-pad to it
3. Encrypt the padded bytes
4. Check the base64 length against the field's allow-list

Flow for decrypting a field:
1. Decrypt (authentication failure means no plaintext at all)
2. Unpack the name, or strip the zero padding and decode the text

An observer sees one of a few fixed-size blobs per field type.
"""

import base64
import binascii
import logging

from profilecrypt.aead import AESGCMService
from profilecrypt.config import Settings, get_settings
from profilecrypt.errors import (
    DecryptionFailure,
    EncryptionFailure,
    InvalidUTF8,
    ProfileConfigError,
    ProfileDataError,
    ProfileFieldError,
    UnexpectedEncodedLength,
)
from profilecrypt.fields import BIO_EMOJI_SPEC, BIO_SPEC, NAME_SPEC, FieldSpec, check_field_spec
from profilecrypt.names import NameComponents, pack_name, unpack_name
from profilecrypt.padding import pad_to_bucket, strip_padding
from profilecrypt.value import EncryptedProfileValue, is_valid_length

log = logging.getLogger(__name__)


class FieldCodec:
    """
    Encrypts and decrypts one profile field type.

    Holds only immutable configuration and a stateless service, so a
    single instance can be shared across threads.

    Args:
        spec: Size tables for the field. Checked on construction.
        service: Object with encrypt(data, key) and decrypt(data, key)
            returning bytes or None. Defaults to AES-256-GCM.
    """

    def __init__(self, spec: FieldSpec, service=None):
        check_field_spec(spec)
        self.spec = spec
        self.service = service or AESGCMService()

    # Encrypt

    def encrypt_bytes(self, data: bytes, key: bytes) -> EncryptedProfileValue:
        """
        Pad, encrypt and length-check already-serialized field bytes.

        Raises:
            OversizeValue: If data is larger than every bucket.
            EncryptionFailure: If the service declines (e.g. malformed key).
            UnexpectedEncodedLength: If the ciphertext does not match the
                allow-list, meaning the FieldSpec tables disagree.
        """
        try:
            padded = pad_to_bucket(data, self.spec.padded_lengths)
        except ProfileFieldError as e:
            e.field = self.spec.name
            raise

        encrypted = self.service.encrypt(padded, key)
        if encrypted is None:
            raise EncryptionFailure("Could not encrypt.", self.spec.name)

        value = EncryptedProfileValue(
            encrypted=encrypted,
            valid_base64_lengths=self.spec.valid_base64_lengths,
        )
        if not is_valid_length(value):
            raise UnexpectedEncodedLength(
                len(value.encrypted_base64), self.spec.valid_base64_lengths, self.spec.name
            )
        return value

    def encrypt_text(self, text: str, key: bytes) -> EncryptedProfileValue:
        """Encrypt a plain text field (bio, bio emoji)."""
        try:
            data = text.encode("utf-8")
        except (UnicodeEncodeError, AttributeError) as e:
            raise InvalidUTF8("Invalid value.", self.spec.name) from e
        return self.encrypt_bytes(data, key)

    def encrypt_name(
        self, given_name: str, family_name: str | None, key: bytes
    ) -> EncryptedProfileValue:
        """Pack and encrypt a name."""
        try:
            packed = pack_name(given_name, family_name)
        except InvalidUTF8 as e:
            e.field = self.spec.name
            raise
        return self.encrypt_bytes(packed, key)

    # Decrypt

    def decrypt_bytes(self, ciphertext: bytes | str, key: bytes) -> bytes:
        """
        Decrypt a field to its padded plaintext.

        `ciphertext` may be raw bytes or the base64 text the server stores.

        Raises:
            DecryptionFailure: On malformed input or a failed auth tag.
        """
        if isinstance(ciphertext, str):
            try:
                ciphertext = base64.b64decode(ciphertext, validate=True)
            except (binascii.Error, ValueError) as e:
                raise DecryptionFailure("Ciphertext is not valid base64.", self.spec.name) from e

        decrypted = self.service.decrypt(ciphertext, key)
        if decrypted is None:
            raise DecryptionFailure("Could not decrypt.", self.spec.name)
        return decrypted

    def decrypt_text(self, ciphertext: bytes | str, key: bytes) -> str:
        """Decrypt a plain text field and drop its zero padding."""
        data = strip_padding(self.decrypt_bytes(ciphertext, key))
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUTF8("Decrypted value is not valid UTF-8.", self.spec.name) from e

    def decrypt_name(self, ciphertext: bytes | str, key: bytes) -> NameComponents:
        """Decrypt and unpack a name."""
        data = self.decrypt_bytes(ciphertext, key)
        try:
            return unpack_name(data)
        except ProfileFieldError as e:
            e.field = self.spec.name
            raise


def attempt(operation, *args, settings: Settings | None = None):
    """
    Run a codec operation, mapping failures to None.

    User-data failures are logged and swallowed: the caller sees an unset
    field. Configuration defects are logged at ERROR and re-raised when
    settings.strict is set.
    """
    settings = settings or get_settings()
    try:
        return operation(*args)
    except ProfileDataError as e:
        log.warning("Profile field %s unavailable: %s", e.field or "?", e)
        return None
    except ProfileConfigError as e:
        log.error("Profile field %s misconfigured: %s", e.field or "?", e)
        if settings.strict:
            raise
        return None


name_codec = FieldCodec(NAME_SPEC)
bio_codec = FieldCodec(BIO_SPEC)
bio_emoji_codec = FieldCodec(BIO_EMOJI_SPEC)


def encrypt_profile_name(
    given_name: str, family_name: str | None, key: bytes
) -> EncryptedProfileValue | None:
    return attempt(name_codec.encrypt_name, given_name, family_name, key)


def decrypt_profile_name(ciphertext: bytes | str, key: bytes) -> NameComponents | None:
    return attempt(name_codec.decrypt_name, ciphertext, key)


def encrypt_profile_bio(bio: str, key: bytes) -> EncryptedProfileValue | None:
    return attempt(bio_codec.encrypt_text, bio, key)


def decrypt_profile_bio(ciphertext: bytes | str, key: bytes) -> str | None:
    return attempt(bio_codec.decrypt_text, ciphertext, key)


def encrypt_profile_bio_emoji(emoji: str, key: bytes) -> EncryptedProfileValue | None:
    return attempt(bio_emoji_codec.encrypt_text, emoji, key)


def decrypt_profile_bio_emoji(ciphertext: bytes | str, key: bytes) -> str | None:
    return attempt(bio_emoji_codec.decrypt_text, ciphertext, key)
