"""
Profile AEAD
AES-256-GCM encryption of padded profile fields.

Ciphertext layout:
    nonce (12 bytes) || AES-GCM ciphertext || tag (16 bytes)

The framing adds a fixed 28 bytes to every value, so each padding bucket
maps to exactly one ciphertext size (and one base64 length).

Both functions follow the `bytes | None` collaborator contract: a malformed
key, a failed authentication tag, or truncated input yields None and never
a partial plaintext.
"""

import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

log = logging.getLogger(__name__)

PROFILE_KEY_SIZE = 32  # 256 bits
NONCE_SIZE = 12        # AES-GCM standard
TAG_SIZE = 16
OVERHEAD = NONCE_SIZE + TAG_SIZE


def generate_profile_key() -> bytes:
    """Generate a random 256-bit profile key."""
    return AESGCM.generate_key(bit_length=PROFILE_KEY_SIZE * 8)


def _cipher(key: bytes) -> AESGCM | None:
    if not isinstance(key, (bytes, bytearray)) or len(key) != PROFILE_KEY_SIZE:
        log.warning("Profile key must be %d bytes", PROFILE_KEY_SIZE)
        return None
    return AESGCM(bytes(key))


def encrypt_profile_data(data: bytes, key: bytes) -> bytes | None:
    """Encrypt data with AES-256-GCM. Returns nonce + ciphertext + tag."""
    aesgcm = _cipher(key)
    if aesgcm is None:
        return None
    nonce = os.urandom(NONCE_SIZE)
    return nonce + aesgcm.encrypt(nonce, bytes(data), None)


def decrypt_profile_data(encrypted: bytes, key: bytes) -> bytes | None:
    """Decrypt AES-256-GCM encrypted data produced by encrypt_profile_data."""
    aesgcm = _cipher(key)
    if aesgcm is None:
        return None
    if len(encrypted) < OVERHEAD:
        log.warning("Encrypted profile data too short: %d bytes", len(encrypted))
        return None

    nonce = bytes(encrypted[:NONCE_SIZE])
    try:
        return aesgcm.decrypt(nonce, bytes(encrypted[NONCE_SIZE:]), None)
    except InvalidTag:
        return None


class AESGCMService:
    """
    The default encryption service used by FieldCodec.

    Any object with the same encrypt/decrypt signatures can be injected
    in its place.
    """

    def encrypt(self, data: bytes, key: bytes) -> bytes | None:
        return encrypt_profile_data(data, key)

    def decrypt(self, data: bytes, key: bytes) -> bytes | None:
        return decrypt_profile_data(data, key)
