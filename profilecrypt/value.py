"""
Encrypted Profile Values
The ciphertext handed to transport, plus its length allow-list.
"""

import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class EncryptedProfileValue:
    """
    One encrypted profile field, ready for upload.

    The server rejects any value whose base64 length is outside the
    published allow-list, so every value carries the list it must satisfy.
    """
    encrypted: bytes
    valid_base64_lengths: tuple[int, ...]

    @property
    def encrypted_base64(self) -> str:
        return base64.b64encode(self.encrypted).decode()

    @property
    def has_valid_base64_length(self) -> bool:
        return is_valid_length(self)

    def to_dict(self) -> dict:
        return {"ciphertext": self.encrypted_base64}


def is_valid_length(value: EncryptedProfileValue) -> bool:
    """Check the base64 length of the ciphertext against the allow-list."""
    return len(value.encrypted_base64) in value.valid_base64_lengths
