"""
profilecrypt — Basic Usage Example

Encrypts a profile name, bio and bio emoji the way a client would before
uploading them. Every value is padded to a fixed bucket, so the server
only ever sees a few possible ciphertext sizes per field.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from profilecrypt import (
    NAME_SPEC,
    configure_logging,
    generate_profile_key,
    encrypt_profile_name,
    decrypt_profile_name,
    encrypt_profile_bio,
    decrypt_profile_bio,
    encrypt_profile_bio_emoji,
    decrypt_profile_bio_emoji,
)


def main():
    configure_logging()

    # The profile key is shared with contacts, never with the server
    profile_key = generate_profile_key()

    print("=" * 50)
    print("  profilecrypt — Length-hiding Profile Fields")
    print("=" * 50)

    names = [("Alice", "Smith"), ("Bartholomew", "Featherstonehaugh-Montgomery"), ("Zoë", None)]
    print(f"\nName buckets: {list(NAME_SPEC.padded_lengths)}")
    for given, family in names:
        value = encrypt_profile_name(given, family, profile_key)
        print(f"  {given!r} {family!r} -> {len(value.encrypted_base64)} base64 chars")
        decoded = decrypt_profile_name(value.encrypted_base64, profile_key)
        print(f"    decrypted: {decoded.full_name}")

    bio = encrypt_profile_bio("Building things. Mostly tea-powered.", profile_key)
    emoji = encrypt_profile_bio_emoji("🫖", profile_key)
    print(f"\nBio   -> {len(bio.encrypted_base64)} chars: {decrypt_profile_bio(bio.encrypted, profile_key)}")
    print(f"Emoji -> {len(emoji.encrypted_base64)} chars: {decrypt_profile_bio_emoji(emoji.encrypted, profile_key)}")

    # Oversize values are rejected, not truncated
    print("\nAttempting to encrypt an oversize name...")
    if encrypt_profile_name("x" * 200, "y" * 200, profile_key) is None:
        print("  Rejected — larger than the biggest bucket")

    # Wrong key = authentication failure = no name at all
    print("\nAttempting to decrypt with the wrong key...")
    value = encrypt_profile_name("Alice", "Smith", profile_key)
    if decrypt_profile_name(value.encrypted, generate_profile_key()) is None:
        print("  Correctly rejected — wrong key = can't decrypt")


if __name__ == "__main__":
    main()
