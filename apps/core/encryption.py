"""
Encryption utilities for provider credentials.

AES-256-GCM encryption for payment gateway tokens and keys stored in the
database.
"""
import base64
import logging
import os
from typing import List
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from django.conf import settings

logger = logging.getLogger(__name__)

KEY_HINT = (
    "Generate with: python -c \"import os, base64; "
    "print(base64.b64encode(os.urandom(32)).decode())\""
)


def validate_encryption_key(key_b64: str) -> bytes:
    """
    Validate encryption key strength and return the decoded key.

    Args:
        key_b64: Base64-encoded encryption key

    Returns:
        bytes: Decoded 32-byte key

    Raises:
        ValueError: If the key is missing, not base64, not 32 bytes, or weak
    """
    if not key_b64:
        raise ValueError(f"Encryption key is required. {KEY_HINT}")

    try:
        key = base64.b64decode(key_b64, validate=True)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Encryption key must be valid base64: {e}. {KEY_HINT}")

    if len(key) != 32:
        raise ValueError(
            f"Encryption key must be exactly 32 bytes (256 bits). "
            f"Current length: {len(key)} bytes. {KEY_HINT}"
        )

    if len(set(key)) < 16:
        raise ValueError(
            f"Encryption key has insufficient entropy. "
            f"Found only {len(set(key))} unique bytes, need at least 16. {KEY_HINT}"
        )

    return key


class EncryptionService:
    """
    Encrypt and decrypt sensitive values.

    Supports key rotation: ENCRYPTION_KEY encrypts, ENCRYPTION_OLD_KEYS are
    tried in order when decrypting.
    """

    def __init__(self, key=None, old_keys=None):
        self.key = validate_encryption_key(key or settings.ENCRYPTION_KEY)
        self.cipher = AESGCM(self.key)

        self.old_ciphers: List[AESGCM] = []
        for i, old_key_b64 in enumerate(old_keys or getattr(settings, 'ENCRYPTION_OLD_KEYS', [])):
            try:
                self.old_ciphers.append(AESGCM(validate_encryption_key(old_key_b64)))
            except ValueError as e:
                logger.warning(f"Invalid old encryption key at index {i}: {e}")

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext.

        Returns:
            Base64 of nonce + ciphertext
        """
        if not plaintext:
            return plaintext

        nonce = os.urandom(12)
        ciphertext = self.cipher.encrypt(nonce, plaintext.encode('utf-8'), None)
        return base64.b64encode(nonce + ciphertext).decode('utf-8')

    def decrypt(self, encrypted_data: str) -> str:
        """
        Decrypt a value produced by encrypt().

        Raises:
            ValueError: If no configured key can decrypt the value
        """
        if not encrypted_data:
            return encrypted_data

        try:
            data = base64.b64decode(encrypted_data)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Decryption failed: {e}")

        nonce, ciphertext = data[:12], data[12:]
        for cipher in [self.cipher] + self.old_ciphers:
            try:
                return cipher.decrypt(nonce, ciphertext, None).decode('utf-8')
            except Exception:
                continue
        raise ValueError("Decryption failed with all available keys")


_encryption_service = None


def get_encryption_service() -> EncryptionService:
    """Get or create the global encryption service."""
    global _encryption_service
    if _encryption_service is None:
        _encryption_service = EncryptionService()
    return _encryption_service


def mask_secret(value: str, mask_char: str = '*', visible_chars: int = 4) -> str:
    """
    Mask a secret for display, keeping only the last characters.

    Example:
        mask_secret('sk_live_abcdef1234') -> '**************1234'
    """
    if not value:
        return ''
    if len(value) <= visible_chars:
        return mask_char * len(value)
    return mask_char * (len(value) - visible_chars) + value[-visible_chars:]
