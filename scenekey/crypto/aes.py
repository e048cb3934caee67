"""
AES Encryption & Decryption Utilities.

- Implements AES-256 in CBC mode with a fixed all-zero IV.
- Uses PKCS#7 padding for block alignment.
- Derives the 32-byte key by space-padding the key string.

The zero IV is deliberate: scene keys are encrypted independently by
cooperating services and compared as ciphertext, so identical input
must give identical output. Do not replace it with a random IV.
"""

from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding

from scenekey.common.errors import (
    EncodingError,
    KeyDerivationError,
    MalformedCiphertextError,
    PaddingError,
)
from scenekey.common.log import get_logger
from scenekey.common.utils import b64d, b64e

AES_BLOCK_SIZE_BYTES = 128 // 8
AES_KEY_SIZE_BYTES = 256 // 8
ZERO_IV = bytes(AES_BLOCK_SIZE_BYTES)
KEY_PAD_CHAR = " "

logger = get_logger("crypto.aes")


def derive_key(key: Optional[str]) -> bytes:
    """
    Derives the 32-byte AES-256 key from a key string.

    The string is right-padded with spaces to 32 characters and encoded
    as UTF-8. Only ASCII keys of at most 32 characters encode to exactly
    32 bytes; anything else is rejected rather than truncated.
    """
    padded = (key or "").ljust(AES_KEY_SIZE_BYTES, KEY_PAD_CHAR)
    key_bytes = padded.encode('utf-8')
    if len(key_bytes) != AES_KEY_SIZE_BYTES:
        raise KeyDerivationError(
            "Key must be ASCII and at most 32 characters so it yields exactly 32 bytes."
        )
    return key_bytes


def _cipher(key: bytes) -> Cipher:
    if len(key) != AES_KEY_SIZE_BYTES:
        raise KeyDerivationError("AES key must be 32 bytes (for AES-256).")
    return Cipher(algorithms.AES(key), modes.CBC(ZERO_IV))


def encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypts plaintext using AES-256-CBC (zero IV) with PKCS#7 padding.

    Args:
        key: The 32-byte AES-256 key.
        plaintext: The data to encrypt (bytes).

    Returns:
        The encrypted ciphertext (bytes), always one or more whole blocks.
    """
    encryptor = _cipher(key).encryptor()

    padder = padding.PKCS7(AES_BLOCK_SIZE_BYTES * 8).padder()
    padded_plaintext = padder.update(plaintext) + padder.finalize()

    return encryptor.update(padded_plaintext) + encryptor.finalize()


def decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypts AES-256-CBC (zero IV) ciphertext and unpads with PKCS#7.

    Args:
        key: The 32-byte AES-256 key.
        ciphertext: The data to decrypt (bytes).

    Returns:
        The original plaintext (bytes).
    """
    decryptor = _cipher(key).decryptor()

    if not ciphertext or len(ciphertext) % AES_BLOCK_SIZE_BYTES:
        raise MalformedCiphertextError(
            f"Ciphertext length {len(ciphertext)} is not a positive multiple of "
            f"{AES_BLOCK_SIZE_BYTES} bytes."
        )

    padded_plaintext = decryptor.update(ciphertext) + decryptor.finalize()

    try:
        unpadder = padding.PKCS7(AES_BLOCK_SIZE_BYTES * 8).unpadder()
        return unpadder.update(padded_plaintext) + unpadder.finalize()
    except ValueError as e:
        # Invalid padding almost always means the wrong key.
        logger.debug("PKCS#7 unpadding failed for %d-byte ciphertext", len(ciphertext))
        raise PaddingError("Decryption failed. Data may be corrupt or key is incorrect.") from e


def encode(plaintext: str, key: Optional[str]) -> str:
    """Encrypts UTF-8 text and returns the ciphertext as Base64."""
    return b64e(encrypt(derive_key(key), plaintext.encode('utf-8')))


def decode(ciphertext_b64: str, key: Optional[str]) -> str:
    """Decrypts a Base64 ciphertext produced by encode() back to text."""
    key_bytes = derive_key(key)
    plaintext = decrypt(key_bytes, b64d(ciphertext_b64))
    try:
        return plaintext.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.debug("Decrypted %d bytes are not valid UTF-8", len(plaintext))
        raise EncodingError("Decrypted data is not valid UTF-8.") from e
