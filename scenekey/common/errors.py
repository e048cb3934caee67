"""
Error hierarchy for the scene key codec.

Every failure is a ValueError subclass so callers that only care about
"bad input" can catch that, while callers that need to tell an invalid
key from a corrupt ciphertext can catch the specific class.
"""


class SceneKeyError(ValueError):
    """Base error."""


class KeyDerivationError(SceneKeyError):
    """Raised when a key string does not yield exactly 32 bytes."""


class MalformedCiphertextError(SceneKeyError):
    """Raised on invalid Base64 or a length that is not whole AES blocks."""


class PaddingError(SceneKeyError):
    """
    Raised when decrypted bytes carry invalid PKCS#7 padding.
    Usually means the wrong key or a corrupted ciphertext.
    """


class EncodingError(SceneKeyError):
    """Raised when decrypted bytes are not valid UTF-8."""
