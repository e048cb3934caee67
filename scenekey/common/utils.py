"""
Common Utility Helpers.

- Base64 encoding/decoding for ciphertext on the wire.
"""

import base64
import binascii

from scenekey.common.errors import MalformedCiphertextError


def b64e(b: bytes) -> str:
    """Encodes bytes into a standard, padded Base64 string."""
    return base64.b64encode(b).decode('ascii')


def b64d(s: str) -> bytes:
    """
    Decodes a Base64 string into bytes.

    Decoding is strict: characters outside the standard alphabet or
    broken padding are rejected instead of being silently discarded.
    """
    try:
        return base64.b64decode(s, validate=True)
    except (TypeError, ValueError, binascii.Error) as e:
        raise MalformedCiphertextError("Invalid Base64 string.") from e
