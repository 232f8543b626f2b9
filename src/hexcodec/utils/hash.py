"""SHA-256 digest utilities."""

import base64
import hashlib
from typing import Union

from hexcodec.core.codec import encode


def sha256(data: Union[bytes, str]) -> bytes:
    """
    Compute SHA-256 hash of data.

    Args:
        data: Bytes or string to hash

    Returns:
        bytes: 32-byte SHA-256 hash
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hashlib.sha256(data).digest()


def hash_of_bytes(data: Union[bytes, str]) -> str:
    """
    Base64 representation of the SHA-256 of data, without line breaks.

    Args:
        data: Bytes or string to hash

    Returns:
        str: 44-character Base64 string
    """
    return base64.b64encode(sha256(data)).decode('ascii')


def hex_digest(data: Union[bytes, str]) -> str:
    """Uppercase hex SHA-256 digest of data."""
    return encode(sha256(data))
