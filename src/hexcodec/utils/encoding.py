"""Encoding and decoding utilities."""

from typing import Union

from hexcodec.core.codec import encode, decode
from hexcodec.exceptions import InvalidFormatError


BytesLike = Union[bytes, bytearray, memoryview]


def ensure_bytes(data: Union[BytesLike, str]) -> bytes:
    """
    Ensure data is in bytes format.

    Args:
        data: Bytes-like object or string (UTF-8 encoded)

    Returns:
        bytes: Data as bytes
    """
    if isinstance(data, bytes):
        return data
    elif isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    elif isinstance(data, str):
        return data.encode('utf-8')
    else:
        raise TypeError(f"Expected bytes or str, got {type(data)}")


def ensure_hex_string(data: Union[BytesLike, str]) -> str:
    """
    Ensure data is in canonical uppercase hex format.

    Args:
        data: Bytes-like object to encode, or a hex string to validate

    Returns:
        str: Uppercase hex string

    Raises:
        InvalidFormatError: If a string argument is not valid hex
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return encode(data)
    elif isinstance(data, str):
        decode(data)
        return data.upper()
    else:
        raise TypeError(f"Expected bytes or str, got {type(data)}")


def is_hex_string(text: str) -> bool:
    """Check whether text decodes as hex."""
    try:
        decode(text)
    except (InvalidFormatError, TypeError):
        return False
    return True
