"""Hex Codec: bytes to uppercase hex text and back."""

from typing import Iterable, Union

from hexcodec.exceptions import InvalidFormatError


ByteSequence = Union[bytes, bytearray, memoryview, Iterable[int]]

# Fixed uppercase alphabet; a nibble value indexes directly into it.
HEX_ALPHABET = "0123456789ABCDEF"

# One two-character entry per byte value, built from the nibble table.
# Per-byte "%02X" formatting is markedly slower and is not used.
_BYTE_TO_HEX = tuple(
    HEX_ALPHABET[value >> 4] + HEX_ALPHABET[value & 0x0F] for value in range(256)
)

_HEX_TO_NIBBLE = {char: value for value, char in enumerate(HEX_ALPHABET)}
_HEX_TO_NIBBLE.update({char.lower(): value for value, char in enumerate(HEX_ALPHABET)})


def encode(data: ByteSequence) -> str:
    """
    Encode a byte sequence as an uppercase hex string.

    Each byte becomes two characters, high nibble first. No separators
    and no '0x' prefix are emitted.

    Args:
        data: bytes, bytearray, memoryview or an iterable of ints in 0..255

    Returns:
        str: Uppercase hex string of length 2 * len(data)

    Raises:
        TypeError: If data is not a byte sequence
        ValueError: If an iterable contains a value outside 0..255
    """
    if isinstance(data, (int, str)):
        raise TypeError(f"Expected a byte sequence, got {type(data).__name__}")
    if not isinstance(data, (bytes, bytearray)):
        data = bytes(data)
    return "".join([_BYTE_TO_HEX[value] for value in data])


def decode(text: str) -> bytes:
    """
    Decode a hex string into bytes.

    Digits are read two at a time, left to right. Upper and lower case
    letters are both accepted; prefixes, whitespace and separators are not.

    Args:
        text: Hex string of even length

    Returns:
        bytes: Decoded bytes of length len(text) // 2

    Raises:
        TypeError: If text is not a str
        InvalidFormatError: If the length is odd or a group is not hex
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    length = len(text)
    if length % 2 != 0:
        raise InvalidFormatError("Hex string has an odd number of characters")

    result = bytearray(length // 2)
    for i in range(0, length, 2):
        high = _HEX_TO_NIBBLE.get(text[i])
        low = _HEX_TO_NIBBLE.get(text[i + 1])
        if high is None or low is None:
            group = text[i:i + 2]
            raise InvalidFormatError(
                f"Invalid hex digit group {group!r} at position {i}",
                text=group,
                position=i,
            )
        result[i // 2] = (high << 4) | low
    return bytes(result)
