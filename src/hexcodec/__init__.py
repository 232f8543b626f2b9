"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "hexcodec Team"
__description__ = "Uppercase hex encoding and decoding for byte sequences"

from .core.codec import encode, decode, HEX_ALPHABET
from .core.segment import (
    length_to_bytes,
    length_from_bytes,
    insert_segments,
    find_jumbf_insertion_point,
)
from .exceptions import HexCodecException, InvalidFormatError, SegmentLengthError, JpegFormatError

__all__ = [
    "encode",
    "decode",
    "HEX_ALPHABET",
    "length_to_bytes",
    "length_from_bytes",
    "insert_segments",
    "find_jumbf_insertion_point",
    "HexCodecException",
    "InvalidFormatError",
    "SegmentLengthError",
    "JpegFormatError",
]
