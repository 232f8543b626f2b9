"""Core hex codec and JPEG APPn segments."""

from hexcodec.core.codec import HEX_ALPHABET, encode, decode
from hexcodec.core.segment import (
    SEGMENT_LENGTH_SIZE,
    MAX_SEGMENT_PAYLOAD,
    APP1_MARKER,
    APP11_MARKER,
    XMP_START,
    length_to_bytes,
    length_from_bytes,
    insert_segments,
    find_jumbf_insertion_point,
)

__all__ = [
    "HEX_ALPHABET",
    "encode",
    "decode",
    "SEGMENT_LENGTH_SIZE",
    "MAX_SEGMENT_PAYLOAD",
    "APP1_MARKER",
    "APP11_MARKER",
    "XMP_START",
    "length_to_bytes",
    "length_from_bytes",
    "insert_segments",
    "find_jumbf_insertion_point",
]
