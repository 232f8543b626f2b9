"""JPEG APPn segments.

An APPn segment header is the marker (FF En) followed by a 2-byte
big-endian length that counts the length field itself but not the marker.
"""

from typing import BinaryIO, List, Tuple

from hexcodec.core.codec import encode, decode
from hexcodec.exceptions import JpegFormatError, SegmentLengthError
from hexcodec.utils.io import read_stream


SEGMENT_LENGTH_SIZE = 2
MAX_SEGMENT_PAYLOAD = 0xFFFF - SEGMENT_LENGTH_SIZE

SOI_MARKER = b"\xff\xd8"
APP0_MARKER = b"\xff\xe0"
APP1_MARKER = b"\xff\xe1"
APP11_MARKER = b"\xff\xeb"
APP15_MARKER = b"\xff\xef"

XMP_START = b"http://ns.adobe.com/xap/1.0/"


def length_to_bytes(payload_size: int) -> bytes:
    """
    Build the length field for a segment carrying payload_size bytes.

    Args:
        payload_size: Number of payload bytes following the length field

    Returns:
        bytes: 2-byte big-endian length (payload_size + 2)

    Raises:
        SegmentLengthError: If payload_size is not an int or does not fit a segment
    """
    if not isinstance(payload_size, int) or isinstance(payload_size, bool):
        raise SegmentLengthError(
            f"Segment payload size must be an int, got {type(payload_size).__name__}"
        )
    if payload_size < 0 or payload_size > MAX_SEGMENT_PAYLOAD:
        raise SegmentLengthError(
            f"Segment payload must be 0..{MAX_SEGMENT_PAYLOAD} bytes, got {payload_size}"
        )

    total = payload_size + SEGMENT_LENGTH_SIZE
    if total < 256:
        return bytes([0x00, total])

    digits = format(total, "x")
    # Pad to an even number of digits, e.g. ffb -> 0ffb
    if len(digits) % 2 != 0:
        digits = "0" + digits
    return decode(digits)


def length_from_bytes(field: bytes) -> int:
    """
    Read the payload size from a segment length field.

    Args:
        field: The 2 bytes following the segment marker

    Returns:
        int: Payload size, excluding the length field itself

    Raises:
        SegmentLengthError: If the field is malformed
    """
    if len(field) != SEGMENT_LENGTH_SIZE:
        raise SegmentLengthError(
            f"Length field must be {SEGMENT_LENGTH_SIZE} bytes, got {len(field)}"
        )

    total = int(encode(field), 16)
    if total < SEGMENT_LENGTH_SIZE:
        raise SegmentLengthError(f"Length field value {total} is below {SEGMENT_LENGTH_SIZE}")
    return total - SEGMENT_LENGTH_SIZE


def is_app_marker(marker: bytes) -> bool:
    """Check whether marker is one of APP0..APP15."""
    return (
        len(marker) == 2
        and marker[0] == 0xFF
        and APP0_MARKER[1] <= marker[1] <= APP15_MARKER[1]
    )


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        raise JpegFormatError(f"Unexpected end of JPEG stream reading {size} bytes")
    return data


def _read_soi(stream: BinaryIO) -> bytes:
    soi = stream.read(2)
    if soi != SOI_MARKER:
        raise JpegFormatError(f"Stream does not start with a JPEG SOI marker: {encode(soi or b'')}")
    return soi


def _read_header(stream: BinaryIO) -> Tuple[bytes, bytes]:
    """
    Read the marker and length field following the current segment.

    Either part may come back short when the stream ends; such a header is
    never treated as an APPn segment and is copied through as-is.
    """
    header = stream.read(2 + SEGMENT_LENGTH_SIZE) or b""
    return header[:2], header[2:]


def _is_app_header(marker: bytes, field: bytes) -> bool:
    return is_app_marker(marker) and len(field) == SEGMENT_LENGTH_SIZE


def insert_segments(
    original: BinaryIO,
    destination: BinaryIO,
    content: List[Tuple[bytes, bytes]],
):
    """
    Copy a JPEG, inserting APPn segments in marker order.

    Existing APPn segments whose marker sorts before an inserted marker are
    copied ahead of it; an XMP APP1 segment met on the way is dropped.
    Inserted segments get a computed length field. Everything after the
    last inserted segment is copied unchanged. Neither stream is closed.

    Args:
        original: JPEG stream positioned at the SOI marker
        destination: Writable binary stream
        content: (marker, payload) pairs, ordered by marker

    Raises:
        JpegFormatError: If the original is not a JPEG or a marker is not APPn
        SegmentLengthError: If a payload does not fit a segment
    """
    for marker, _ in content:
        if not is_app_marker(marker):
            raise JpegFormatError(f"Not an APPn marker: {encode(marker)}")

    destination.write(_read_soi(original))

    # APP0 is mandatory in JPEGs, so the first header follows SOI directly
    current, field = _read_header(original)

    for marker, payload in content:
        while _is_app_header(current, field) and current[1] < marker[1]:
            segment = _read_exact(original, length_from_bytes(field))
            if not (current == APP1_MARKER and segment.startswith(XMP_START)):
                destination.write(current + field + segment)
            current, field = _read_header(original)

        destination.write(marker)
        destination.write(length_to_bytes(len(payload)))
        destination.write(payload)

    destination.write(current + field)
    destination.write(read_stream(original))


def find_jumbf_insertion_point(stream: BinaryIO) -> int:
    """
    Find the byte offset where APP11 (JUMBF) segments belong.

    Scans APP0..APP10 from the start of the image. An XMP APP1 segment is
    excluded from the offset since insert_segments drops it.

    Args:
        stream: JPEG stream positioned at the SOI marker

    Returns:
        int: Offset of the first byte after the preceding APPn segments

    Raises:
        JpegFormatError: If the stream is not a JPEG or ends inside a segment
    """
    _read_soi(stream)
    offset = len(SOI_MARKER)

    marker, field = _read_header(stream)
    while _is_app_header(marker, field) and marker[1] < APP11_MARKER[1]:
        length = length_from_bytes(field)
        segment = _read_exact(stream, length)
        if not (marker == APP1_MARKER and segment.startswith(XMP_START)):
            offset += len(marker) + SEGMENT_LENGTH_SIZE + length
        marker, field = _read_header(stream)
    return offset
