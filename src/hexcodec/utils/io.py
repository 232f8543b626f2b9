"""Read whole files and streams into memory."""

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from hexcodec.config import get_settings
from hexcodec.core.codec import encode


logger = logging.getLogger(__name__)


def read_stream(stream: BinaryIO, buffer_size: Optional[int] = None) -> bytes:
    """
    Read a binary stream until EOF.

    The stream must be blocking and is left open; closing it is the
    caller's job.

    Args:
        stream: Readable binary stream
        buffer_size: Chunk size in bytes (default from settings)

    Returns:
        bytes: Everything remaining in the stream

    Raises:
        ValueError: If buffer_size is not positive
        BlockingIOError: If a non-blocking stream has no data ready
    """
    if buffer_size is None:
        buffer_size = get_settings().read_buffer_size
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    chunks = []
    while True:
        chunk = stream.read(buffer_size)
        if chunk is None:
            raise BlockingIOError("Stream has no data ready; read_stream needs a blocking stream")
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def read_file(path: Union[str, Path]) -> bytes:
    """Read an entire file as bytes."""
    with open(path, "rb") as stream:
        data = read_stream(stream)
    logger.debug(f"Read {len(data)} bytes from {path}")
    return data


def encode_file(path: Union[str, Path]) -> str:
    """Read a file and return its contents as uppercase hex."""
    return encode(read_file(path))
