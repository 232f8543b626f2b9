"""Custom exceptions for the hexcodec package."""

from typing import Optional


class HexCodecException(Exception):
    """Base exception for all hexcodec errors."""
    pass


# Codec Errors
class CodecError(HexCodecException):
    """Base exception for encoding and decoding errors."""
    pass


class InvalidFormatError(CodecError, ValueError):
    """
    Raised when a hex string cannot be decoded.

    Attributes:
        text: The malformed two-character group, or None for odd-length input
        position: Character offset of the malformed group, or None
    """

    def __init__(self, message: str, text: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.position = position


class SegmentLengthError(CodecError, ValueError):
    """Raised when a JPEG segment length field is out of range or malformed."""
    pass


class JpegFormatError(CodecError, ValueError):
    """Raised when a JPEG stream or a segment marker is malformed."""
    pass


# Configuration Errors
class ConfigurationError(HexCodecException):
    """Raised when settings are invalid."""
    pass
