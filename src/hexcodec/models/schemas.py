"""Pydantic data models for hex-encoded payloads."""

from typing import Union

from pydantic import BaseModel, Field, field_validator

from hexcodec.core.codec import encode, decode
from hexcodec.utils.hash import hash_of_bytes, hex_digest


class HexPayload(BaseModel):
    """Binary payload carried as an uppercase hex string."""
    data: str = Field(..., description="Payload bytes (hex)")

    @field_validator("data")
    @classmethod
    def _canonical_hex(cls, value: str) -> str:
        # InvalidFormatError is a ValueError, so pydantic reports it as a ValidationError
        decode(value)
        return value.upper()

    @classmethod
    def from_bytes(cls, raw: Union[bytes, bytearray, memoryview]) -> "HexPayload":
        return cls(data=encode(raw))

    def to_bytes(self) -> bytes:
        return decode(self.data)

    @property
    def size(self) -> int:
        """Payload length in bytes."""
        return len(self.data) // 2


class DigestRecord(BaseModel):
    """SHA-256 digest of a payload in both textual forms."""
    size: int = Field(..., ge=0, description="Payload length in bytes")
    sha256_hex: str = Field(..., description="SHA-256 digest (uppercase hex)")
    sha256_base64: str = Field(..., description="SHA-256 digest (Base64)")

    @classmethod
    def of(cls, data: bytes) -> "DigestRecord":
        return cls(
            size=len(data),
            sha256_hex=hex_digest(data),
            sha256_base64=hash_of_bytes(data),
        )
