"""Pydantic models carrying hex-encoded data."""

from hexcodec.models.schemas import HexPayload, DigestRecord

__all__ = ["HexPayload", "DigestRecord"]
