"""Bounded reads over a PDU buffer."""

from __future__ import annotations

from typing import Tuple

from ..errors import TruncatedDataError


def take_octet(data: bytes, offset: int, field: str) -> Tuple[int, int]:
    """Return the octet at *offset* and the offset following it."""
    if offset >= len(data):
        raise TruncatedDataError(field, 1, 0)
    return data[offset], offset + 1


def take(data: bytes, offset: int, size: int, field: str) -> Tuple[bytes, int]:
    """Return *size* octets starting at *offset* and the offset following them."""
    end = offset + size
    if size < 0 or end > len(data):
        raise TruncatedDataError(field, size, max(len(data) - offset, 0))
    return bytes(data[offset:end]), end


__all__ = ["take", "take_octet"]
