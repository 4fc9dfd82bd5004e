"""Validity period decoding helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from .octets import take, take_octet
from .timestamp import TIMESTAMP_LENGTH, decode_timestamp, format_timestamp

VPF_NONE = 0
VPF_ENHANCED = 1
VPF_RELATIVE = 2
VPF_ABSOLUTE = 3

_UNIT_MINUTES = {"m": 1, "d": 24 * 60, "w": 7 * 24 * 60}


@dataclass
class ValidityPeriod:
    format: str = "none"
    value: Optional[int] = None
    unit: Optional[str] = None
    timestamp: Optional[datetime] = None
    raw: bytes = b""

    @property
    def period(self) -> Optional[str]:
        """Short form such as ``"30m"``, ``"4d"`` or the absolute timestamp."""
        if self.format == "relative":
            return f"{self.value}{self.unit}"
        if self.format == "absolute" and self.timestamp is not None:
            return format_timestamp(self.timestamp)
        return None

    def as_timedelta(self) -> Optional[timedelta]:
        if self.format != "relative" or self.value is None or self.unit is None:
            return None
        return timedelta(minutes=self.value * _UNIT_MINUTES[self.unit])


def decode_relative_validity(value: int) -> Tuple[int, str]:
    """Map a TP-VP octet to ``(amount, unit)`` with unit ``m``, ``d`` or ``w``."""
    if value <= 143:
        return (value + 1) * 5, "m"
    if value <= 167:
        return 12 * 60 + (value - 143) * 30, "m"
    if value <= 196:
        return value - 166, "d"
    return value - 192, "w"


def decode_validity(
    data: bytes, offset: int, vpf: int, pivot_year: Optional[int] = None
) -> Tuple[ValidityPeriod, int]:
    if vpf == VPF_RELATIVE:
        octet, offset = take_octet(data, offset, "validity period")
        amount, unit = decode_relative_validity(octet)
        return ValidityPeriod("relative", amount, unit, raw=bytes([octet])), offset
    if vpf == VPF_ABSOLUTE:
        raw, offset = take(data, offset, TIMESTAMP_LENGTH, "validity period")
        stamp = decode_timestamp(raw, pivot_year)
        return ValidityPeriod("absolute", timestamp=stamp, raw=raw), offset
    if vpf == VPF_ENHANCED:
        raw, offset = take(data, offset, 7, "validity period")
        return ValidityPeriod("enhanced", raw=raw), offset
    return ValidityPeriod(), offset


__all__ = [
    "VPF_NONE",
    "VPF_ENHANCED",
    "VPF_RELATIVE",
    "VPF_ABSOLUTE",
    "ValidityPeriod",
    "decode_relative_validity",
    "decode_validity",
]
