"""Text codecs for SMS user data: GSM 7-bit default alphabet and UCS-2."""

from __future__ import annotations

from . import gsm7, ucs2
from .gsm7 import is_acceptable, pack_septets, unpack_septets
from .tables import (
    GSM7_BASIC_MAP,
    GSM7_BASIC_TABLE,
    GSM7_EXTENDED_REVERSE,
    GSM7_EXTENDED_TABLE,
)
from .units import UserDataUnit, concat_header

__all__ = [
    "gsm7",
    "ucs2",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
    "GSM7_BASIC_MAP",
    "GSM7_EXTENDED_REVERSE",
    "UserDataUnit",
    "concat_header",
    "is_acceptable",
    "pack_septets",
    "unpack_septets",
]
