"""Utility helpers shared across the PDU field codecs."""

from __future__ import annotations

from .address import (
    Address,
    decode_address,
    decode_bcd_digits,
    decode_smsc,
    encode_address,
    encode_bcd_digits,
    encode_number,
    encode_smsc,
)
from .octets import take, take_octet
from .timestamp import decode_timestamp, format_timestamp
from .validity import ValidityPeriod, decode_relative_validity, decode_validity

__all__ = [
    "Address",
    "encode_bcd_digits",
    "decode_bcd_digits",
    "encode_address",
    "encode_number",
    "decode_address",
    "encode_smsc",
    "decode_smsc",
    "take",
    "take_octet",
    "decode_timestamp",
    "format_timestamp",
    "ValidityPeriod",
    "decode_relative_validity",
    "decode_validity",
]
