"""User data handling for SMS PDUs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import InvalidInputError
from ..gsm import gsm7, ucs2
from ..utils import take
from .dcs import ALPHABET_8BIT, ALPHABET_GSM7, ALPHABET_UCS2, DataCodingScheme
from .header import Concat, decode_user_data_header


@dataclass
class UserData:
    text: Optional[str]
    concat: Optional[Concat] = None
    header_length: int = 0


def user_data_octets(udl: int, alphabet: int) -> int:
    """Number of TP-UD octets announced by *udl* for *alphabet*."""
    if alphabet == ALPHABET_GSM7:
        return (udl * 7 + 7) // 8
    return udl


def extract_user_data_bytes(
    data: bytes, offset: int, udl: int, dcs: DataCodingScheme
) -> Tuple[bytes, int]:
    if dcs.compressed:
        return take(data, offset, udl, "user data")
    return take(data, offset, user_data_octets(udl, dcs.alphabet), "user data")


def decode_user_data(
    ud_bytes: bytes, udl: int, dcs: DataCodingScheme, udhi: bool
) -> UserData:
    concat: Optional[Concat] = None
    header_offset = 0
    if udhi:
        concat, header_offset = decode_user_data_header(ud_bytes)

    text: Optional[str] = None
    if dcs.compressed:
        text = None
    elif dcs.alphabet == ALPHABET_GSM7:
        text = gsm7.decode(ud_bytes, header_offset, udl)
    elif dcs.alphabet == ALPHABET_UCS2:
        if (len(ud_bytes) - header_offset) % 2:
            raise InvalidInputError("UCS-2 user data has an odd number of octets")
        text = ucs2.decode(ud_bytes, header_offset)
    elif dcs.alphabet == ALPHABET_8BIT:
        text = ud_bytes[header_offset:].hex().upper()
    return UserData(text=text, concat=concat, header_length=header_offset)


__all__ = [
    "UserData",
    "user_data_octets",
    "extract_user_data_bytes",
    "decode_user_data",
]
