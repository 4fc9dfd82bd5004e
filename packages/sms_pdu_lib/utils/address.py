"""Address handling helpers for SMS PDUs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import InvalidInputError
from ..gsm import gsm7
from .octets import take, take_octet

TON_UNKNOWN = 0
TON_INTERNATIONAL = 1
TON_NATIONAL = 2
TON_ALPHANUMERIC = 5
NPI_ISDN = 1

# 0x81 ("unknown" type of number, ISDN plan) is what handsets send for
# numbers dialled without a country code.
TOA_INTERNATIONAL = 0x91
TOA_NATIONAL = 0x81

_BCD_SYMBOLS = {
    "0": 0x0,
    "1": 0x1,
    "2": 0x2,
    "3": 0x3,
    "4": 0x4,
    "5": 0x5,
    "6": 0x6,
    "7": 0x7,
    "8": 0x8,
    "9": 0x9,
    "*": 0xA,
    "#": 0xB,
    "a": 0xC,
    "b": 0xD,
    "c": 0xE,
}

_BCD_DECODE = {value: symbol for symbol, value in _BCD_SYMBOLS.items()}
_BCD_FILLER = 0xF


@dataclass
class Address:
    digits: str
    type_of_number: int = TON_UNKNOWN
    numbering_plan: int = NPI_ISDN
    # semi-octets announced by the address length field
    digit_count: Optional[int] = None

    def __post_init__(self) -> None:
        if self.digit_count is None:
            self.digit_count = len(self.digits)

    @staticmethod
    def from_number(number: str) -> "Address":
        clean = number.replace("-", "")
        international = clean.startswith("+")
        digits = clean.lstrip("+")
        if international:
            return Address(digits=digits, type_of_number=TON_INTERNATIONAL)
        return Address(digits=digits, type_of_number=TON_UNKNOWN)

    @property
    def is_international(self) -> bool:
        return self.type_of_number == TON_INTERNATIONAL

    @property
    def is_alphanumeric(self) -> bool:
        return self.type_of_number == TON_ALPHANUMERIC

    @property
    def number_type(self) -> str:
        if self.is_international:
            return "international"
        if self.is_alphanumeric:
            return "alphanumeric"
        return "national"

    @property
    def toa(self) -> int:
        return 0x80 | ((self.type_of_number & 0x07) << 4) | (self.numbering_plan & 0x0F)

    def __str__(self) -> str:
        if self.is_international and self.digits:
            return "+" + self.digits
        return self.digits


def encode_bcd_digits(digits: str) -> bytes:
    """Pack *digits* as swapped semi-octets, padding an odd count with F."""

    values: List[int] = []
    for ch in digits:
        value = _BCD_SYMBOLS.get(ch.lower())
        if value is None:
            raise InvalidInputError(f"Unsupported BCD digit {ch!r}")
        values.append(value)
    if len(values) % 2:
        values.append(_BCD_FILLER)
    out = bytearray()
    for i in range(0, len(values), 2):
        out.append((values[i] & 0x0F) | ((values[i + 1] & 0x0F) << 4))
    return bytes(out)


def decode_bcd_digits(data: bytes, digits_len: int) -> str:
    chars: List[str] = []
    for byte in data:
        chars.append(_BCD_DECODE.get(byte & 0x0F, "F"))
        chars.append(_BCD_DECODE.get((byte >> 4) & 0x0F, "F"))
    return "".join(chars)[:digits_len].rstrip("F")


def encode_address(address: Address) -> bytes:
    """Return length, type-of-address and packed digits for *address*."""
    encoded_digits = encode_bcd_digits(address.digits)
    return bytes([len(address.digits), address.toa]) + encoded_digits


def encode_number(number: str) -> bytes:
    """Encode a dialled number such as ``+81-90-1234-5678`` as TP-DA."""
    return encode_address(Address.from_number(number))


def decode_address(data: bytes, offset: int, field: str = "address") -> Tuple[Address, int]:
    length, offset = take_octet(data, offset, f"{field} length")
    if length == 0:
        return Address(digits="", digit_count=0), offset
    toa, offset = take_octet(data, offset, f"{field} type")
    body, offset = take(data, offset, (length + 1) // 2, field)
    ton = (toa >> 4) & 0x07
    if ton == TON_ALPHANUMERIC:
        digits = gsm7.decode(body, 0, length * 4 // 7)
    else:
        digits = decode_bcd_digits(body, length)
    addr = Address(
        digits=digits,
        type_of_number=ton,
        numbering_plan=toa & 0x0F,
        digit_count=length,
    )
    return addr, offset


def encode_smsc(address: Optional[Address]) -> bytes:
    if address is None:
        return b"\x00"
    body = bytearray([address.toa])
    body.extend(encode_bcd_digits(address.digits))
    return bytes([len(body)]) + bytes(body)


def decode_smsc(data: bytes, offset: int) -> Tuple[Optional[Address], int]:
    """Decode the SCA field, whose length counts octets rather than digits."""
    length, offset = take_octet(data, offset, "SMSC length")
    if length == 0:
        return None, offset
    body, offset = take(data, offset, length, "SMSC address")
    toa = body[0]
    digits = decode_bcd_digits(body[1:], (length - 1) * 2)
    addr = Address(
        digits=digits, type_of_number=(toa >> 4) & 0x07, numbering_plan=toa & 0x0F
    )
    return addr, offset


__all__ = [
    "TON_UNKNOWN",
    "TON_INTERNATIONAL",
    "TON_NATIONAL",
    "TON_ALPHANUMERIC",
    "NPI_ISDN",
    "TOA_INTERNATIONAL",
    "TOA_NATIONAL",
    "Address",
    "encode_bcd_digits",
    "decode_bcd_digits",
    "encode_address",
    "encode_number",
    "decode_address",
    "encode_smsc",
    "decode_smsc",
]
