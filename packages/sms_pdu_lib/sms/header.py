"""User data header decoding (concatenated short messages only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import InvalidInputError, UnsupportedUdhIeError
from ..gsm.units import CONCAT_IE_LENGTH, CONCAT_IEI
from ..utils import take, take_octet


@dataclass(frozen=True)
class Concat:
    reference: int
    total: int
    sequence: int


def decode_user_data_header(ud: bytes) -> Tuple[Optional[Concat], int]:
    """Return the concatenation info and the offset of the first text octet."""

    udhl, offset = take_octet(ud, 0, "user data header length")
    header, offset = take(ud, offset, udhl, "user data header")
    concat: Optional[Concat] = None
    pos = 0
    while pos < len(header):
        iei, pos = take_octet(header, pos, "information element identifier")
        iedl, pos = take_octet(header, pos, "information element length")
        value, pos = take(header, pos, iedl, "information element data")
        if iei != CONCAT_IEI:
            raise UnsupportedUdhIeError(f"Unsupported user data header element 0x{iei:02X}")
        if iedl != CONCAT_IE_LENGTH:
            raise InvalidInputError(
                f"Concatenation element must carry {CONCAT_IE_LENGTH} octets, not {iedl}"
            )
        concat = Concat(reference=value[0], total=value[1], sequence=value[2])
    return concat, offset


__all__ = ["Concat", "decode_user_data_header"]
