"""UCS-2 (UTF-16BE) user data codec."""

from __future__ import annotations

from typing import List

from ..errors import InvalidInputError, MessageTooLongError
from .units import MAX_PARTS, UserDataUnit, concat_header

SINGLE_PART_UNITS = 70
# 67 code units leave room for the 6-octet concatenation header.
MULTIPART_UNITS = 67


def _code_units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def code_unit_length(text: str) -> int:
    """Length of *text* in UTF-16 code units."""
    return sum(_code_units(ch) for ch in text)


def _split(text: str) -> List[str]:
    if code_unit_length(text) <= SINGLE_PART_UNITS:
        return [text]
    chunks: List[str] = []
    current: List[str] = []
    used = 0
    for char in text:
        width = _code_units(char)
        # surrogate pairs stay in one part
        if used + width > MULTIPART_UNITS:
            chunks.append("".join(current))
            current, used = [], 0
        current.append(char)
        used += width
    if current:
        chunks.append("".join(current))
    return chunks


def encode(text: str) -> List[UserDataUnit]:
    chunks = _split(text)
    total = len(chunks)
    if total > MAX_PARTS:
        raise MessageTooLongError(f"Text needs {total} UCS-2 parts (limit {MAX_PARTS})")

    units: List[UserDataUnit] = []
    for sequence, chunk in enumerate(chunks, start=1):
        try:
            data = chunk.encode("utf-16-be")
        except UnicodeEncodeError as exc:
            raise InvalidInputError(f"Text cannot be encoded as UCS-2: {exc.reason}") from exc
        if total > 1:
            data = concat_header(total, sequence) + data
        units.append(UserDataUnit(length=len(data), data=data))
    return units


def decode(data: bytes, header_offset: int = 0) -> str:
    """Decode big-endian UTF-16 code units following the header octets."""
    payload = bytes(data[header_offset:])
    return payload.decode("utf-16-be", errors="replace")


__all__ = [
    "SINGLE_PART_UNITS",
    "MULTIPART_UNITS",
    "code_unit_length",
    "encode",
    "decode",
]
