"""GSM 03.38 7-bit alphabet codec.

Text is mapped to septets (extension characters become an escape followed
by the extension code) and the septets are packed least-significant-bit
first, each one continuing where the previous one stopped.
"""

from __future__ import annotations

import enum
from typing import Iterable, List, Optional, Sequence

from ..errors import MessageTooLongError, UnrepresentableTextError
from .tables import (
    CARRIAGE_RETURN,
    ESCAPE,
    GSM7_BASIC_MAP,
    GSM7_EXTENDED_REVERSE,
    lookup_basic,
    lookup_extended,
)
from .units import CONCAT_HEADER_LENGTH, MAX_PARTS, UserDataUnit, concat_header

SINGLE_PART_SEPTETS = 160
MULTIPART_SEPTETS = 153
# Septets occupied by the 6-octet concatenation header plus its fill bit.
HEADER_SEPTETS = 7


class _EscapeState(enum.Enum):
    NORMAL = "normal"
    ESCAPED = "escaped"


def is_acceptable(text: str) -> bool:
    """Return True if every character of *text* has a GSM 7-bit code."""

    return all(ch in GSM7_BASIC_MAP or ch in GSM7_EXTENDED_REVERSE for ch in text)


def septets_for(text: str) -> List[int]:
    """Return a list of septet values representing *text* in GSM 7-bit alphabet."""

    septets: List[int] = []
    for position, char in enumerate(text):
        if char in GSM7_BASIC_MAP:
            septets.append(GSM7_BASIC_MAP[char])
        elif char in GSM7_EXTENDED_REVERSE:
            septets.append(ESCAPE)
            septets.append(GSM7_EXTENDED_REVERSE[char])
        else:
            raise UnrepresentableTextError(
                f"Character {char!r} at position {position} not supported in GSM 7-bit alphabet"
            )
    return septets


def septets_to_bits(septets: Iterable[int]) -> List[int]:
    """Convert septets to a least-significant-bit-first bit stream."""

    bits: List[int] = []
    for septet in septets:
        for bit in range(7):
            bits.append((septet >> bit) & 0x01)
    return bits


def bits_to_septets(bits: Sequence[int]) -> List[int]:
    septets: List[int] = []
    for i in range(0, len(bits) - 6, 7):
        value = 0
        for idx, bit in enumerate(bits[i : i + 7]):
            value |= (bit & 0x01) << idx
        septets.append(value)
    return septets


def bytes_to_bits_lsb(data: bytes) -> List[int]:
    bits: List[int] = []
    for byte in data:
        for bit in range(8):
            bits.append((byte >> bit) & 0x01)
    return bits


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """Pack a bit stream (lsb-first) into bytes, zero-filling the last one."""

    out = bytearray()
    for i in range(0, len(bits), 8):
        byte = 0
        for bit_index, bit in enumerate(bits[i : i + 8]):
            byte |= (bit & 0x01) << bit_index
        out.append(byte)
    return bytes(out)


def pack_septets(septets: Iterable[int]) -> bytes:
    return bits_to_bytes(septets_to_bits(septets))


def unpack_septets(data: bytes, count: Optional[int] = None) -> List[int]:
    """Return *count* septets from *data* (as many as fit when omitted)."""

    bits = bytes_to_bits_lsb(data)
    available = len(bits) // 7
    if count is None or count > available:
        count = available
    return bits_to_septets(bits[: count * 7])


def _split(septets: List[int]) -> List[List[int]]:
    if len(septets) <= SINGLE_PART_SEPTETS:
        return [septets]
    chunks: List[List[int]] = []
    start = 0
    while start < len(septets):
        end = min(start + MULTIPART_SEPTETS, len(septets))
        # keep an escape together with the extension code it announces
        if end < len(septets) and septets[end - 1] == ESCAPE:
            end -= 1
        chunks.append(septets[start:end])
        start = end
        if len(chunks) > MAX_PARTS:
            break
    return chunks


def encode(text: str) -> List[UserDataUnit]:
    """Encode *text* into one user data unit per PDU.

    Texts of up to 160 septets fit a single unit. Longer texts are split
    into units of at most 153 septets, each prefixed with a concatenation
    header. UDL counts the header septets as well as the payload.
    """

    septets = septets_for(text)
    chunks = _split(septets)
    total = len(chunks)
    if total > MAX_PARTS:
        raise MessageTooLongError(
            f"Text needs more than {MAX_PARTS} GSM 7-bit parts ({len(septets)} septets)"
        )

    units: List[UserDataUnit] = []
    for sequence, chunk in enumerate(chunks, start=1):
        stream = list(chunk)
        if total > 1:
            stream = [0] * HEADER_SEPTETS + stream
        # exactly 7 spare bits would read as an extra '@'; fill with CR
        if (len(stream) * 7) % 8 == 1:
            stream.append(CARRIAGE_RETURN)
        data = bytearray(pack_septets(stream))
        if total > 1:
            data[:CONCAT_HEADER_LENGTH] = concat_header(total, sequence)
        units.append(UserDataUnit(length=len(stream), data=bytes(data)))
    return units


def decode(data: bytes, header_offset: int = 0, septet_count: Optional[int] = None) -> str:
    """Decode packed septets back into text.

    Septets starting inside the first *header_offset* octets belong to the
    user data header and are skipped. *septet_count* is TP-UDL when known;
    without it every whole septet in *data* is decoded and a trailing '@'
    produced by zero padding is dropped.
    """

    available = len(data) * 8 // 7
    count = available if septet_count is None else min(septet_count, available)
    septets = unpack_septets(data, count)

    state = _EscapeState.NORMAL
    chars: List[str] = []
    for index, value in enumerate(septets):
        if (index * 7) // 8 < header_offset:
            continue
        if (
            value == CARRIAGE_RETURN
            and index == count - 1
            and ((index + 1) * 7) % 8 == 0
        ):
            break
        if value == ESCAPE:
            if state is _EscapeState.ESCAPED:
                chars.append(" ")
            state = _EscapeState.ESCAPED
            continue
        if state is _EscapeState.ESCAPED:
            state = _EscapeState.NORMAL
            char = lookup_extended(value)
        else:
            char = lookup_basic(value)
        chars.append("?" if char is None else char)

    text = "".join(chars)
    if septet_count is None and text.endswith("@"):
        text = text[:-1]
    return text


__all__ = [
    "SINGLE_PART_SEPTETS",
    "MULTIPART_SEPTETS",
    "HEADER_SEPTETS",
    "is_acceptable",
    "septets_for",
    "septets_to_bits",
    "bits_to_septets",
    "bytes_to_bits_lsb",
    "bits_to_bytes",
    "pack_septets",
    "unpack_septets",
    "encode",
    "decode",
]
