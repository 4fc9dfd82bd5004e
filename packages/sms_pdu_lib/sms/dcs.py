"""TP-Data-Coding-Scheme helper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

ALPHABET_GSM7 = 0
ALPHABET_8BIT = 1
ALPHABET_UCS2 = 2
ALPHABET_RESERVED = 3

_ALPHABET_NAMES = {
    ALPHABET_GSM7: "gsm7",
    ALPHABET_8BIT: "8bit",
    ALPHABET_UCS2: "ucs2",
    ALPHABET_RESERVED: "reserved",
}


@dataclass
class DataCodingScheme:
    raw: int
    alphabet: int = field(init=False)
    message_class: Optional[int] = field(init=False)
    compressed: bool = field(init=False)

    def __post_init__(self) -> None:
        self.alphabet, self.message_class, self.compressed = self._decode(self.raw)

    @staticmethod
    def _decode(dcs: int) -> Tuple[int, Optional[int], bool]:
        group = dcs & 0xF0
        if group in (0xC0, 0xD0):
            # message waiting indication, default alphabet
            return ALPHABET_GSM7, None, False
        if group == 0xE0:
            return ALPHABET_UCS2, None, False
        if group == 0xF0:
            alphabet = ALPHABET_8BIT if dcs & 0x04 else ALPHABET_GSM7
            return alphabet, dcs & 0x03, False
        compressed = (dcs & 0xC0) == 0x00 and bool(dcs & 0x20)
        alphabet = (dcs >> 2) & 0x03
        message_class = dcs & 0x03 if dcs & 0x10 else None
        return alphabet, message_class, compressed

    @property
    def alphabet_name(self) -> str:
        return _ALPHABET_NAMES[self.alphabet]

    @classmethod
    def for_alphabet(
        cls,
        alphabet: int = ALPHABET_GSM7,
        message_class: Optional[int] = None,
        compressed: bool = False,
    ) -> "DataCodingScheme":
        if alphabet not in (ALPHABET_GSM7, ALPHABET_8BIT, ALPHABET_UCS2):
            raise ValueError(f"Unsupported alphabet {alphabet}")
        base = alphabet << 2
        if compressed:
            base |= 0x20
        if message_class is not None:
            base |= 0x10 | (message_class & 0x03)
        return cls(base)


__all__ = [
    "ALPHABET_GSM7",
    "ALPHABET_8BIT",
    "ALPHABET_UCS2",
    "ALPHABET_RESERVED",
    "DataCodingScheme",
]
