"""GSM 03.38 default alphabet and extension table.

The tables map GSM codes to Unicode characters and are built once at import
time. Nothing in the package mutates them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

ESCAPE = 0x1B
CARRIAGE_RETURN = 0x0D

# Index is the septet value. Position 0x1B is the escape to the extension
# table and never decodes to a character on its own.
GSM7_BASIC_TABLE = (
    "@£$¥èéùìòç\nØø\rÅå"
    "Δ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ"
    " !\"#¤%&'()*+,-./"
    "0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNO"
    "PQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmno"
    "pqrstuvwxyzäöñüà"
)

GSM7_EXTENDED_TABLE: Mapping[int, str] = MappingProxyType(
    {
        0x0A: "\u000c",
        0x14: "^",
        0x28: "{",
        0x29: "}",
        0x2F: "\\",
        0x3C: "[",
        0x3D: "~",
        0x3E: "]",
        0x40: "|",
        0x65: "€",
    }
)

_basic_map = {ch: idx for idx, ch in enumerate(GSM7_BASIC_TABLE) if idx != ESCAPE}
# GSM0338.TXT lists 0x09 as capital C with cedilla; both forms encode to it.
_basic_map["Ç"] = 0x09

GSM7_BASIC_MAP: Mapping[str, int] = MappingProxyType(_basic_map)
GSM7_EXTENDED_REVERSE: Mapping[str, int] = MappingProxyType(
    {v: k for k, v in GSM7_EXTENDED_TABLE.items()}
)

del _basic_map


def lookup_basic(septet: int) -> str | None:
    """Return the character for a basic-table septet, or None if unmapped."""
    if septet == ESCAPE or not 0 <= septet < len(GSM7_BASIC_TABLE):
        return None
    return GSM7_BASIC_TABLE[septet]


def lookup_extended(septet: int) -> str | None:
    return GSM7_EXTENDED_TABLE.get(septet)


__all__ = [
    "ESCAPE",
    "CARRIAGE_RETURN",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
    "GSM7_BASIC_MAP",
    "GSM7_EXTENDED_REVERSE",
    "lookup_basic",
    "lookup_extended",
]
