"""User data units and the concatenation header shared by the text codecs."""

from __future__ import annotations

from dataclasses import dataclass

# TP-UD is limited to 140 octets in a single PDU.
UD_OCTET_LIMIT = 140
MAX_PARTS = 255

CONCAT_IEI = 0x00
CONCAT_IE_LENGTH = 3
CONCAT_REFERENCE = 0x00
# UDHL + IEI + IEDL + reference + total + sequence
CONCAT_HEADER_LENGTH = 6


@dataclass(frozen=True)
class UserDataUnit:
    """Payload of one PDU.

    ``length`` is the value written to TP-UDL: a septet count for the GSM
    7-bit alphabet, an octet count for UCS-2. Both include the header.
    """

    length: int
    data: bytes


def concat_header(total: int, sequence: int, reference: int = CONCAT_REFERENCE) -> bytes:
    """Return the 6-octet UDH announcing part *sequence* of *total*."""

    if not 1 <= sequence <= total <= MAX_PARTS:
        raise ValueError(f"Invalid concatenation part {sequence}/{total}")
    return bytes(
        [
            CONCAT_HEADER_LENGTH - 1,
            CONCAT_IEI,
            CONCAT_IE_LENGTH,
            reference & 0xFF,
            total,
            sequence,
        ]
    )


__all__ = [
    "UD_OCTET_LIMIT",
    "MAX_PARTS",
    "CONCAT_IEI",
    "CONCAT_IE_LENGTH",
    "CONCAT_REFERENCE",
    "CONCAT_HEADER_LENGTH",
    "UserDataUnit",
    "concat_header",
]
