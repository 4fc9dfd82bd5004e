"""SMS-SUBMIT PDU generation."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Union

from ..errors import InvalidInputError
from ..gsm import gsm7, ucs2
from ..utils import Address, encode_address, encode_smsc
from .dcs import ALPHABET_GSM7, ALPHABET_UCS2, DataCodingScheme
from .messages import SubmitPart
from .pdu_type import MTI_SUBMIT, PduType

ENCODING_GSM = "gsm"
ENCODING_UCS2 = "ucs2"
ENCODINGS = (ENCODING_GSM, ENCODING_UCS2)

MESSAGE_REFERENCE = 0x00
# "treat as a short message"
PID_SHORT_MESSAGE = 0x00

_NUMBER_PATTERN = re.compile(r"\+?[0-9-]+")


@dataclass(frozen=True)
class SubmitOptions:
    """Options accepted by :func:`generate_submit`.

    ``encoding`` is ``"gsm"``, ``"ucs2"`` or ``None`` to pick GSM 7-bit
    whenever the text allows it.
    """

    encoding: Optional[str] = None

    def __post_init__(self) -> None:
        if self.encoding is not None and self.encoding not in ENCODINGS:
            raise InvalidInputError('The encoding must be "gsm" or "ucs2"')

    @classmethod
    def coerce(
        cls, options: Union["SubmitOptions", Mapping[str, Any], None]
    ) -> "SubmitOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise InvalidInputError("The options must be a SubmitOptions or a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidInputError(f"Unknown option(s): {', '.join(map(str, unknown))}")
        return cls(encoding=options.get("encoding") or None)


def get_encoding(text: str) -> str:
    """Return ``"gsm"`` if *text* fits the GSM 7-bit alphabet, else ``"ucs2"``."""
    if not isinstance(text, str):
        raise InvalidInputError("The text must be a string")
    return ENCODING_GSM if gsm7.is_acceptable(text) else ENCODING_UCS2


class PduBuilder:
    """Builds SMS-SUBMIT PDUs, splitting long text into concatenated parts."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def generate_submit(
        self,
        number: str,
        text: str,
        options: Union[SubmitOptions, Mapping[str, Any], None] = None,
    ) -> List[SubmitPart]:
        if not isinstance(number, str) or not _NUMBER_PATTERN.fullmatch(number):
            raise InvalidInputError(f"The number {number!r} is invalid")
        if not isinstance(text, str) or not text:
            raise InvalidInputError("The text must be a non-empty string")
        opts = SubmitOptions.coerce(options)

        address = Address.from_number(number)
        if not address.digits:
            raise InvalidInputError(f"The number {number!r} has no digits")

        encoding = opts.encoding or get_encoding(text)
        if encoding == ENCODING_GSM:
            units = gsm7.encode(text)
            dcs = DataCodingScheme.for_alphabet(ALPHABET_GSM7)
        else:
            units = ucs2.encode(text)
            dcs = DataCodingScheme.for_alphabet(ALPHABET_UCS2)

        pdu_type = PduType(mti=MTI_SUBMIT, udhi=len(units) > 1)
        header = bytearray(encode_smsc(None))
        sca_length = len(header)
        header.append(pdu_type.to_octet())
        header.append(MESSAGE_REFERENCE)
        header.extend(encode_address(address))
        header.append(PID_SHORT_MESSAGE)
        header.append(dcs.raw)

        parts: List[SubmitPart] = []
        for unit in units:
            buffer = bytes(header) + bytes([unit.length]) + unit.data
            parts.append(
                SubmitPart(
                    buffer=buffer,
                    hex=buffer.hex().upper(),
                    length=len(buffer) - sca_length,
                    encoding=encoding,
                )
            )
        self._logger.debug(
            "Built %s SMS-SUBMIT part(s) to %s using %s", len(parts), address, encoding
        )
        return parts


def generate_submit(
    number: str,
    text: str,
    options: Union[SubmitOptions, Mapping[str, Any], None] = None,
) -> List[SubmitPart]:
    """Build the SMS-SUBMIT PDU(s) delivering *text* to *number*."""
    return PduBuilder().generate_submit(number, text, options)


__all__ = [
    "ENCODING_GSM",
    "ENCODING_UCS2",
    "SubmitOptions",
    "PduBuilder",
    "generate_submit",
    "get_encoding",
]
