"""SMS TPDU building and parsing."""

from __future__ import annotations

from .builder import (
    ENCODING_GSM,
    ENCODING_UCS2,
    PduBuilder,
    SubmitOptions,
    generate_submit,
    get_encoding,
)
from .dcs import DataCodingScheme
from .header import Concat
from .messages import ParsedPdu, ParseResult, PduDetails, SubmitPart
from .parser import PduParser, parse
from .pdu_type import PduType

__all__ = [
    "ENCODING_GSM",
    "ENCODING_UCS2",
    "Concat",
    "DataCodingScheme",
    "PduType",
    "PduDetails",
    "ParsedPdu",
    "ParseResult",
    "SubmitPart",
    "SubmitOptions",
    "PduBuilder",
    "PduParser",
    "generate_submit",
    "get_encoding",
    "parse",
]
