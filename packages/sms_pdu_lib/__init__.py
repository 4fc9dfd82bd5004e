"""Encode and decode SMS PDUs (GSM 03.40 / 03.38) for AT-command modems."""

from __future__ import annotations

from .errors import (
    InvalidInputError,
    MessageTooLongError,
    PDUError,
    TruncatedDataError,
    UnrepresentableTextError,
    UnsupportedPduTypeError,
    UnsupportedUdhIeError,
)
from .gsm import is_acceptable
from .sms import (
    Concat,
    DataCodingScheme,
    ParsedPdu,
    ParseResult,
    PduBuilder,
    PduParser,
    PduType,
    SubmitOptions,
    SubmitPart,
    generate_submit,
    get_encoding,
    parse,
)
from .utils import Address

__version__ = "0.1.0"

__all__ = [
    "Address",
    "Concat",
    "DataCodingScheme",
    "PduType",
    "ParsedPdu",
    "ParseResult",
    "SubmitPart",
    "SubmitOptions",
    "PduBuilder",
    "PduParser",
    "generate_submit",
    "get_encoding",
    "is_acceptable",
    "parse",
    "PDUError",
    "InvalidInputError",
    "UnrepresentableTextError",
    "MessageTooLongError",
    "TruncatedDataError",
    "UnsupportedPduTypeError",
    "UnsupportedUdhIeError",
]
