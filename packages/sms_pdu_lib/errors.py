"""Exceptions raised by the PDU codecs."""

from __future__ import annotations


class PDUError(ValueError):
    """Base class for every error signalled by the encoders and decoders."""


class InvalidInputError(PDUError):
    """Malformed number, text, hex string or options."""


class UnrepresentableTextError(PDUError):
    """Text contains a character outside the GSM 7-bit alphabet."""


class MessageTooLongError(PDUError):
    """Text would need more than 255 concatenated parts."""


class TruncatedDataError(PDUError):
    """The buffer ends before a field is complete."""

    def __init__(self, field: str, needed: int = 0, available: int = 0) -> None:
        self.field = field
        self.needed = needed
        self.available = available
        message = f"Insufficient data for {field}"
        if needed:
            message += f" (need {needed} octet(s), have {available})"
        super().__init__(message)


class UnsupportedPduTypeError(PDUError):
    """Message type indicator is neither SMS-DELIVER nor SMS-SUBMIT."""


class UnsupportedUdhIeError(PDUError):
    """User data header carries an information element other than concatenation."""


__all__ = [
    "PDUError",
    "InvalidInputError",
    "UnrepresentableTextError",
    "MessageTooLongError",
    "TruncatedDataError",
    "UnsupportedPduTypeError",
    "UnsupportedUdhIeError",
]
