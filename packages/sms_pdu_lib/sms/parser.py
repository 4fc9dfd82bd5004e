"""SMS-SUBMIT / SMS-DELIVER PDU parsing.

Parsing never raises for bad input: every :class:`PDUError` is captured in
the returned :class:`ParseResult`.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from ..errors import InvalidInputError, PDUError
from ..utils import (
    ValidityPeriod,
    decode_address,
    decode_smsc,
    decode_timestamp,
    decode_validity,
    format_timestamp,
    take,
    take_octet,
)
from ..utils.timestamp import TIMESTAMP_LENGTH
from .dcs import DataCodingScheme
from .messages import ParsedPdu, ParseResult, PduDetails
from .pdu_type import PduType
from .user_data import decode_user_data, extract_user_data_bytes

PduInput = Union[str, bytes, bytearray, memoryview]

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def _coerce_to_bytes(data: PduInput) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    elif isinstance(data, str):
        if len(data) % 2 or not _HEX_PATTERN.fullmatch(data):
            raise InvalidInputError("The PDU must be an even-length hexadecimal string")
        raw = bytes.fromhex(data)
    else:
        raise InvalidInputError(f"Unsupported PDU input type {type(data).__name__}")
    if not raw:
        raise InvalidInputError("Empty payload is not a valid PDU")
    return raw


class PduParser:
    """Decodes SMS-SUBMIT and SMS-DELIVER PDUs, SCA field included."""

    def __init__(
        self,
        *,
        logger: logging.Logger | None = None,
        pivot_year: Optional[int] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._pivot_year = pivot_year

    def parse(self, data: PduInput) -> ParseResult:
        try:
            message = self._parse(_coerce_to_bytes(data))
        except PDUError as exc:
            self._logger.debug("Failed to parse PDU: %s", exc)
            return ParseResult(error=exc)
        return ParseResult(message=message)

    def _parse(self, raw: bytes) -> ParsedPdu:
        smsc, idx = decode_smsc(raw, 0)
        first_octet, idx = take_octet(raw, idx, "PDU type")
        pdu_type = PduType.from_octet(first_octet)

        reference: Optional[int] = None
        if pdu_type.is_submit:
            reference, idx = take_octet(raw, idx, "message reference")
            address, idx = decode_address(raw, idx, "destination address")
        else:
            address, idx = decode_address(raw, idx, "originating address")
        pid, idx = take_octet(raw, idx, "protocol identifier")
        dcs_octet, idx = take_octet(raw, idx, "data coding scheme")
        dcs = DataCodingScheme(dcs_octet)

        validity = ValidityPeriod()
        scts = None
        if pdu_type.is_submit:
            validity, idx = decode_validity(raw, idx, pdu_type.vpf, self._pivot_year)
        else:
            stamp, idx = take(raw, idx, TIMESTAMP_LENGTH, "service centre time stamp")
            scts = decode_timestamp(stamp, self._pivot_year)

        udl, idx = take_octet(raw, idx, "user data length")
        ud_bytes, idx = extract_user_data_bytes(raw, idx, udl, dcs)
        if idx < len(raw):
            self._logger.debug("Ignoring %s octet(s) after the user data", len(raw) - idx)
        user_data = decode_user_data(ud_bytes, udl, dcs, pdu_type.udhi)

        details = PduDetails(
            pdu_type=pdu_type,
            pid=pid,
            dcs=dcs,
            address=address,
            validity=validity,
            udl=udl,
            user_data=ud_bytes.hex().upper(),
            service_centre_time_stamp=scts,
        )
        message = ParsedPdu(
            type=pdu_type.name,
            smsc=str(smsc) if smsc is not None else None,
            concat=user_data.concat,
            text=user_data.text,
            details=details,
        )
        if pdu_type.is_submit:
            message.reference = reference
            message.destination = str(address)
            message.period = validity.period
        else:
            message.origination = str(address)
            message.timestamp = format_timestamp(scts) if scts is not None else None
        self._logger.debug(
            "Parsed %s with %s alphabet, UDL %s", message.type, dcs.alphabet_name, udl
        )
        return message


def parse(data: PduInput) -> ParseResult:
    """Parse a PDU given as a hex string or raw bytes."""
    return PduParser().parse(data)


__all__ = ["PduInput", "PduParser", "parse"]
