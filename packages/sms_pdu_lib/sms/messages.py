"""Dataclasses describing built and parsed SMS PDUs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..errors import PDUError
from ..utils import Address, ValidityPeriod
from .dcs import DataCodingScheme
from .header import Concat
from .pdu_type import MTI_SUBMIT, PduType


@dataclass(frozen=True)
class SubmitPart:
    """One SMS-SUBMIT PDU ready to hand to a modem.

    ``length`` excludes the one-octet SCA field; it is the value AT+CMGS
    expects.
    """

    buffer: bytes
    hex: str
    length: int
    encoding: str


@dataclass
class PduDetails:
    pdu_type: PduType
    pid: int
    dcs: DataCodingScheme
    address: Address
    validity: ValidityPeriod
    udl: int
    user_data: str
    service_centre_time_stamp: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        details: Dict[str, Any] = {
            "mti": self.pdu_type.mti,
            "udhi": self.pdu_type.udhi,
            "rp": self.pdu_type.rp,
            "pid": self.pid,
            "dcs": self.dcs.raw,
            "alphabet": self.dcs.alphabet_name,
            "message_class": self.dcs.message_class,
            "compressed": self.dcs.compressed,
            "address_type": self.address.number_type,
            "toa": self.address.toa,
            "udl": self.udl,
            "user_data": self.user_data,
        }
        if self.pdu_type.mti == MTI_SUBMIT:
            details.update(
                srr=self.pdu_type.srr,
                rd=self.pdu_type.rd,
                vpf=self.pdu_type.vpf,
                validity_format=self.validity.format,
                validity_raw=self.validity.raw.hex().upper(),
            )
        else:
            details.update(sri=self.pdu_type.sri, mms=self.pdu_type.mms)
        return details


@dataclass
class ParsedPdu:
    type: str
    smsc: Optional[str]
    concat: Optional[Concat]
    text: Optional[str]
    details: PduDetails
    reference: Optional[int] = None
    destination: Optional[str] = None
    period: Optional[str] = None
    origination: Optional[str] = None
    timestamp: Optional[str] = None

    @property
    def is_submit(self) -> bool:
        return self.details.pdu_type.mti == MTI_SUBMIT

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"smsc": self.smsc, "type": self.type}
        if self.is_submit:
            result.update(
                reference=self.reference,
                destination=self.destination,
                period=self.period,
            )
        else:
            result.update(origination=self.origination, timestamp=self.timestamp)
        result["concat"] = (
            None
            if self.concat is None
            else {
                "reference": self.concat.reference,
                "total": self.concat.total,
                "sequence": self.concat.sequence,
            }
        )
        result["text"] = self.text
        result["details"] = self.details.to_dict()
        return result


@dataclass
class ParseResult:
    """Outcome of a parse: exactly one of ``message`` and ``error`` is set."""

    message: Optional[ParsedPdu] = None
    error: Optional[PDUError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"error": str(self.error)}
        assert self.message is not None
        return self.message.to_dict()


__all__ = ["SubmitPart", "PduDetails", "ParsedPdu", "ParseResult"]
