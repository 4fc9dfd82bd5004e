"""First octet of a TPDU: message type and the flags that go with it."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import UnsupportedPduTypeError

MTI_DELIVER = 0
MTI_SUBMIT = 1

SMS_TYPES = ("SMS-DELIVER", "SMS-SUBMIT", "SMS-STATUS-REPORT", "RESERVED")


@dataclass
class PduType:
    """Decoded PDU-Type octet.

    Bit layout: RP(7) UDHI(6) SRR/SRI(5) VPF(4-3) RD/MMS(2) MTI(1-0).
    ``srr``, ``rd`` and ``vpf`` only apply to SMS-SUBMIT; ``sri`` and ``mms``
    only to SMS-DELIVER.
    """

    mti: int
    udhi: bool = False
    rp: bool = False
    vpf: int = 0
    srr: bool = False
    rd: bool = False
    sri: bool = False
    mms: bool = False

    @property
    def name(self) -> str:
        return SMS_TYPES[self.mti & 0x03]

    @property
    def is_submit(self) -> bool:
        return self.mti == MTI_SUBMIT

    @classmethod
    def from_octet(cls, octet: int) -> "PduType":
        mti = octet & 0x03
        if mti not in (MTI_DELIVER, MTI_SUBMIT):
            raise UnsupportedPduTypeError(f"Unsupported MTI {mti} ({SMS_TYPES[mti]})")
        rp = bool(octet & 0x80)
        udhi = bool(octet & 0x40)
        if mti == MTI_SUBMIT:
            return cls(
                mti=mti,
                udhi=udhi,
                rp=rp,
                vpf=(octet >> 3) & 0x03,
                srr=bool(octet & 0x20),
                rd=bool(octet & 0x04),
            )
        return cls(
            mti=mti,
            udhi=udhi,
            rp=rp,
            sri=bool(octet & 0x20),
            mms=bool(octet & 0x04),
        )

    def to_octet(self) -> int:
        octet = self.mti & 0x03
        if self.rp:
            octet |= 0x80
        if self.udhi:
            octet |= 0x40
        if self.mti == MTI_SUBMIT:
            octet |= (self.vpf & 0x03) << 3
            if self.srr:
                octet |= 0x20
            if self.rd:
                octet |= 0x04
        else:
            if self.sri:
                octet |= 0x20
            if self.mms:
                octet |= 0x04
        return octet


__all__ = ["MTI_DELIVER", "MTI_SUBMIT", "SMS_TYPES", "PduType"]
