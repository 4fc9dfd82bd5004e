"""
Tests for the fixed TPDU fields: PDU type, DCS, validity, time stamps and UDH.
"""

from datetime import timedelta

import pytest

from sms_pdu_lib.errors import (
    InvalidInputError,
    TruncatedDataError,
    UnsupportedPduTypeError,
    UnsupportedUdhIeError,
)
from sms_pdu_lib.gsm.units import concat_header
from sms_pdu_lib.sms.dcs import (
    ALPHABET_8BIT,
    ALPHABET_GSM7,
    ALPHABET_RESERVED,
    ALPHABET_UCS2,
    DataCodingScheme,
)
from sms_pdu_lib.sms.header import Concat, decode_user_data_header
from sms_pdu_lib.sms.pdu_type import MTI_DELIVER, MTI_SUBMIT, PduType
from sms_pdu_lib.sms.user_data import user_data_octets
from sms_pdu_lib.utils.timestamp import decode_timestamp, format_timestamp
from sms_pdu_lib.utils.validity import (
    VPF_ABSOLUTE,
    VPF_ENHANCED,
    VPF_NONE,
    VPF_RELATIVE,
    decode_relative_validity,
    decode_validity,
)


class TestPduType:
    """Test the first TPDU octet."""

    def test_plain_submit(self):
        pdu_type = PduType.from_octet(0x01)
        assert pdu_type.mti == MTI_SUBMIT
        assert pdu_type.name == "SMS-SUBMIT"
        assert not pdu_type.udhi
        assert pdu_type.vpf == VPF_NONE

    def test_submit_flags(self):
        pdu_type = PduType.from_octet(0x51)
        assert pdu_type.udhi
        assert pdu_type.vpf == VPF_RELATIVE
        assert not pdu_type.srr

    def test_deliver_flags(self):
        pdu_type = PduType.from_octet(0x24)
        assert pdu_type.mti == MTI_DELIVER
        assert pdu_type.name == "SMS-DELIVER"
        assert pdu_type.sri
        assert pdu_type.mms

    @pytest.mark.parametrize("octet", [0x00, 0x01, 0x11, 0x19, 0x41, 0x04, 0x44, 0xE5])
    def test_octet_round_trip(self, octet):
        assert PduType.from_octet(octet).to_octet() == octet

    @pytest.mark.parametrize("octet", [0x02, 0x03, 0x42])
    def test_unsupported_mti(self, octet):
        with pytest.raises(UnsupportedPduTypeError):
            PduType.from_octet(octet)


class TestDataCodingScheme:
    """Test DCS interpretation."""

    @pytest.mark.parametrize(
        "raw, alphabet, message_class, compressed",
        [
            (0x00, ALPHABET_GSM7, None, False),
            (0x04, ALPHABET_8BIT, None, False),
            (0x08, ALPHABET_UCS2, None, False),
            (0x0C, ALPHABET_RESERVED, None, False),
            (0x10, ALPHABET_GSM7, 0, False),
            (0x12, ALPHABET_GSM7, 2, False),
            (0x18, ALPHABET_UCS2, 0, False),
            (0x20, ALPHABET_GSM7, None, True),
            (0x60, ALPHABET_GSM7, None, False),
            (0xC0, ALPHABET_GSM7, None, False),
            (0xD8, ALPHABET_GSM7, None, False),
            (0xE0, ALPHABET_UCS2, None, False),
            (0xF1, ALPHABET_GSM7, 1, False),
            (0xF4, ALPHABET_8BIT, 0, False),
            (0xF7, ALPHABET_8BIT, 3, False),
        ],
    )
    def test_decode(self, raw, alphabet, message_class, compressed):
        dcs = DataCodingScheme(raw)
        assert dcs.alphabet == alphabet
        assert dcs.message_class == message_class
        assert dcs.compressed is compressed

    def test_for_alphabet(self):
        assert DataCodingScheme.for_alphabet(ALPHABET_GSM7).raw == 0x00
        assert DataCodingScheme.for_alphabet(ALPHABET_UCS2).raw == 0x08
        assert DataCodingScheme.for_alphabet(ALPHABET_GSM7, message_class=0).raw == 0x10

    def test_alphabet_name(self):
        assert DataCodingScheme(0x08).alphabet_name == "ucs2"


class TestValidity:
    """Test TP-VP decoding."""

    @pytest.mark.parametrize(
        "octet, expected",
        [
            (0, (5, "m")),
            (11, (60, "m")),
            (143, (720, "m")),
            (144, (750, "m")),
            (167, (1440, "m")),
            (168, (2, "d")),
            (170, (4, "d")),
            (196, (30, "d")),
            (197, (5, "w")),
            (255, (63, "w")),
        ],
    )
    def test_relative_ranges(self, octet, expected):
        assert decode_relative_validity(octet) == expected

    def test_relative_field(self):
        validity, offset = decode_validity(b"\x00\xa7", 1, VPF_RELATIVE)
        assert validity.format == "relative"
        assert validity.period == "1440m"
        assert validity.as_timedelta() == timedelta(days=1)
        assert offset == 2

    def test_absent(self):
        validity, offset = decode_validity(b"\x00", 0, VPF_NONE)
        assert validity.format == "none"
        assert validity.period is None
        assert offset == 0

    def test_absolute_field(self):
        validity, offset = decode_validity(
            bytes.fromhex("02105021436563"), 0, VPF_ABSOLUTE, pivot_year=26
        )
        assert validity.period == "2020-01-05T12:34:56+09:00"
        assert offset == 7

    def test_enhanced_field_is_kept_raw(self):
        validity, offset = decode_validity(bytes(7), 0, VPF_ENHANCED)
        assert validity.format == "enhanced"
        assert validity.raw == bytes(7)
        assert validity.period is None
        assert offset == 7

    def test_truncated(self):
        with pytest.raises(TruncatedDataError):
            decode_validity(b"\x02\x10", 0, VPF_ABSOLUTE)


class TestTimestamp:
    """Test service centre time stamp decoding."""

    def test_positive_zone(self):
        stamp = decode_timestamp(bytes.fromhex("02105021436563"), pivot_year=26)
        assert format_timestamp(stamp) == "2020-01-05T12:34:56+09:00"

    def test_negative_zone(self):
        stamp = decode_timestamp(bytes.fromhex("0210502143656B"), pivot_year=26)
        assert format_timestamp(stamp) == "2020-01-05T12:34:56-09:00"

    def test_year_pivot(self):
        data = bytes.fromhex("99309251619580")
        assert decode_timestamp(data, pivot_year=26).year == 1999
        assert decode_timestamp(data, pivot_year=99).year == 2099

    def test_known_vector(self):
        stamp = decode_timestamp(bytes.fromhex("99309251619580"), pivot_year=26)
        assert format_timestamp(stamp) == "1999-03-29T15:16:59+02:00"

    def test_out_of_range_fields_are_clamped(self):
        # month 13, day 31 and 99 seconds
        stamp = decode_timestamp(bytes.fromhex("02311300009900"), pivot_year=26)
        assert (stamp.month, stamp.day, stamp.second) == (12, 31, 59)

    def test_day_is_clamped_to_month(self):
        stamp = decode_timestamp(bytes.fromhex("32201300000000"), pivot_year=26)
        assert (stamp.year, stamp.month, stamp.day) == (2023, 2, 28)

    def test_wrong_length(self):
        with pytest.raises(TruncatedDataError):
            decode_timestamp(b"\x02\x10")


class TestUserDataHeader:
    """Test UDH decoding."""

    def test_concat_header(self):
        assert concat_header(3, 2) == bytes([0x05, 0x00, 0x03, 0x00, 0x03, 0x02])

    def test_invalid_part(self):
        with pytest.raises(ValueError):
            concat_header(2, 3)

    def test_decode_concat(self):
        concat, offset = decode_user_data_header(bytes([0x05, 0x00, 0x03, 0x2A, 0x03, 0x02, 0x41]))
        assert concat == Concat(reference=42, total=3, sequence=2)
        assert offset == 6

    def test_empty_header(self):
        assert decode_user_data_header(b"\x00\x41") == (None, 1)

    def test_unsupported_element(self):
        with pytest.raises(UnsupportedUdhIeError):
            decode_user_data_header(bytes([0x03, 0x24, 0x01, 0x01]))

    def test_bad_concat_length(self):
        with pytest.raises(InvalidInputError):
            decode_user_data_header(bytes([0x04, 0x00, 0x02, 0x01, 0x01]))

    def test_truncated_header(self):
        with pytest.raises(TruncatedDataError):
            decode_user_data_header(bytes([0x05, 0x00, 0x03]))


class TestUserDataLength:
    """Test the TP-UDL to octet conversion."""

    @pytest.mark.parametrize("udl, octets", [(0, 0), (1, 1), (8, 7), (10, 9), (160, 140)])
    def test_gsm7(self, udl, octets):
        assert user_data_octets(udl, ALPHABET_GSM7) == octets

    def test_ucs2(self):
        assert user_data_octets(140, ALPHABET_UCS2) == 140
