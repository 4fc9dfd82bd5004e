"""Service centre time stamp decoding.

The year is carried as two digits. Values up to the current two-digit year
are read as 20xx and anything larger as 19xx, so the same octets can decode
differently once the century turns.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..errors import TruncatedDataError

TIMESTAMP_LENGTH = 7


def semi_octet_to_int(byte: int) -> int:
    return (byte & 0x0F) * 10 + ((byte >> 4) & 0x0F)


def decode_timestamp(data: bytes, pivot_year: Optional[int] = None) -> datetime:
    """Decode YY MM DD hh mm ss tz semi-octets into an aware datetime.

    *pivot_year* is the last two-digit year read as 20xx; it defaults to
    the current year.
    """

    if len(data) != TIMESTAMP_LENGTH:
        raise TruncatedDataError("timestamp", TIMESTAMP_LENGTH, len(data))
    values: List[int] = [semi_octet_to_int(b) for b in data[:6]]
    tz_byte = data[6]
    sign = -1 if tz_byte & 0x08 else 1
    tz_quarters = semi_octet_to_int(tz_byte & 0xF7)
    offset = timezone(sign * timedelta(minutes=tz_quarters * 15))

    if pivot_year is None:
        pivot_year = datetime.now().year % 100
    year = values[0]
    year += 2000 if year <= pivot_year else 1900
    month = max(1, min(values[1], 12))
    last_day = calendar.monthrange(year, month)[1]
    return datetime(
        year=year,
        month=month,
        day=max(1, min(values[2], last_day)),
        hour=min(values[3], 23),
        minute=min(values[4], 59),
        second=min(values[5], 59),
        tzinfo=offset,
    )


def format_timestamp(value: datetime) -> str:
    """Render as ``YYYY-MM-DDThh:mm:ss+HH:MM``."""
    return value.isoformat()


__all__ = [
    "TIMESTAMP_LENGTH",
    "decode_timestamp",
    "format_timestamp",
    "semi_octet_to_int",
]
