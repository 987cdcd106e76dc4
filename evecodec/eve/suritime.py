# evecodec/eve/suritime.py
"""
Suricata eve.json timestamps: `2019-03-14T10:11:12.123456+0100`.

format_suri_time always writes six fractional digits, which is what the
sensor emits, so format(parse(T)) == T holds byte for byte for six-digit
input. Other widths (including no fraction) are accepted and come back
normalized to six digits.
"""
import json
import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Union

from pydantic import PlainSerializer, PlainValidator

from evecodec.eve.errors import FormatError

# strptime/strftime spelling of the layout Suricata writes into eve.json
SURICATA_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"

_SURI_TIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"([+-])(\d{2})(\d{2})",
    re.ASCII,
)


def parse_suri_time(text: str) -> datetime:
    """
    Parse `YYYY-MM-DDThh:mm:ss[.ffffff]+hhmm` into an aware datetime.
    - fraction is optional and of any width; digits past microseconds are truncated
    - offset must be numeric (no 'Z')
    """
    if not isinstance(text, str):
        raise FormatError(f"timestamp must be a string, got {type(text).__name__}")

    m = _SURI_TIME_RE.fullmatch(text)
    if not m:
        raise FormatError(f"timestamp {text!r} does not match {SURICATA_TIMESTAMP_FORMAT}")

    year, month, day, hour, minute, second, frac, sign, off_h, off_m = m.groups()
    if int(off_h) > 23 or int(off_m) > 59:
        raise FormatError(f"timestamp {text!r} has an out of range UTC offset")

    offset = timedelta(hours=int(off_h), minutes=int(off_m))
    if sign == "-":
        offset = -offset
    micros = int((frac or "")[:6].ljust(6, "0"))

    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micros,
            tzinfo=timezone(offset),
        )
    except ValueError as e:
        raise FormatError(f"timestamp {text!r} is out of range: {e}") from e


def format_suri_time(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    # the layout has no room for offset seconds; they are dropped
    offset_min = int(dt.utcoffset().total_seconds() / 60)
    sign = "-" if offset_min < 0 else "+"
    off_h, off_m = divmod(abs(offset_min), 60)

    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond:06d}"
        f"{sign}{off_h:02d}{off_m:02d}"
    )


def decode_suri_time(raw: Union[bytes, str]) -> datetime:
    """Decode a quoted JSON string holding a sensor timestamp."""
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FormatError(f"timestamp is not valid JSON: {e}") from e
    return parse_suri_time(value)


def encode_suri_time(dt: datetime) -> bytes:
    return b'"' + format_suri_time(dt).encode("ascii") + b'"'


def _validate(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    return parse_suri_time(value)


SuriTime = Annotated[
    datetime,
    PlainValidator(_validate),
    PlainSerializer(format_suri_time, return_type=str, when_used="json"),
]
