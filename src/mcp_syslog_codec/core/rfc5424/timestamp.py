"""TIMESTAMP field codec (RFC 5424 section 6.2.3).

Wire form: ``YYYY-MM-DDTHH:MM:SS[.F{1,6}](Z|+HH:MM|-HH:MM)`` or ``-``.
"""

from __future__ import annotations

import calendar

from .cursor import SP, Cursor
from .errors import InvalidValue, MalformedMessage
from .models import OffsetSign, Timestamp, UtcOffset

NIL = b"-"
MAX_FRACTION_DIGITS = 6

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and calendar.isleap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


_COMPONENTS = ("year", "month", "day", "hour", "minute", "second")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def timestamp_problem(ts: Timestamp) -> str | None:
    """Return a description of the first out-of-range component, or None."""
    for name in _COMPONENTS:
        if not _is_int(getattr(ts, name)):
            return f"{name} must be an integer, got {getattr(ts, name)!r}"
    if ts.fraction is not None and not isinstance(ts.fraction, str):
        return f"fraction must be a string of digits, got {ts.fraction!r}"
    off = ts.offset
    if not isinstance(off, UtcOffset) or not isinstance(off.sign, OffsetSign):
        return f"offset must be a UtcOffset, got {off!r}"
    if not (_is_int(off.hours) and _is_int(off.minutes)):
        return f"offset hours and minutes must be integers, got {off!r}"
    if not 0 <= ts.year <= 9999:
        return f"year {ts.year} out of range 0..9999"
    if not 1 <= ts.month <= 12:
        return f"month {ts.month} out of range 1..12"
    if not 1 <= ts.day <= _days_in_month(ts.year, ts.month):
        return f"day {ts.day} invalid for {ts.year:04d}-{ts.month:02d}"
    if not 0 <= ts.hour <= 23:
        return f"hour {ts.hour} out of range 0..23"
    if not 0 <= ts.minute <= 59:
        return f"minute {ts.minute} out of range 0..59"
    # 60 allows for a leap second
    if not 0 <= ts.second <= 60:
        return f"second {ts.second} out of range 0..60"
    if ts.fraction is not None:
        f = ts.fraction
        if not (f.isascii() and f.isdigit()) or not 1 <= len(f) <= MAX_FRACTION_DIGITS:
            return f"fraction {f!r} must be 1..{MAX_FRACTION_DIGITS} digits"
    if off.sign is OffsetSign.UTC:
        if off.hours or off.minutes:
            return "UTC offset must not carry hours or minutes"
    else:
        if not 0 <= off.hours <= 23:
            return f"offset hour {off.hours} out of range 0..23"
        if not 0 <= off.minutes <= 59:
            return f"offset minute {off.minutes} out of range 0..59"
    return None


def encode_timestamp(ts: Timestamp | None) -> bytes:
    """Render a timestamp (or the nil value) as wire bytes."""
    if ts is None:
        return NIL
    if not isinstance(ts, Timestamp):
        raise InvalidValue(f"timestamp must be a Timestamp, got {type(ts).__name__}")
    problem = timestamp_problem(ts)
    if problem is not None:
        raise InvalidValue(f"Invalid timestamp: {problem}")

    out = (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )
    if ts.fraction is not None:
        out += "." + ts.fraction
    off = ts.offset
    if off.sign is OffsetSign.UTC:
        out += "Z"
    else:
        out += f"{off.sign.value}{off.hours:02d}:{off.minutes:02d}"
    return out.encode("ascii")


def decode_timestamp(cur: Cursor) -> Timestamp | None:
    """Consume a timestamp (or ``-``) at the cursor.

    The cursor is left on the byte following the timestamp.
    """
    if cur.peek() == NIL[0] and cur.peek(1) in (SP, None):
        cur.pos += 1
        return None

    start = cur.pos
    year = cur.take_digits(4, "year")
    cur.expect(ord("-"), "'-' after year")
    month = cur.take_digits(2, "month")
    cur.expect(ord("-"), "'-' after month")
    day = cur.take_digits(2, "day")
    cur.expect(ord("T"), "'T' between date and time")
    hour = cur.take_digits(2, "hour")
    cur.expect(ord(":"), "':' after hour")
    minute = cur.take_digits(2, "minute")
    cur.expect(ord(":"), "':' after minute")
    second = cur.take_digits(2, "second")

    fraction: str | None = None
    if cur.peek() == ord("."):
        cur.pos += 1
        digits = cur.take_until(b"Z+- ")
        if not digits.isdigit():
            raise cur.fail("expected digits in fractional seconds")
        fraction = digits.decode("ascii")

    sign_byte = cur.peek()
    if sign_byte == ord("Z"):
        cur.pos += 1
        offset = UtcOffset()
    elif sign_byte in (ord("+"), ord("-")):
        cur.pos += 1
        off_hours = cur.take_digits(2, "offset hour")
        cur.expect(ord(":"), "':' in offset")
        off_minutes = cur.take_digits(2, "offset minute")
        offset = UtcOffset(OffsetSign(chr(sign_byte)), off_hours, off_minutes)
    else:
        raise cur.fail("expected 'Z', '+' or '-' timezone offset")

    ts = Timestamp(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        fraction=fraction,
        offset=offset,
    )
    problem = timestamp_problem(ts)
    if problem is not None:
        raise MalformedMessage(f"Invalid timestamp: {problem}", offset=start)
    return ts


def format_timestamp(ts: Timestamp | None) -> str:
    """Text form of ``encode_timestamp``."""
    return encode_timestamp(ts).decode("ascii")


def parse_timestamp(text: str) -> Timestamp | None:
    """Parse a complete timestamp string; trailing characters are an error."""
    try:
        raw = text.strip().encode("ascii")
    except UnicodeEncodeError as e:
        raise MalformedMessage("timestamp must be ASCII") from e
    cur = Cursor(raw)
    ts = decode_timestamp(cur)
    if not cur.at_end:
        raise cur.fail("unexpected characters after timestamp")
    return ts
