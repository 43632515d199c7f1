from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from mcp_syslog_codec.core.rfc5424 import (
    Cursor,
    InvalidValue,
    MalformedMessage,
    OffsetSign,
    Timestamp,
    UtcOffset,
    format_timestamp,
    parse_timestamp,
)
from mcp_syslog_codec.core.rfc5424.timestamp import decode_timestamp, encode_timestamp


def test_parse_utc_with_fraction() -> None:
    ts = parse_timestamp("2003-10-11T22:14:15.003Z")
    assert ts is not None
    assert ts.date == (2003, 10, 11)
    assert ts.time == (22, 14, 15)
    assert ts.fraction == "003"
    assert ts.offset.is_utc


def test_parse_negative_offset_with_microseconds() -> None:
    ts = parse_timestamp("2003-08-24T05:14:15.000003-07:00")
    assert ts is not None
    assert ts.fraction == "000003"
    assert ts.offset == UtcOffset(OffsetSign.MINUS, 7, 0)


def test_parse_positive_offset_without_fraction() -> None:
    ts = parse_timestamp("1985-04-12T23:20:50+05:30")
    assert ts is not None
    assert ts.fraction is None
    assert ts.offset == UtcOffset(OffsetSign.PLUS, 5, 30)


def test_nil_timestamp() -> None:
    assert parse_timestamp("-") is None
    assert encode_timestamp(None) == b"-"


def test_nil_followed_by_space_leaves_cursor_on_separator() -> None:
    cur = Cursor(b"- host")
    assert decode_timestamp(cur) is None
    assert cur.remaining == b" host"


def test_format_keeps_fraction_digits() -> None:
    ts = Timestamp(2003, 10, 11, 22, 14, 15, fraction="003")
    assert format_timestamp(ts) == "2003-10-11T22:14:15.003Z"


def test_format_offset_is_zero_padded() -> None:
    ts = Timestamp(2003, 8, 24, 5, 14, 15, offset=UtcOffset(OffsetSign.MINUS, 7, 5))
    assert format_timestamp(ts) == "2003-08-24T05:14:15-07:05"


def test_leap_second_is_accepted() -> None:
    ts = parse_timestamp("2016-12-31T23:59:60Z")
    assert ts is not None
    assert ts.second == 60
    assert format_timestamp(ts) == "2016-12-31T23:59:60Z"


def test_leap_day() -> None:
    assert parse_timestamp("2024-02-29T00:00:00Z") is not None
    with pytest.raises(MalformedMessage):
        parse_timestamp("2023-02-29T00:00:00Z")


@pytest.mark.parametrize(
    "text",
    [
        "2003-13-11T22:14:15Z",
        "2003-04-31T22:14:15Z",
        "2003-10-11T24:14:15Z",
        "2003-10-11T22:60:15Z",
        "2003-10-11T22:14:61Z",
        "2003-10-11 22:14:15Z",
        "2003-10-11T22:14:15",
        "2003-10-11T22:14:15.Z",
        "2003-10-11T22:14:15.1234567Z",
        "2003-10-11T22:14:15+0700",
        "2003-10-11T22:14:15+24:00",
        "03-10-11T22:14:15Z",
        "2003-1a-11T22:14:15Z",
    ],
)
def test_malformed_timestamps(text: str) -> None:
    with pytest.raises(MalformedMessage):
        parse_timestamp(text)


def test_encode_rejects_out_of_range_components() -> None:
    with pytest.raises(InvalidValue):
        encode_timestamp(Timestamp(2003, 2, 30, 0, 0, 0))
    with pytest.raises(InvalidValue):
        encode_timestamp(Timestamp(2003, 1, 1, 0, 0, 0, fraction="12a"))
    with pytest.raises(InvalidValue):
        encode_timestamp(Timestamp(2003, 1, 1, 0, 0, 0, offset=UtcOffset(OffsetSign.UTC, 1, 0)))


def test_from_datetime_and_back() -> None:
    dt = datetime(2025, 12, 30, 8, 12, 4, 250000, tzinfo=timezone(timedelta(hours=-3, minutes=-30)))
    ts = Timestamp.from_datetime(dt)
    assert format_timestamp(ts) == "2025-12-30T08:12:04.250000-03:30"
    assert ts.to_datetime() == dt


def test_from_naive_datetime_is_utc() -> None:
    ts = Timestamp.from_datetime(datetime(2025, 1, 1, 0, 0, 0))
    assert format_timestamp(ts) == "2025-01-01T00:00:00Z"
    assert ts.to_datetime() == datetime(2025, 1, 1, tzinfo=UTC)


def test_leap_second_has_no_datetime() -> None:
    ts = Timestamp(2016, 12, 31, 23, 59, 60)
    with pytest.raises(InvalidValue):
        ts.to_datetime()


@pytest.mark.parametrize(
    "ts",
    [
        Timestamp("2003", 1, 1, 0, 0, 0),  # type: ignore[arg-type]
        Timestamp(2003, 1, 1, 0, 0, 1.5),  # type: ignore[arg-type]
        Timestamp(2003, True, 1, 0, 0, 0),
        Timestamp(2003, 1, 1, 0, 0, 0, fraction=3),  # type: ignore[arg-type]
        Timestamp(2003, 1, 1, 0, 0, 0, offset="Z"),  # type: ignore[arg-type]
        Timestamp(2003, 1, 1, 0, 0, 0, offset=UtcOffset("+", 1, 0)),  # type: ignore[arg-type]
        Timestamp(2003, 1, 1, 0, 0, 0, offset=UtcOffset(OffsetSign.PLUS, "01", 0)),  # type: ignore[arg-type]
    ],
)
def test_encode_rejects_wrong_component_types(ts: Timestamp) -> None:
    with pytest.raises(InvalidValue):
        encode_timestamp(ts)


def test_encode_rejects_non_timestamp() -> None:
    with pytest.raises(InvalidValue):
        encode_timestamp("2003-10-11T22:14:15Z")  # type: ignore[arg-type]
