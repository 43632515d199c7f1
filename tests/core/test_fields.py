from __future__ import annotations

import pytest

from mcp_syslog_codec.core.rfc5424 import Cursor, InvalidValue, MalformedMessage
from mcp_syslog_codec.core.rfc5424.fields import (
    APP_NAME,
    HOSTNAME,
    MSG_ID,
    PROC_ID,
    decode_field,
    encode_field,
)


def test_encode_absent_field_is_nil() -> None:
    assert encode_field(None, HOSTNAME) == b"-"


def test_encode_plain_field() -> None:
    assert encode_field("mymachine.example.com", HOSTNAME) == b"mymachine.example.com"


def test_encode_limits() -> None:
    assert encode_field("a" * 48, APP_NAME) == b"a" * 48
    with pytest.raises(InvalidValue):
        encode_field("a" * 49, APP_NAME)
    with pytest.raises(InvalidValue):
        encode_field("m" * 33, MSG_ID)
    assert encode_field("p" * 128, PROC_ID) == b"p" * 128


@pytest.mark.parametrize("value", [123, 1.5, b"host", True])
def test_encode_rejects_non_string_values(value: object) -> None:
    with pytest.raises(InvalidValue):
        encode_field(value, HOSTNAME)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", ["", "has space", "tab\there", "café", "-"])
def test_encode_rejects_bad_values(value: str) -> None:
    with pytest.raises(InvalidValue):
        encode_field(value, HOSTNAME)


def test_decode_stops_at_space() -> None:
    cur = Cursor(b"host app")
    assert decode_field(cur, HOSTNAME) == "host"
    assert cur.remaining == b" app"


def test_decode_nil() -> None:
    cur = Cursor(b"- rest")
    assert decode_field(cur, APP_NAME) is None
    assert cur.pos == 1


def test_dash_prefixed_value_is_not_nil() -> None:
    cur = Cursor(b"-x rest")
    assert decode_field(cur, PROC_ID) == "-x"


def test_decode_too_long_reports_offset() -> None:
    cur = Cursor(b"<1>1 - " + b"m" * 33 + b" rest")
    cur.pos = 7
    with pytest.raises(MalformedMessage) as exc:
        decode_field(cur, MSG_ID)
    assert exc.value.offset == 7


def test_decode_rejects_control_bytes() -> None:
    with pytest.raises(MalformedMessage):
        decode_field(Cursor(b"ho\x01st rest"), HOSTNAME)
