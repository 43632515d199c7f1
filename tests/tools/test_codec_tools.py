from __future__ import annotations

import json
from pathlib import Path

import pytest

from mcp_syslog_codec.core.rfc5424 import InvalidOption, InvalidValue, MalformedMessage
from mcp_syslog_codec.paths import BASE_DIR_ENV
from mcp_syslog_codec.schemas import SyslogMessageModel
from mcp_syslog_codec.tools.codec import (
    HARD_LIMIT,
    decode_syslog_file_impl,
    decode_syslog_impl,
    encode_syslog_impl,
)

MESSAGE = {
    "facility": "local0",
    "severity": "info",
    "timestamp": "2003-10-11T22:14:15.003Z",
    "hostname": "mymachine",
    "app_name": "su",
    "msg_id": "ID47",
    "structured_data": [{"id": "origin", "params": [{"name": "ip", "value": "192.0.2.1"}]}],
    "message": "hello",
}

WIRE = '<134>1 2003-10-11T22:14:15.003Z mymachine su - ID47 [origin ip="192.0.2.1"] hello'


def test_encode_syslog_impl_buffer() -> None:
    out = encode_syslog_impl(message=MESSAGE)
    assert out == {"output": "buffer", "encoded": WIRE, "octets": len(WIRE)}


def test_encode_syslog_impl_sequence_and_characters() -> None:
    seq = encode_syslog_impl(message=MESSAGE, output="sequence")
    assert "".join(seq["encoded"]) == WIRE
    assert seq["octets"] == len(WIRE)

    chars = encode_syslog_impl(message=MESSAGE, output="characters")
    assert bytes(chars["encoded"]) == WIRE.encode("ascii")
    json.dumps(chars)


def test_encode_syslog_impl_minimal() -> None:
    out = encode_syslog_impl(message={"facility": "local0", "severity": "info", "message": "test"})
    assert out["encoded"] == "<134>1 - - - - - - test"


def test_encode_syslog_impl_errors() -> None:
    with pytest.raises(InvalidValue):
        encode_syslog_impl(message={"facility": "bogus", "severity": "info"})
    with pytest.raises(InvalidValue):
        encode_syslog_impl(message={**MESSAGE, "timestamp": "yesterday"})
    with pytest.raises(InvalidValue):
        encode_syslog_impl(message={**MESSAGE, "hostname": "has space"})
    with pytest.raises(InvalidOption):
        encode_syslog_impl(message=MESSAGE, output="hex")


def test_decode_syslog_impl() -> None:
    out = decode_syslog_impl(data=WIRE)
    assert out["facility"] == "local0"
    assert out["severity"] == "info"
    assert out["priority"] == 134
    assert out["timestamp"] == "2003-10-11T22:14:15.003Z"
    assert out["proc_id"] is None
    assert out["structured_data"] == [{"id": "origin", "params": [{"name": "ip", "value": "192.0.2.1"}]}]
    assert out["message"] == "hello"


def test_decode_then_encode_through_models() -> None:
    decoded = decode_syslog_impl(data=WIRE)
    assert encode_syslog_impl(message=decoded)["encoded"] == WIRE
    assert SyslogMessageModel.model_validate(decoded).to_message().header.facility.value == "local0"


def test_decode_syslog_impl_malformed() -> None:
    with pytest.raises(MalformedMessage):
        decode_syslog_impl(data="<134 1 -")


@pytest.mark.asyncio
async def test_decode_syslog_file_impl(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    write_messages,
    sample_lines: list[bytes],
) -> None:
    monkeypatch.setenv(BASE_DIR_ENV, str(tmp_path))
    write_messages(tmp_path / "app.syslog", [*sample_lines, b"garbage"])

    out = await decode_syslog_file_impl(path="app.syslog", include_raw=True)

    assert out["count"] == 4
    assert out["errors"] == 1
    assert out["entries"][0]["message"]["hostname"] == "mymachine.example.com"
    assert out["entries"][0]["raw"] == sample_lines[0].decode("utf-8")
    assert out["entries"][3]["line_no"] == 4
    assert "error" in out["entries"][3]


@pytest.mark.asyncio
async def test_decode_syslog_file_impl_limit_and_strict(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    write_messages,
    sample_lines: list[bytes],
) -> None:
    monkeypatch.setenv(BASE_DIR_ENV, str(tmp_path))
    write_messages(tmp_path / "app.log", [*sample_lines, b"garbage"])

    out = await decode_syslog_file_impl(path="app.log", limit=2)
    assert out["count"] == 2
    assert "raw" not in out["entries"][0]

    with pytest.raises(MalformedMessage):
        await decode_syslog_file_impl(path="app.log", strict=True)

    with pytest.raises(ValueError):
        await decode_syslog_file_impl(path="app.log", limit=0)

    assert HARD_LIMIT >= 200


@pytest.mark.asyncio
async def test_decode_syslog_file_impl_path_policy(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BASE_DIR_ENV, str(tmp_path))
    (tmp_path / "notes.md").write_text("<14>1 -\n", encoding="utf-8")

    with pytest.raises(ValueError):
        await decode_syslog_file_impl(path="notes.md")
    with pytest.raises(ValueError):
        await decode_syslog_file_impl(path="../outside.log")
    with pytest.raises(FileNotFoundError):
        await decode_syslog_file_impl(path="missing.log")
