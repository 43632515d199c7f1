"""Message assembly and positional decoding.

    SYSLOG-MSG = HEADER SP STRUCTURED-DATA [SP MSG]
    HEADER     = PRI VERSION SP TIMESTAMP SP HOSTNAME SP APP-NAME SP PROCID SP MSGID
"""

from __future__ import annotations

from typing import Any

from .cursor import SP, Cursor
from .errors import InvalidValue
from .fields import APP_NAME, HOSTNAME, MSG_ID, PROC_ID, decode_field, encode_field
from .models import Header, SyslogMessage
from .options import resolve_options
from .output import Encoded, as_buffer, render
from .structured_data import decode_structured_data, encode_structured_data
from .tables import MAX_PRIORITY, decode_priority, encode_priority
from .timestamp import decode_timestamp, encode_timestamp

MAX_VERSION = 999

_SPACE = b" "


def _encode_version(version: int) -> bytes:
    if isinstance(version, bool) or not isinstance(version, int):
        raise InvalidValue(f"version must be an integer, got {version!r}")
    if not 1 <= version <= MAX_VERSION:
        raise InvalidValue(f"version {version} out of range 1..{MAX_VERSION}")
    return str(version).encode("ascii")


def encode_header(header: Header) -> list[bytes]:
    """Return the header chunks (everything before STRUCTURED-DATA)."""
    pri = encode_priority(header.facility, header.severity)
    return [
        b"<%d>" % pri,
        _encode_version(header.version),
        _SPACE,
        encode_timestamp(header.timestamp),
        _SPACE,
        encode_field(header.hostname, HOSTNAME),
        _SPACE,
        encode_field(header.app_name, APP_NAME),
        _SPACE,
        encode_field(header.proc_id, PROC_ID),
        _SPACE,
        encode_field(header.msg_id, MSG_ID),
    ]


def encode_chunks(message: SyslogMessage) -> list[bytes]:
    """Return the full message as byte chunks in emission order."""
    chunks = encode_header(message.header)
    chunks.append(_SPACE)
    chunks.extend(encode_structured_data(message.structured_data))
    if message.message:
        if not isinstance(message.message, (bytes, bytearray)):
            raise InvalidValue("message body must be bytes")
        chunks.append(_SPACE)
        chunks.append(bytes(message.message))
    return chunks


def encode(message: SyslogMessage, options: Any = None) -> Encoded:
    """Encode a message into its RFC 5424 wire form.

    The default output is a list of byte chunks; pass ``"buffer"`` for a
    single bytes object or ``"characters"`` for a list of byte values.
    """
    opts = resolve_options(options)
    return render(encode_chunks(message), opts.output)


def _decode_pri(cur: Cursor) -> int:
    cur.expect(ord("<"), "'<' opening PRI")
    start = cur.pos
    digits = cur.take_until(b">")
    if cur.at_end:
        cur.pos = start
        raise cur.fail("missing '>' closing PRI")
    if not digits.isdigit() or not 1 <= len(digits) <= 3:
        cur.pos = start
        raise cur.fail("PRI must be 1 to 3 digits")
    if len(digits) > 1 and digits[0] == ord("0"):
        cur.pos = start
        raise cur.fail("PRI must not have leading zeros")
    value = int(digits)
    if value > MAX_PRIORITY:
        cur.pos = start
        raise cur.fail(f"PRI {value} out of range 0..{MAX_PRIORITY}")
    cur.pos += 1
    return value


def _decode_version(cur: Cursor) -> int:
    start = cur.pos
    digits = cur.take_until(b" ")
    if not digits.isdigit() or not 1 <= len(digits) <= 3 or digits[0] == ord("0"):
        cur.pos = start
        raise cur.fail("VERSION must be 1 to 3 digits without leading zeros")
    return int(digits)


def _separator(cur: Cursor) -> bool:
    """Consume a field separator. False when the buffer ended cleanly instead.

    A separator must be followed by a field.
    """
    if cur.at_end:
        return False
    cur.expect(SP, "' ' between fields")
    if cur.at_end:
        raise cur.fail("empty field after ' '")
    return True


def decode_header(cur: Cursor) -> Header:
    """Consume PRI through MSGID.

    A buffer that ends at a field boundary after VERSION leaves the remaining
    fields absent.
    """
    facility, severity = decode_priority(_decode_pri(cur))
    values: dict[str, Any] = {"facility": facility, "severity": severity}
    values["version"] = _decode_version(cur)

    if not _separator(cur):
        return Header(**values)
    values["timestamp"] = decode_timestamp(cur)

    for spec in (HOSTNAME, APP_NAME, PROC_ID, MSG_ID):
        if not _separator(cur):
            return Header(**values)
        values[spec.name] = decode_field(cur, spec)
    return Header(**values)


def decode_message(cur: Cursor) -> SyslogMessage:
    header = decode_header(cur)
    if not _separator(cur):
        return SyslogMessage(header=header)
    structured_data = decode_structured_data(cur)
    if cur.at_end:
        return SyslogMessage(header=header, structured_data=structured_data)
    cur.expect(SP, "' ' after STRUCTURED-DATA")
    body = cur.take_rest()
    return SyslogMessage(
        header=header,
        structured_data=structured_data,
        message=body or None,
    )


def decode(buffer: Any, options: Any = None) -> SyslogMessage:
    """Decode one RFC 5424 message.

    ``buffer`` may be bytes or any shape produced by ``encode``.
    """
    resolve_options(options)
    return decode_message(Cursor(as_buffer(buffer)))
