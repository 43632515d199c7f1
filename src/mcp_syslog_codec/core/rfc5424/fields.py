"""Space-terminated header fields: HOSTNAME, APP-NAME, PROCID, MSGID."""

from __future__ import annotations

from dataclasses import dataclass

from .cursor import SP, Cursor
from .errors import InvalidValue

NIL = b"-"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    max_length: int


HOSTNAME = FieldSpec("hostname", 255)
APP_NAME = FieldSpec("app_name", 48)
PROC_ID = FieldSpec("proc_id", 128)
MSG_ID = FieldSpec("msg_id", 32)


def _is_printusascii(raw: bytes) -> bool:
    return all(33 <= b <= 126 for b in raw)


def field_problem(raw: bytes, spec: FieldSpec) -> str | None:
    if not raw:
        return f"{spec.name} must not be empty"
    if len(raw) > spec.max_length:
        return f"{spec.name} longer than {spec.max_length} characters"
    if not _is_printusascii(raw):
        return f"{spec.name} must be printable US-ASCII without spaces"
    return None


def encode_field(value: str | None, spec: FieldSpec) -> bytes:
    """Return the wire bytes for a header field, ``-`` when absent."""
    if value is None:
        return NIL
    if not isinstance(value, str):
        raise InvalidValue(f"{spec.name} must be a string, got {type(value).__name__}")
    try:
        raw = value.encode("ascii")
    except UnicodeEncodeError as e:
        raise InvalidValue(f"{spec.name} must be printable US-ASCII: {value!r}") from e
    if raw == NIL:
        raise InvalidValue(f"{spec.name} '-' is reserved for the nil value; use None")
    problem = field_problem(raw, spec)
    if problem is not None:
        raise InvalidValue(f"{problem}: {value!r}")
    return raw


def decode_field(cur: Cursor, spec: FieldSpec) -> str | None:
    """Consume one field up to the next space (or the end of the buffer)."""
    if cur.peek() == NIL[0] and cur.peek(1) in (SP, None):
        cur.pos += 1
        return None
    start = cur.pos
    raw = cur.take_until(b" ")
    problem = field_problem(raw, spec)
    if problem is not None:
        cur.pos = start
        raise cur.fail(problem)
    return raw.decode("ascii")
