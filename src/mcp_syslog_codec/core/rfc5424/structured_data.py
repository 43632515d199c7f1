"""STRUCTURED-DATA codec (RFC 5424 section 6.3).

    STRUCTURED-DATA = NILVALUE / 1*SD-ELEMENT
    SD-ELEMENT      = "[" SD-ID *(SP SD-PARAM) "]"
    SD-PARAM        = PARAM-NAME "=" %d34 PARAM-VALUE %d34

Inside PARAM-VALUE the characters ``"``, ``\\`` and ``]`` are escaped with a
backslash. On decode a backslash always takes the following byte literally.
"""

from __future__ import annotations

from collections.abc import Sequence

from .cursor import SP, Cursor
from .errors import InvalidValue
from .models import SDElement, SDParam

NIL = b"-"
MAX_NAME_LENGTH = 32

_OPEN = ord("[")
_CLOSE = ord("]")
_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_EQUALS = ord("=")

# Excluded from SD-ID and PARAM-NAME in addition to non-printable bytes.
_NAME_FORBIDDEN = b'= ]"\\'


def _name_problem(raw: bytes, what: str) -> str | None:
    if not raw:
        return f"empty {what}"
    if len(raw) > MAX_NAME_LENGTH:
        return f"{what} longer than {MAX_NAME_LENGTH} characters"
    for b in raw:
        if not 33 <= b <= 126 or b in _NAME_FORBIDDEN:
            return f"invalid character {chr(b)!r} in {what}"
    return None


def _encode_name(name: str, what: str) -> bytes:
    if not isinstance(name, str):
        raise InvalidValue(f"{what} must be a string, got {type(name).__name__}")
    try:
        raw = name.encode("ascii")
    except UnicodeEncodeError as e:
        raise InvalidValue(f"{what} must be printable US-ASCII: {name!r}") from e
    problem = _name_problem(raw, what)
    if problem is not None:
        raise InvalidValue(f"{problem}: {name!r}")
    return raw


def escape_value(value: str) -> bytes:
    """UTF-8 encode a PARAM-VALUE, escaping ``"``, ``\\`` and ``]``."""
    if not isinstance(value, str):
        raise InvalidValue(f"PARAM-VALUE must be a string, got {type(value).__name__}")
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("]", "\\]")
    return escaped.encode("utf-8")


def encode_structured_data(elements: Sequence[SDElement]) -> list[bytes]:
    """Return the wire chunks for the structured-data section."""
    if not elements:
        return [NIL]
    chunks: list[bytes] = []
    for element in elements:
        if not isinstance(element, SDElement):
            raise InvalidValue(f"expected SDElement, got {type(element).__name__}")
        chunks.append(b"[" + _encode_name(element.id, "SD-ID"))
        for param in element.params:
            if not isinstance(param, SDParam):
                raise InvalidValue(f"expected SDParam in {element.id!r}, got {type(param).__name__}")
            chunks.append(
                b" " + _encode_name(param.name, "PARAM-NAME") + b'="' + escape_value(param.value) + b'"'
            )
        chunks.append(b"]")
    return chunks


def _decode_name(cur: Cursor, stops: bytes, what: str) -> str:
    start = cur.pos
    raw = cur.take_until(stops)
    problem = _name_problem(raw, what)
    if problem is not None:
        cur.pos = start
        raise cur.fail(problem)
    return raw.decode("ascii")


def _decode_value(cur: Cursor) -> str:
    cur.expect(_QUOTE, "'\"' opening PARAM-VALUE")
    start = cur.pos
    out = bytearray()
    while True:
        b = cur.peek()
        if b is None:
            cur.pos = start
            raise cur.fail("unterminated PARAM-VALUE")
        cur.pos += 1
        if b == _QUOTE:
            break
        if b == _BACKSLASH:
            escaped = cur.peek()
            if escaped is None:
                cur.pos = start
                raise cur.fail("unterminated PARAM-VALUE")
            cur.pos += 1
            out.append(escaped)
        else:
            out.append(b)
    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as e:
        cur.pos = start
        raise cur.fail(f"PARAM-VALUE is not valid UTF-8: {e.reason}") from e


def _decode_element(cur: Cursor) -> SDElement:
    cur.expect(_OPEN, "'[' opening SD-ELEMENT")
    sd_id = _decode_name(cur, b" ]", "SD-ID")
    params: list[SDParam] = []
    while True:
        b = cur.peek()
        if b == _CLOSE:
            cur.pos += 1
            return SDElement(id=sd_id, params=tuple(params))
        if b != SP:
            raise cur.fail("expected ' ' or ']' in SD-ELEMENT")
        cur.pos += 1
        name = _decode_name(cur, b"= ]", "PARAM-NAME")
        cur.expect(_EQUALS, "'=' after PARAM-NAME")
        params.append(SDParam(name=name, value=_decode_value(cur)))


def decode_structured_data(cur: Cursor) -> tuple[SDElement, ...]:
    """Consume the structured-data section; ``-`` yields an empty tuple."""
    if cur.peek() == NIL[0]:
        cur.pos += 1
        return ()
    if cur.peek() != _OPEN:
        raise cur.fail("expected '-' or '[' at STRUCTURED-DATA")
    elements = [_decode_element(cur)]
    while cur.peek() == _OPEN:
        elements.append(_decode_element(cur))
    return tuple(elements)
