"""Read position over a single message buffer.

Every decode stage consumes a prefix of the remaining bytes and leaves the
cursor on the unconsumed suffix. The buffer is never re-sliced except to
return the consumed token.
"""

from __future__ import annotations

from .errors import MalformedMessage

SP = 0x20


class Cursor:
    __slots__ = ("data", "pos")

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data = data
        self.pos = pos

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, remaining={self.remaining!r})"

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    @property
    def remaining(self) -> bytes:
        return self.data[self.pos :]

    def fail(self, reason: str) -> MalformedMessage:
        """Build an error pointing at the current position."""
        return MalformedMessage(reason, offset=self.pos)

    def peek(self, ahead: int = 0) -> int | None:
        """Return the byte ``ahead`` positions from here, or None past the end."""
        i = self.pos + ahead
        if i < len(self.data):
            return self.data[i]
        return None

    def next(self) -> int:
        b = self.peek()
        if b is None:
            raise self.fail("unexpected end of message")
        self.pos += 1
        return b

    def expect(self, byte: int, what: str | None = None) -> None:
        """Consume exactly ``byte`` or fail."""
        b = self.peek()
        if b != byte:
            label = what or repr(chr(byte))
            found = "end of message" if b is None else repr(chr(b))
            raise self.fail(f"expected {label}, found {found}")
        self.pos += 1

    def take(self, n: int) -> bytes:
        end = self.pos + n
        if end > len(self.data):
            raise self.fail(f"expected {n} more bytes")
        out = self.data[self.pos : end]
        self.pos = end
        return out

    def take_until(self, stops: bytes) -> bytes:
        """Consume bytes up to (not including) the first byte in ``stops`` or the end."""
        start = self.pos
        data = self.data
        end = len(data)
        i = start
        while i < end and data[i] not in stops:
            i += 1
        self.pos = i
        return data[start:i]

    def take_digits(self, n: int, what: str) -> int:
        """Consume exactly ``n`` ASCII digits and return their value."""
        start = self.pos
        raw = self.take(n) if self.pos + n <= len(self.data) else None
        if raw is None or not raw.isdigit():
            self.pos = start
            raise self.fail(f"expected {n}-digit {what}")
        return int(raw)

    def take_rest(self) -> bytes:
        out = self.data[self.pos :]
        self.pos = len(self.data)
        return out
