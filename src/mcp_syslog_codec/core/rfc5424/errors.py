"""Error kinds raised by the RFC 5424 codec."""

from __future__ import annotations


class SyslogCodecError(ValueError):
    """Base class for all codec errors."""


class MalformedMessage(SyslogCodecError):
    """Decode input does not match the RFC 5424 grammar."""

    def __init__(self, reason: str, *, offset: int | None = None) -> None:
        self.reason = reason
        self.offset = offset
        if offset is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (at byte {offset})")


class InvalidValue(SyslogCodecError):
    """Encode input violates a field constraint."""


class InvalidOption(SyslogCodecError):
    """Unrecognized option key or value."""
