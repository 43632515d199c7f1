"""Structured representation of RFC 5424 messages.

All values are immutable. Absent optional fields are ``None``; the ``-`` nil
value only exists on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from .errors import InvalidValue


class Facility(str, Enum):
    """RFC 5427 facility names."""

    KERN = "kern"
    USER = "user"
    MAIL = "mail"
    DAEMON = "daemon"
    AUTH = "auth"
    SYSLOG = "syslog"
    LPR = "lpr"
    NEWS = "news"
    UUCP = "uucp"
    CRON = "cron"
    AUTHPRIV = "authpriv"
    FTP = "ftp"
    NTP = "ntp"
    AUDIT = "audit"
    CONSOLE = "console"
    CRON2 = "cron2"
    LOCAL0 = "local0"
    LOCAL1 = "local1"
    LOCAL2 = "local2"
    LOCAL3 = "local3"
    LOCAL4 = "local4"
    LOCAL5 = "local5"
    LOCAL6 = "local6"
    LOCAL7 = "local7"


class Severity(str, Enum):
    """RFC 5427 severity names, most urgent first."""

    EMERG = "emerg"
    ALERT = "alert"
    CRIT = "crit"
    ERR = "err"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"


class OffsetSign(str, Enum):
    UTC = "Z"
    PLUS = "+"
    MINUS = "-"


class OutputRepresentation(str, Enum):
    """Shape of the value returned by ``encode``."""

    BUFFER = "buffer"  # one contiguous bytes object
    SEQUENCE = "sequence"  # list of byte chunks in emission order
    CHARACTERS = "characters"  # list of byte values


@dataclass(frozen=True, slots=True)
class UtcOffset:
    """Timezone offset of a timestamp; the default value is ``Z``."""

    sign: OffsetSign = OffsetSign.UTC
    hours: int = 0
    minutes: int = 0

    @property
    def is_utc(self) -> bool:
        return self.sign is OffsetSign.UTC

    def to_timedelta(self) -> timedelta:
        delta = timedelta(hours=self.hours, minutes=self.minutes)
        return -delta if self.sign is OffsetSign.MINUS else delta


@dataclass(frozen=True, slots=True)
class Timestamp:
    """RFC 3339 derived syslog timestamp.

    ``fraction`` keeps the literal digits after the decimal point so that
    e.g. ``.003`` and ``.3`` stay distinct.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    fraction: str | None = None
    offset: UtcOffset = UtcOffset()

    @property
    def date(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    @property
    def time(self) -> tuple[int, int, int]:
        return (self.hour, self.minute, self.second)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        """Build a timestamp from an aware datetime (naive means UTC)."""
        fraction = f"{dt.microsecond:06d}" if dt.microsecond else None
        delta = dt.utcoffset()
        if delta is None or delta == timedelta(0):
            offset = UtcOffset()
        else:
            sign = OffsetSign.MINUS if delta < timedelta(0) else OffsetSign.PLUS
            total = abs(int(delta.total_seconds())) // 60
            offset = UtcOffset(sign, total // 60, total % 60)
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
            fraction=fraction,
            offset=offset,
        )

    def to_datetime(self) -> datetime:
        """Return an aware datetime; fractions beyond microseconds are truncated."""
        if self.second == 60:
            raise InvalidValue("leap second cannot be represented as a datetime")
        micro = int((self.fraction or "0")[:6].ljust(6, "0"))
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                micro,
                tzinfo=timezone(self.offset.to_timedelta()),
            )
        except ValueError as e:
            raise InvalidValue(f"timestamp not representable as datetime: {e}") from e


@dataclass(frozen=True, slots=True)
class Header:
    facility: Facility
    severity: Severity
    version: int = 1
    timestamp: Timestamp | None = None
    hostname: str | None = None
    app_name: str | None = None
    proc_id: str | None = None
    msg_id: str | None = None


@dataclass(frozen=True, slots=True)
class SDParam:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class SDElement:
    """One ``[SD-ID PARAM="value" ...]`` group. Duplicate names are kept."""

    id: str
    params: tuple[SDParam, ...] = ()

    def get_all(self, name: str) -> list[str]:
        """Return every value recorded for ``name``, in wire order."""
        return [p.value for p in self.params if p.name == name]


@dataclass(frozen=True, slots=True)
class SyslogMessage:
    """A complete RFC 5424 message."""

    header: Header
    structured_data: tuple[SDElement, ...] = ()
    message: bytes | None = None

    def __post_init__(self) -> None:
        # An empty body is the same message as no body.
        if isinstance(self.message, (bytes, bytearray)) and not self.message:
            object.__setattr__(self, "message", None)


@dataclass(frozen=True, slots=True)
class CodecOptions:
    output: OutputRepresentation = OutputRepresentation.SEQUENCE
