"""Facility / severity lookup tables (RFC 5424 section 6.2.1, RFC 5427)."""

from __future__ import annotations

from .errors import InvalidValue, MalformedMessage
from .models import Facility, Header, Severity

# Table order is the numeric order: facility n has code n * 8.
_FACILITY_ORDER: tuple[Facility, ...] = (
    Facility.KERN,
    Facility.USER,
    Facility.MAIL,
    Facility.DAEMON,
    Facility.AUTH,
    Facility.SYSLOG,
    Facility.LPR,
    Facility.NEWS,
    Facility.UUCP,
    Facility.CRON,
    Facility.AUTHPRIV,
    Facility.FTP,
    Facility.NTP,
    Facility.AUDIT,
    Facility.CONSOLE,
    Facility.CRON2,
    Facility.LOCAL0,
    Facility.LOCAL1,
    Facility.LOCAL2,
    Facility.LOCAL3,
    Facility.LOCAL4,
    Facility.LOCAL5,
    Facility.LOCAL6,
    Facility.LOCAL7,
)

_SEVERITY_ORDER: tuple[Severity, ...] = (
    Severity.EMERG,
    Severity.ALERT,
    Severity.CRIT,
    Severity.ERR,
    Severity.WARNING,
    Severity.NOTICE,
    Severity.INFO,
    Severity.DEBUG,
)

FACILITY_CODES: dict[Facility, int] = {f: i * 8 for i, f in enumerate(_FACILITY_ORDER)}
SEVERITY_CODES: dict[Severity, int] = {s: i for i, s in enumerate(_SEVERITY_ORDER)}

_CODE_TO_FACILITY: dict[int, Facility] = {c: f for f, c in FACILITY_CODES.items()}
_CODE_TO_SEVERITY: dict[int, Severity] = {c: s for s, c in SEVERITY_CODES.items()}

MAX_PRIORITY = 191


def _check_tables() -> None:
    if set(FACILITY_CODES) != set(Facility) or len(_CODE_TO_FACILITY) != 24:
        raise RuntimeError("facility table is incomplete")
    if set(SEVERITY_CODES) != set(Severity) or len(_CODE_TO_SEVERITY) != 8:
        raise RuntimeError("severity table is incomplete")


_check_tables()


def _coerce_facility(name: Facility | str) -> Facility:
    if isinstance(name, Facility):
        return name
    try:
        return Facility(str(name).strip().lower())
    except ValueError as e:
        raise InvalidValue(f"Unknown facility {name!r}") from e


def _coerce_severity(name: Severity | str) -> Severity:
    if isinstance(name, Severity):
        return name
    try:
        return Severity(str(name).strip().lower())
    except ValueError as e:
        raise InvalidValue(f"Unknown severity {name!r}") from e


def facility_code(name: Facility | str) -> int:
    """Return the facility code (a multiple of 8) for a facility name."""
    return FACILITY_CODES[_coerce_facility(name)]


def severity_code(name: Severity | str) -> int:
    """Return the severity code (0..7) for a severity name."""
    return SEVERITY_CODES[_coerce_severity(name)]


def code_to_facility(code: int) -> Facility:
    """Return the facility for a facility code (0, 8, ..., 184)."""
    try:
        return _CODE_TO_FACILITY[code]
    except (KeyError, TypeError) as e:
        raise MalformedMessage(f"Unknown facility code {code!r}") from e


def code_to_severity(code: int) -> Severity:
    try:
        return _CODE_TO_SEVERITY[code]
    except (KeyError, TypeError) as e:
        raise MalformedMessage(f"Unknown severity code {code!r}") from e


def encode_priority(facility: Facility | str, severity: Severity | str) -> int:
    """PRI value: facility code + severity code."""
    return facility_code(facility) + severity_code(severity)


def header_priority(header: Header) -> int:
    """PRI value of a message header."""
    return encode_priority(header.facility, header.severity)


def decode_priority(priority: int) -> tuple[Facility, Severity]:
    """Split a PRI value into its facility and severity."""
    if not 0 <= priority <= MAX_PRIORITY:
        raise MalformedMessage(f"Priority {priority} out of range 0..{MAX_PRIORITY}")
    return code_to_facility(priority // 8 * 8), code_to_severity(priority % 8)
