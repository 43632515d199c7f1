"""RFC 5424 syslog message codec.

Encodes structured messages into their exact wire bytes and decodes wire
bytes back. Facility and severity names follow RFC 5427.
"""

from __future__ import annotations

from .codec import decode, decode_header, decode_message, encode, encode_chunks
from .cursor import Cursor
from .errors import InvalidOption, InvalidValue, MalformedMessage, SyslogCodecError
from .models import (
    CodecOptions,
    Facility,
    Header,
    OffsetSign,
    OutputRepresentation,
    SDElement,
    SDParam,
    Severity,
    SyslogMessage,
    Timestamp,
    UtcOffset,
)
from .options import resolve_options
from .output import as_buffer, render
from .tables import (
    code_to_facility,
    code_to_severity,
    decode_priority,
    encode_priority,
    facility_code,
    header_priority,
    severity_code,
)
from .timestamp import format_timestamp, parse_timestamp

__all__ = [
    "CodecOptions",
    "Cursor",
    "Facility",
    "Header",
    "InvalidOption",
    "InvalidValue",
    "MalformedMessage",
    "OffsetSign",
    "OutputRepresentation",
    "SDElement",
    "SDParam",
    "Severity",
    "SyslogCodecError",
    "SyslogMessage",
    "Timestamp",
    "UtcOffset",
    "as_buffer",
    "code_to_facility",
    "code_to_severity",
    "decode",
    "decode_header",
    "decode_message",
    "decode_priority",
    "encode",
    "encode_chunks",
    "encode_priority",
    "facility_code",
    "format_timestamp",
    "header_priority",
    "parse_timestamp",
    "render",
    "resolve_options",
    "severity_code",
]
