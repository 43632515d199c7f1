"""JSON-facing message models.

These pydantic models describe messages at the tool/CLI boundary and convert
to and from the immutable codec dataclasses. The message body is UTF-8 text
here; bytes that are not valid UTF-8 are replaced when dumping.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mcp_syslog_codec.core.rfc5424 import (
    Facility,
    Header,
    SDElement,
    SDParam,
    Severity,
    SyslogMessage,
    format_timestamp,
    header_priority,
    parse_timestamp,
)
from mcp_syslog_codec.core.rfc5424.errors import InvalidValue, MalformedMessage


class SDParamModel(BaseModel):
    name: str = Field(description="PARAM-NAME (1-32 printable ASCII, no '=', ' ', ']', '\"').")
    value: str = Field(description="PARAM-VALUE (UTF-8, escaping is applied on encode).")


class SDElementModel(BaseModel):
    id: str = Field(description="SD-ID, e.g. 'exampleSDID@32473' or 'timeQuality'.")
    params: list[SDParamModel] = Field(default_factory=list)


class SyslogMessageModel(BaseModel):
    facility: Facility = Field(description="RFC 5427 facility name, e.g. 'local0'.")
    severity: Severity = Field(description="RFC 5427 severity name, e.g. 'info'.")
    priority: int | None = Field(
        default=None,
        description="PRI value. Output only; ignored on input.",
    )
    version: int = Field(default=1, ge=1, le=999)
    timestamp: str | None = Field(
        default=None,
        description="RFC 5424 timestamp, e.g. 2003-10-11T22:14:15.003Z. Null for '-'.",
    )
    hostname: str | None = None
    app_name: str | None = None
    proc_id: str | None = None
    msg_id: str | None = None
    structured_data: list[SDElementModel] = Field(default_factory=list)
    message: str | None = Field(default=None, description="Free-text message body.")

    def to_message(self) -> SyslogMessage:
        """Build the codec value; raises InvalidValue for a bad timestamp."""
        try:
            ts = parse_timestamp(self.timestamp) if self.timestamp is not None else None
        except MalformedMessage as e:
            raise InvalidValue(f"Invalid timestamp {self.timestamp!r}: {e.reason}") from e
        header = Header(
            facility=self.facility,
            severity=self.severity,
            version=self.version,
            timestamp=ts,
            hostname=self.hostname,
            app_name=self.app_name,
            proc_id=self.proc_id,
            msg_id=self.msg_id,
        )
        elements = tuple(
            SDElement(id=e.id, params=tuple(SDParam(p.name, p.value) for p in e.params))
            for e in self.structured_data
        )
        body = self.message.encode("utf-8") if self.message else None
        return SyslogMessage(header=header, structured_data=elements, message=body)

    @classmethod
    def from_message(cls, message: SyslogMessage) -> SyslogMessageModel:
        h = message.header
        return cls(
            facility=h.facility,
            severity=h.severity,
            priority=header_priority(h),
            version=h.version,
            timestamp=format_timestamp(h.timestamp) if h.timestamp is not None else None,
            hostname=h.hostname,
            app_name=h.app_name,
            proc_id=h.proc_id,
            msg_id=h.msg_id,
            structured_data=[
                SDElementModel(
                    id=e.id,
                    params=[SDParamModel(name=p.name, value=p.value) for p in e.params],
                )
                for e in message.structured_data
            ],
            message=(
                message.message.decode("utf-8", errors="replace")
                if message.message is not None
                else None
            ),
        )


def message_to_dict(message: SyslogMessage) -> dict[str, Any]:
    """Convert a decoded message into a JSON-serializable dict."""
    return SyslogMessageModel.from_message(message).model_dump(mode="json")
