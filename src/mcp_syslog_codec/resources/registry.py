"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_syslog_codec.core.message_file import decode_file
from mcp_syslog_codec.core.rfc5424.tables import FACILITY_CODES, SEVERITY_CODES
from mcp_syslog_codec.paths import ALLOWED_FILE_SUFFIXES, BASE_DIR_ENV, base_dir, resolve_message_path
from mcp_syslog_codec.schemas import SyslogMessageModel, message_to_dict

SAMPLE_MESSAGES = (
    "<34>1 2003-10-11T22:14:15.003Z mymachine.example.com su - ID47 - 'su root' failed for lonvick on /dev/pts/8\n"
    "<165>1 2003-08-24T05:14:15.000003-07:00 192.0.2.1 myproc 8710 - - %% It's time to make the do-nuts.\n"
    '<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 [exampleSDID@32473 iut="3" '
    'eventSource="Application" eventID="1011"] An application event log entry...\n'
    '<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 [exampleSDID@32473 iut="3" '
    'eventSource="Application" eventID="1011"][examplePriority@32473 class="high"]\n'
)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://syslog-codec/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        base = base_dir()
        return (
            "Resources:\n"
            "- app://syslog-codec/help\n"
            "- app://syslog-codec/tables/facilities\n"
            "- app://syslog-codec/tables/severities\n"
            "- app://syslog-codec/schemas/message\n"
            "- app://syslog-codec/examples/messages\n"
            f"- syslog://{{path}} (decoded file; restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {base}\n"
        )

    @mcp.resource("app://syslog-codec/tables/facilities")
    def facilities() -> dict[str, int]:
        """Return facility names and their codes (multiples of 8)."""
        return {f.value: code for f, code in FACILITY_CODES.items()}

    @mcp.resource("app://syslog-codec/tables/severities")
    def severities() -> dict[str, int]:
        """Return severity names and their codes."""
        return {s.value: code for s, code in SEVERITY_CODES.items()}

    @mcp.resource("app://syslog-codec/schemas/message")
    def message_schema() -> dict[str, Any]:
        """Return the JSON schema for messages accepted by encode_syslog."""
        return SyslogMessageModel.model_json_schema()

    @mcp.resource("app://syslog-codec/examples/messages")
    def sample_messages() -> str:
        """Return the RFC 5424 section 6.5 example messages."""
        return SAMPLE_MESSAGES

    @mcp.resource("syslog://{path}")
    async def decoded_file(path: str) -> dict[str, Any]:
        """Decode a message file from within SYSLOG_CODEC_BASE_DIR."""
        p = resolve_message_path(path)
        lines = await decode_file(p, strict=False)
        return {
            "count": len(lines),
            "entries": [
                {"line_no": line.line_no, "message": message_to_dict(line.message)}
                if line.message is not None
                else {"line_no": line.line_no, "error": line.error}
                for line in lines
            ],
        }
