"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def explain_syslog_message(raw: str) -> list[dict[str, Any]]:
        """Build a prompt that explains one RFC 5424 message field by field."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a precise assistant for syslog operations. Explain RFC 5424 "
                    "messages using only the decoded fields returned by tools. "
                    "Do not invent values; if a field is absent, say so."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Explain this syslog message. Follow this workflow:\n"
                    "- Always call decode_syslog first with the data below.\n"
                    "- If decoding fails, quote the error and point at the offending byte offset.\n"
                    "- Otherwise describe: facility and severity (with the PRI value), "
                    "timestamp and offset, origin (hostname, app_name, proc_id, msg_id), "
                    "each structured-data element with its parameters, and the message body.\n\n"
                    f"data: {raw}\n"
                ),
            },
        ]

    @mcp.prompt()
    def compose_syslog_message(
        description: str,
        facility: str = "user",
        severity: str = "notice",
    ) -> list[dict[str, Any]]:
        """Build a prompt that turns a description into an encoded message."""
        return [
            {
                "role": "system",
                "content": (
                    "You build RFC 5424 syslog messages. Header fields must be printable "
                    "ASCII without spaces; use null for fields that are not known."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Compose a syslog message for the event below and encode it with "
                    "encode_syslog.\n"
                    f"- facility: {facility}\n"
                    f"- severity: {severity}\n"
                    f"- event: {description}\n\n"
                    "Put machine-readable details into structured_data (one element per "
                    "concern, SD-IDs of the form name@32473) and a short human-readable "
                    "summary into message. Return the encoded output verbatim."
                ),
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "The message schema is available at:"},
                    {"type": "resource", "uri": "app://syslog-codec/schemas/message"},
                ],
            },
        ]
