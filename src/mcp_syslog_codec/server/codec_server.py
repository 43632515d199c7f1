"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: encode / decode RFC 5424 messages and decode message files
- Resources: facility and severity tables, the message schema, decoded files
- Prompts: templates for explaining and composing messages

Run locally (stdio):
    python -m mcp_syslog_codec.server.codec_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_syslog_codec.prompts.registry import register_prompts
from mcp_syslog_codec.resources.registry import register_resources
from mcp_syslog_codec.tools.codec import (
    decode_syslog_file_impl,
    decode_syslog_impl,
    encode_syslog_impl,
)

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SYSLOG_CODEC_LOG_LEVEL"


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("syslog-codec", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
def encode_syslog(message: dict[str, Any], output: str = "buffer") -> dict[str, Any]:
    """Encode a structured message into RFC 5424 wire form.

    Parameters
    ----------
    message:
        Object with facility, severity and optional version, timestamp,
        hostname, app_name, proc_id, msg_id, structured_data and message.
        See app://syslog-codec/schemas/message.
    output:
        "buffer" (one string), "sequence" (list of chunks) or
        "characters" (list of byte values).

    Returns
    -------
    dict:
        {"output": str, "encoded": str | list, "octets": int}
    """
    return encode_syslog_impl(message=message, output=output)


@mcp.tool()
def decode_syslog(data: str) -> dict[str, Any]:
    """Decode one RFC 5424 message into its fields.

    Parameters
    ----------
    data:
        The message exactly as received, without transport framing.
    """
    return decode_syslog_impl(data=data)


@mcp.tool()
async def decode_syslog_file(
    path: str,
    strict: bool = False,
    limit: int | None = None,
    include_raw: bool = False,
) -> dict[str, Any]:
    """Decode a file holding one RFC 5424 message per line.

    Parameters
    ----------
    path:
        File under SYSLOG_CODEC_BASE_DIR (.log, .txt, .syslog, optionally .gz).
    strict:
        When true, the first malformed line fails the call.
    limit:
        Maximum number of lines returned (hard-capped in the implementation).
    include_raw:
        Whether to include the original line in each entry.

    Returns
    -------
    dict:
        {"count": int, "errors": int, "entries": list[dict]}
    """
    return await decode_syslog_file_impl(
        path=path,
        strict=strict,
        limit=limit,
        include_raw=include_raw,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
