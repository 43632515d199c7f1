"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import logging
from contextlib import aclosing
from typing import Any

from pydantic import ValidationError

from mcp_syslog_codec.core.message_file import DecodedLine, iter_messages
from mcp_syslog_codec.core.rfc5424 import OutputRepresentation, decode, encode, resolve_options
from mcp_syslog_codec.core.rfc5424.errors import InvalidValue
from mcp_syslog_codec.paths import resolve_message_path
from mcp_syslog_codec.schemas import SyslogMessageModel, message_to_dict

LOGGER = logging.getLogger(__name__)

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _parse_message(message: dict[str, Any] | SyslogMessageModel) -> SyslogMessageModel:
    if isinstance(message, SyslogMessageModel):
        return message
    try:
        return SyslogMessageModel.model_validate(message)
    except ValidationError as e:
        raise InvalidValue(f"Invalid message: {e}") from e


def encode_syslog_impl(
    *,
    message: dict[str, Any] | SyslogMessageModel,
    output: str = "buffer",
) -> dict[str, Any]:
    """Implementation for the `encode_syslog` MCP tool.

    Returns the wire form in the requested representation:
    - buffer: one string
    - sequence: list of chunk strings in emission order
    - characters: list of byte values
    """
    opts = resolve_options(output)
    model = _parse_message(message)
    encoded = encode(model.to_message(), opts)

    if opts.output is OutputRepresentation.BUFFER:
        wire: Any = _text(encoded)
        octets = len(encoded)
    elif opts.output is OutputRepresentation.SEQUENCE:
        wire = [_text(chunk) for chunk in encoded]
        octets = sum(len(chunk) for chunk in encoded)
    else:
        wire = encoded
        octets = len(encoded)

    return {"output": opts.output.value, "encoded": wire, "octets": octets}


def decode_syslog_impl(*, data: str) -> dict[str, Any]:
    """Implementation for the `decode_syslog` MCP tool."""
    message = decode(data.encode("utf-8"))
    return message_to_dict(message)


def _line_to_dict(line: DecodedLine, *, include_raw: bool) -> dict[str, Any]:
    d: dict[str, Any] = {"line_no": line.line_no}
    if line.message is not None:
        d["message"] = message_to_dict(line.message)
    if line.error is not None:
        d["error"] = line.error
    if include_raw:
        d["raw"] = _text(line.raw)
    return d


async def decode_syslog_file_impl(
    *,
    path: str,
    strict: bool = False,
    limit: int | None = None,
    include_raw: bool = False,
) -> dict[str, Any]:
    """Implementation for the `decode_syslog_file` MCP tool.

    Notes
    -----
    - path is resolved under SYSLOG_CODEC_BASE_DIR
    - limit defaults to DEFAULT_LIMIT and is capped at HARD_LIMIT
    - with strict=False malformed lines are reported with an "error" key
    """
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    if limit > HARD_LIMIT:
        limit = HARD_LIMIT

    resolved = resolve_message_path(path)
    LOGGER.debug("Decoding message file %s (strict=%s, limit=%d)", resolved, strict, limit)

    entries: list[dict[str, Any]] = []
    errors = 0
    async with aclosing(iter_messages(resolved, strict=strict)) as lines:
        async for line in lines:
            if not line.ok:
                errors += 1
            entries.append(_line_to_dict(line, include_raw=include_raw))
            if len(entries) >= limit:
                break

    return {"count": len(entries), "errors": errors, "entries": entries}
