"""Decoding of message files.

A message file holds one RFC 5424 message per LF-terminated line (a trailing
CR is dropped). Plain and gzip-compressed files are supported.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import aiofiles
from aiofiles.threadpool import wrap

from .rfc5424 import MalformedMessage, SyslogMessage, decode, resolve_options

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodedLine:
    """Outcome of decoding one line: either ``message`` or ``error`` is set."""

    line_no: int
    raw: bytes
    message: SyslogMessage | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_line(
    line_no: int,
    line: bytes,
    *,
    options: Any = None,
    strict: bool = True,
) -> DecodedLine | None:
    """Decode one file line; blank lines yield None.

    The line terminator (LF, optionally preceded by CR) is dropped first.
    """
    raw = line.rstrip(b"\n").rstrip(b"\r")
    if not raw.strip():
        return None
    try:
        message = decode(raw, options)
    except MalformedMessage as e:
        if strict:
            raise MalformedMessage(f"line {line_no}: {e.reason}", offset=e.offset) from e
        LOGGER.warning("Skipping malformed message on line %d: %s", line_no, e)
        return DecodedLine(line_no=line_no, raw=raw, error=str(e))
    return DecodedLine(line_no=line_no, raw=raw, message=message)


@asynccontextmanager
async def _open_binary(path: Path):
    """Open a message file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rb")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


async def iter_messages(
    path: str | Path,
    *,
    options: Any = None,
    strict: bool = True,
) -> AsyncIterator[DecodedLine]:
    """Yield one DecodedLine per non-blank line.

    In strict mode the first malformed line raises MalformedMessage; otherwise
    the failure is recorded on the yielded line and logged.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Message file not found: {path}")
    resolve_options(options)

    line_no = 0
    async with _open_binary(path) as f:
        async for line in f:
            line_no += 1
            decoded = decode_line(line_no, line, options=options, strict=strict)
            if decoded is not None:
                yield decoded


async def decode_file(path: str | Path, **iter_kwargs) -> list[DecodedLine]:
    """Collect iter_messages into a list."""
    return [line async for line in iter_messages(path, **iter_kwargs)]
