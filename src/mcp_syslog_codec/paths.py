"""File path policy for tools and resources.

File access is restricted to SYSLOG_CODEC_BASE_DIR (default: the working
directory) and to an allowlist of suffixes.
"""

from __future__ import annotations

import os
from pathlib import Path

ALLOWED_FILE_SUFFIXES = {".log", ".txt", ".syslog"}
BASE_DIR_ENV = "SYSLOG_CODEC_BASE_DIR"


def base_dir() -> Path:
    """Return the resolved base directory for file access."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def resolve_message_path(path: str) -> Path:
    """Resolve and validate a message file path."""
    resolved = safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    suffix = _allowed_suffix(resolved)
    if suffix not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved
