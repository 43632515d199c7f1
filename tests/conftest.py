from __future__ import annotations

import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_LINES = [
    b"<34>1 2003-10-11T22:14:15.003Z mymachine.example.com su - ID47 - 'su root' failed for lonvick on /dev/pts/8",
    b"<165>1 2003-08-24T05:14:15.000003-07:00 192.0.2.1 myproc 8710 - - %% It's time to make the do-nuts.",
    b'<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 [exampleSDID@32473 iut="3" '
    b'eventSource="Application" eventID="1011"] An application event log entry...',
]


@pytest.fixture
def sample_lines() -> list[bytes]:
    return list(SAMPLE_LINES)


@pytest.fixture
def write_messages() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        data = b"".join(line + b"\n" for line in lines)
        if path.suffix == ".gz":
            with gzip.open(path, "wb") as f:
                f.write(data)
        else:
            path.write_bytes(data)

    return _write
