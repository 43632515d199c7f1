"""Module entrypoint.

Allows:
    python -m mcp_syslog_codec
"""

from __future__ import annotations

from mcp_syslog_codec.server.codec_server import main

if __name__ == "__main__":
    main()
