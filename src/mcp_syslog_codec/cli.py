from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from typing import Any, BinaryIO

from mcp_syslog_codec.core.message_file import DecodedLine, decode_file, decode_line
from mcp_syslog_codec.core.rfc5424 import (
    Facility,
    OutputRepresentation,
    Severity,
    encode,
    resolve_options,
)
from mcp_syslog_codec.schemas import SDElementModel, SDParamModel, SyslogMessageModel, message_to_dict


def _parse_choice(enum_cls: type[Facility] | type[Severity], label: str):
    def _parse(s: str):
        try:
            return enum_cls(s.strip().lower())
        except ValueError as e:
            allowed = ", ".join(m.value for m in enum_cls)
            raise argparse.ArgumentTypeError(f"Invalid {label}. Allowed: {allowed}") from e

    return _parse


def _group_sd(triples: Sequence[Sequence[str]] | None) -> list[SDElementModel]:
    # Params are grouped by SD-ID, keeping first-seen element order.
    elements: dict[str, SDElementModel] = {}
    for sd_id, name, value in triples or ():
        element = elements.setdefault(sd_id, SDElementModel(id=sd_id))
        element.params.append(SDParamModel(name=name, value=value))
    return list(elements.values())


def _render(encoded: Any, output: OutputRepresentation) -> str:
    if output is OutputRepresentation.BUFFER:
        return encoded.decode("utf-8", errors="replace")
    if output is OutputRepresentation.SEQUENCE:
        return json.dumps([chunk.decode("utf-8", errors="replace") for chunk in encoded])
    return json.dumps(encoded)


def _cmd_encode(args: argparse.Namespace) -> int:
    opts = resolve_options(args.output)
    model = SyslogMessageModel(
        facility=args.facility,
        severity=args.severity,
        version=args.version,
        timestamp=args.timestamp,
        hostname=args.hostname,
        app_name=args.app_name,
        proc_id=args.proc_id,
        msg_id=args.msg_id,
        structured_data=_group_sd(args.sd),
        message=args.message,
    )
    print(_render(encode(model.to_message(), opts), opts.output))
    return 0


def _decode_stream(stream: BinaryIO, *, strict: bool) -> list[DecodedLine]:
    lines = (decode_line(n, line, strict=strict) for n, line in enumerate(stream, start=1))
    return [d for d in lines if d is not None]


def _cmd_decode(args: argparse.Namespace) -> int:
    if args.file == "-":
        lines = _decode_stream(sys.stdin.buffer, strict=args.strict)
    else:
        lines = asyncio.run(decode_file(args.file, strict=args.strict))

    failures = 0
    for line in lines:
        if line.message is None:
            failures += 1
            print(f"line {line.line_no}: {line.error}", file=sys.stderr)
            continue
        out = message_to_dict(line.message)
        out["line_no"] = line.line_no
        print(json.dumps(out))
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="RFC 5424 syslog message encoder/decoder.")
    sub = p.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Encode one message and print its wire form")
    enc.add_argument("message", nargs="?", default=None, help="Free-text message body")
    enc.add_argument("--facility", type=_parse_choice(Facility, "facility"), default=Facility.USER)
    enc.add_argument("--severity", type=_parse_choice(Severity, "severity"), default=Severity.NOTICE)
    enc.add_argument("--version", type=int, default=1)
    enc.add_argument("--timestamp", default=None, help="e.g. 2003-10-11T22:14:15.003Z (default: '-')")
    enc.add_argument("--hostname", default=None)
    enc.add_argument("--app-name", dest="app_name", default=None)
    enc.add_argument("--proc-id", dest="proc_id", default=None)
    enc.add_argument("--msg-id", dest="msg_id", default=None)
    enc.add_argument(
        "--sd",
        nargs=3,
        action="append",
        metavar=("SD_ID", "NAME", "VALUE"),
        help="Structured-data parameter (repeatable; grouped by SD_ID)",
    )
    enc.add_argument(
        "--output",
        choices=[r.value for r in OutputRepresentation],
        default=OutputRepresentation.BUFFER.value,
    )
    enc.set_defaults(func=_cmd_encode)

    dec = sub.add_parser("decode", help="Decode one message per line into JSON")
    dec.add_argument("file", nargs="?", default="-", help="Input file, plain or .gz (default: stdin)")
    dec.add_argument("--strict", action="store_true", help="Stop at the first malformed line")
    dec.set_defaults(func=_cmd_decode)
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        code = args.func(args)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
