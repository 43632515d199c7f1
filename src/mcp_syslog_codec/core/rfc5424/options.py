"""Option handling for encode/decode."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from .errors import InvalidOption
from .models import CodecOptions, OutputRepresentation

DEFAULT_OPTIONS = CodecOptions()

_OUTPUT_ALIASES: dict[str, OutputRepresentation] = {
    "buffer": OutputRepresentation.BUFFER,
    "binary": OutputRepresentation.BUFFER,
    "bytes": OutputRepresentation.BUFFER,
    "sequence": OutputRepresentation.SEQUENCE,
    "iolist": OutputRepresentation.SEQUENCE,
    "chunks": OutputRepresentation.SEQUENCE,
    "characters": OutputRepresentation.CHARACTERS,
    "list": OutputRepresentation.CHARACTERS,
}

_OPTION_KEYS = ("output",)


def parse_output(value: OutputRepresentation | str) -> OutputRepresentation:
    if isinstance(value, OutputRepresentation):
        return value
    if isinstance(value, str):
        rep = _OUTPUT_ALIASES.get(value.strip().lower())
        if rep is not None:
            return rep
    allowed = ", ".join(sorted(_OUTPUT_ALIASES))
    raise InvalidOption(f"Unknown output representation {value!r}. Allowed: {allowed}")


def _apply(opts: CodecOptions, item: Any) -> CodecOptions:
    return replace(opts, output=parse_output(item))


def resolve_options(options: Any = None) -> CodecOptions:
    """Normalize the accepted option forms into a CodecOptions value.

    Accepted: None, CodecOptions, an OutputRepresentation, an option name,
    an iterable of option names (applied left to right) or a mapping with the
    key ``output``.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, CodecOptions):
        if not isinstance(options.output, OutputRepresentation):
            return _apply(DEFAULT_OPTIONS, options.output)
        return options
    if isinstance(options, (OutputRepresentation, str)):
        return _apply(DEFAULT_OPTIONS, options)
    if isinstance(options, Mapping):
        unknown = [k for k in options if k not in _OPTION_KEYS]
        if unknown:
            raise InvalidOption(f"Unknown option key(s): {', '.join(map(repr, unknown))}")
        if "output" in options:
            return _apply(DEFAULT_OPTIONS, options["output"])
        return DEFAULT_OPTIONS
    if isinstance(options, Iterable):
        opts = DEFAULT_OPTIONS
        for item in options:
            opts = _apply(opts, item)
        return opts
    raise InvalidOption(f"Unsupported options value {options!r}")
