"""Rendering of the encoder's chunk stream into the requested shape."""

from __future__ import annotations

from collections.abc import Sequence

from .models import OutputRepresentation

Encoded = bytes | list[bytes] | list[int]


def render(chunks: bytes | Sequence[bytes], representation: OutputRepresentation) -> Encoded:
    """Render byte chunks as a buffer, a chunk list or a list of byte values."""
    if representation is OutputRepresentation.BUFFER:
        if isinstance(chunks, bytes):
            return chunks
        return b"".join(chunks)
    if representation is OutputRepresentation.SEQUENCE:
        if isinstance(chunks, bytes):
            return [chunks]
        return list(chunks)
    flat = chunks if isinstance(chunks, bytes) else b"".join(chunks)
    return list(flat)


def as_buffer(data: object) -> bytes:
    """Collapse any encoder output shape (or a bytes-like object) into bytes."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        raise TypeError("decode expects bytes, not str; encode the text first")
    if isinstance(data, (list, tuple)):
        if all(isinstance(item, int) for item in data):
            return bytes(data)
        return b"".join(bytes(item) for item in data)
    raise TypeError(f"Cannot decode object of type {type(data).__name__}")
