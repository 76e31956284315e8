"""Byte-accumulating builder and writer adapter for generated source text."""

from __future__ import annotations

import io
import sys
from typing import IO, Any


class EnumBuilder:
    """Accumulates generated text; length is measured in UTF-8 bytes."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: bytes) -> int:
        """Append raw bytes and return how many were written."""
        self._buffer += data
        return len(data)

    def write_string(self, text: str) -> None:
        """Append text encoded as UTF-8."""
        self._buffer += text.encode("utf-8")

    def write_byte(self, byte: int) -> None:
        """Append a single byte given as an integer in 0..255."""
        if isinstance(byte, bool) or not isinstance(byte, int) or not 0 <= byte <= 255:
            raise ValueError(f"not a byte value: {byte!r}")
        self._buffer.append(byte)

    def grow(self, n: int) -> None:
        """Reserve room for ``n`` more bytes; ``n`` must not be negative."""
        if n < 0:
            raise ValueError("negative count")

    def reset(self) -> None:
        """Discard everything written so far."""
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)

    def __str__(self) -> str:
        return self._buffer.decode("utf-8", errors="replace")


class EnumWriter:
    """Writes generated output to a configurable destination (stdout by default)."""

    def __init__(self, writer: IO[Any] | None = None) -> None:
        self.writer = sys.stdout if writer is None else writer

    def write(self, data: bytes | str) -> int:
        """Write bytes (or text) to the destination and return the byte count."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        if isinstance(self.writer, io.TextIOBase) or self.writer is sys.stdout:
            self.writer.write(data.decode("utf-8", errors="replace"))
            return len(data)
        written = self.writer.write(data)
        return len(data) if written is None else written