"""Reading the big-endian integers, byte arrays and strings a DVI file is built from."""

from __future__ import annotations

from typing import BinaryIO


class DVIReader:
    """Wraps a binary stream and reads values the way a DVI file stores them."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read_bytes(self, size: int) -> bytes:
        """Read exactly ``size`` bytes, raising EOFError if the stream ends first."""
        chunks: list[bytes] = []
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                raise EOFError(f"expected {size} bytes, got {size - remaining}")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def read_unsigned(self, size: int) -> int:
        """Read an unsigned big-endian integer of ``size`` bytes."""
        return int.from_bytes(self.read_bytes(size), "big", signed=False)

    def read_signed(self, size: int) -> int:
        """Read a two's-complement big-endian integer of ``size`` bytes."""
        return int.from_bytes(self.read_bytes(size), "big", signed=True)

    def read_string(self, size: int) -> str:
        """Read ``size`` bytes and decode them as UTF-8."""
        raw = self.read_bytes(size)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ValueError(f"Error parsing utf-8: {err}") from err