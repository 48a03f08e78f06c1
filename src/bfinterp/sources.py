"""
Byte sources consulted by the ',' instruction.

A source hands out one byte per call and returns None once it has nothing
left, so a zero byte is never confused with end of input.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Optional, Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    def read_byte(self) -> Optional[int]:
        ...


class BufferSource:
    """Bytes held in memory."""

    def __init__(self, data: bytes = b""):
        self._data = bytes(data)
        self._pos = 0

    def read_byte(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        b = self._data[self._pos]
        self._pos += 1
        return b

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def __repr__(self) -> str:
        return f"BufferSource(consumed={self.consumed}, remaining={self.remaining})"


class StreamSource:
    """A binary stream (stdin, an open file) read one byte at a time."""

    def __init__(self, stream: BinaryIO):
        # sys.stdin and friends are text wrappers around a binary buffer
        self._stream = getattr(stream, 'buffer', stream)

    def read_byte(self) -> Optional[int]:
        chunk = self._stream.read(1)
        if not chunk:
            return None
        if isinstance(chunk, str):
            raise TypeError("StreamSource needs a binary stream, got text")
        return chunk[0]


def as_source(value: Any) -> ByteSource:
    if value is None:
        return BufferSource()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BufferSource(bytes(value))
    if isinstance(value, str):
        return BufferSource(value.encode('utf-8'))
    if isinstance(value, ByteSource):
        return value
    if hasattr(value, 'read'):
        return StreamSource(value)
    raise TypeError(f"Unsupported input source: {type(value).__name__}")
