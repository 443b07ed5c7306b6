from __future__ import annotations

import typing

__all__ = ["ByteSource", "ChunkedBody", "as_byte_source"]

Buffer = typing.Union[bytes, bytearray, memoryview]


class ByteSource(typing.Protocol):  # pragma: no cover
    """A forward-only view over request body bytes."""

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        ...

    def readinto(self, buffer: bytearray | memoryview) -> int:
        """Copy exactly len(buffer) bytes into the buffer and advance past them."""
        ...


class ChunkedBody:
    """Byte source over an already aggregated body made of one or more chunks."""

    def __init__(self, chunks: typing.Iterable[Buffer] = ()) -> None:
        self._chunks = [memoryview(chunk).cast("B") for chunk in chunks if len(chunk)]
        self._index = 0
        self._offset = 0
        self._remaining = sum(len(chunk) for chunk in self._chunks)

    @property
    def remaining(self) -> int:
        return self._remaining

    def readinto(self, buffer: bytearray | memoryview) -> int:
        target = memoryview(buffer).cast("B")
        size = len(target)
        if size > self._remaining:
            raise ValueError(f"Cannot read {size} bytes, only {self._remaining} remaining.")

        written = 0
        while written < size:
            chunk = self._chunks[self._index]
            count = min(size - written, len(chunk) - self._offset)
            target[written : written + count] = chunk[self._offset : self._offset + count]
            written += count
            self._offset += count
            if self._offset == len(chunk):
                self._index += 1
                self._offset = 0

        self._remaining -= size
        return size

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: remaining={self._remaining}>"


def as_byte_source(body: Buffer | ByteSource) -> ByteSource:
    if isinstance(body, (bytes, bytearray, memoryview)):
        return ChunkedBody([body])
    return body
