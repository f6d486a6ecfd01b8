"""In-memory byte streams and a simple positional file reader."""

from __future__ import annotations

import os
from typing import BinaryIO

_GROWTH_FACTOR = 2


def _check_item_size(size: int, nitems: int) -> None:
    if size <= 0:
        raise ValueError("item size must be positive")
    if nitems < 0:
        raise ValueError("number of items must not be negative")


class MemoryIOWriter:
    """Append fixed-size items to a growing in-memory buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._capacity = 0

    @property
    def capacity(self) -> int:
        """Bytes reserved so far; grows to twice what is needed when full."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._buffer)

    def write(self, data: bytes | bytearray | memoryview, size: int, nitems: int = 1) -> int:
        """Append ``nitems`` items of ``size`` bytes from ``data``.

        Returns the number of items written.
        """
        _check_item_size(size, nitems)
        nbytes = size * nitems
        view = memoryview(data).cast("B")
        if len(view) < nbytes:
            raise ValueError(f"need {nbytes} bytes of data, got {len(view)}")
        needed = len(self._buffer) + nbytes
        if needed > self._capacity:
            self._capacity = needed * _GROWTH_FACTOR
        self._buffer += view[:nbytes]
        return nitems

    def getvalue(self) -> bytes:
        """Everything written so far."""
        return bytes(self._buffer)


class MemoryIOReader:
    """Read fixed-size items from an in-memory buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def __len__(self) -> int:
        return len(self._data)

    def read(self, size: int, nitems: int = 1) -> bytes:
        """Read up to ``nitems`` whole items of ``size`` bytes.

        Fewer items are returned near the end; an empty result means the
        buffer is exhausted.
        """
        _check_item_size(size, nitems)
        if self._pos >= len(self._data):
            return b""
        nitems = min(nitems, (len(self._data) - self._pos) // size)
        end = self._pos + size * nitems
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk


class FileReader:
    """Read a file by absolute and relative offsets."""

    def __init__(self, filename: str | os.PathLike[str], auto_remove: bool = False) -> None:
        self._file: BinaryIO = open(filename, "rb")
        self.size = self._file.seek(0, os.SEEK_END)
        self._file.seek(0, os.SEEK_SET)
        if auto_remove:
            os.unlink(filename)

    def read(self, n: int) -> bytes:
        """Read at most ``n`` bytes from the current offset."""
        return self._file.read(n)

    def seek(self, offset: int) -> int:
        """Move to ``offset`` from the start; return the new offset."""
        return self._file.seek(offset, os.SEEK_SET)

    def advance(self, offset: int) -> int:
        """Move ``offset`` bytes from the current position; return the new offset."""
        return self._file.seek(offset, os.SEEK_CUR)

    def offset(self) -> int:
        return self._file.tell()

    def close(self) -> None:
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def __enter__(self) -> FileReader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()