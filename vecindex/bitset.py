"""A read-only view over a packed bitset."""

from __future__ import annotations


class BitsetView:
    """Bits packed least-significant-first into bytes."""

    def __init__(self, data: bytes | bytearray | memoryview | None = None, num_bits: int = 0) -> None:
        self._bits = memoryview(bytes(data) if data is not None else b"")
        self._num_bits = num_bits

    @property
    def data(self) -> memoryview:
        return self._bits

    def empty(self) -> bool:
        return self._num_bits == 0

    def __len__(self) -> int:
        return self._num_bits

    def byte_size(self) -> int:
        return (self._num_bits + 7) >> 3

    def test(self, index: int) -> bool:
        """Return whether bit ``index`` is set."""
        if index < 0:
            raise IndexError("bit index must not be negative")
        return bool(self._bits[index >> 3] & (1 << (index & 7)))

    def count(self) -> int:
        """Number of set bits over all bytes the view spans."""
        return int.from_bytes(self._bits[: self.byte_size()], "little").bit_count()

    def to_string(self, start: int, stop: int) -> str:
        """Render bits ``start`` up to ``stop`` as a string of 0s and 1s."""
        if self.empty():
            return ""
        stop = min(stop, self._num_bits)
        return "".join("1" if self.test(i) else "0" for i in range(start, stop))