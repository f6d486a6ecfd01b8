"""A named collection of serialized binary blobs."""

from __future__ import annotations

from collections.abc import Iterable


class BinarySet:
    """Binary blobs keyed by name, kept in name order."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}

    def get(self, name: str) -> bytes | None:
        return self._blobs.get(name)

    def get_any(self, names: Iterable[str]) -> bytes | None:
        """Return the blob for the first of ``names`` that is present."""
        return next((self._blobs[name] for name in names if name in self._blobs), None)

    def append(self, name: str, data: bytes | bytearray | memoryview) -> None:
        """Store a copy of ``data`` under ``name``, replacing any earlier blob."""
        self._blobs[name] = bytes(data)

    def erase(self, name: str) -> bytes | None:
        """Remove and return the blob under ``name``, or None if absent."""
        return self._blobs.pop(name, None)

    def clear(self) -> None:
        self._blobs.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._blobs

    def __len__(self) -> int:
        return len(self._blobs)

    def names(self) -> list[str]:
        return sorted(self._blobs)