"""File managers that track the files an index depends on."""

from __future__ import annotations

import abc


class FileManager(abc.ABC):
    """Manage index files: loading them locally, adding and removing them.

    Each operation reports success as a bool; ``exists`` returns None when
    the answer cannot be determined.
    """

    @abc.abstractmethod
    def load_file(self, filename: str) -> bool:
        """Make ``filename`` available on the local disk."""

    @abc.abstractmethod
    def add_file(self, filename: str) -> bool:
        """Start managing ``filename``."""

    @abc.abstractmethod
    def exists(self, filename: str) -> bool | None:
        """Whether ``filename`` is known, or None on error."""

    @abc.abstractmethod
    def remove_file(self, filename: str) -> bool:
        """Stop managing ``filename``."""


class LocalFileManager(FileManager):
    """Remember file names only; never touches the disk. Not thread-safe."""

    def __init__(self) -> None:
        self._files: set[str] = set()
        self._loaded: set[str] = set()

    def load_file(self, filename: str) -> bool:
        # Local files are already on disk; only note that a load was asked for.
        self._loaded.add(filename)
        return True

    def add_file(self, filename: str) -> bool:
        self._files.add(filename)
        return True

    def exists(self, filename: str) -> bool | None:
        return filename in self._files

    def remove_file(self, filename: str) -> bool:
        self._files.discard(filename)
        self._loaded.discard(filename)
        return True