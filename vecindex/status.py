"""Status codes and the exception that carries them."""

from __future__ import annotations

import enum


class Status(enum.IntEnum):
    """Outcome codes reported by index operations."""

    SUCCESS = 0
    INVALID_ARGS = 1
    INVALID_PARAM_IN_JSON = 2
    OUT_OF_RANGE_IN_JSON = 3
    TYPE_CONFLICT_IN_JSON = 4
    INVALID_METRIC_TYPE = 5
    EMPTY_INDEX = 6
    NOT_IMPLEMENTED = 7
    INDEX_NOT_TRAINED = 8
    INDEX_ALREADY_TRAINED = 9
    FAISS_INNER_ERROR = 10
    HNSW_INNER_ERROR = 12
    MALLOC_ERROR = 13
    DISKANN_INNER_ERROR = 14
    DISKANN_FILE_ERROR = 15
    INVALID_VALUE_IN_JSON = 16
    ARITHMETIC_OVERFLOW = 17
    RAFT_INNER_ERROR = 18
    INVALID_BINARY_SET = 19


class KnowhereError(Exception):
    """An operation failed with a non-success status."""

    def __init__(self, status: Status | int, message: str = "") -> None:
        status = Status(status)
        if status is Status.SUCCESS:
            raise ValueError("an error cannot carry the success status")
        self.status = status
        self.message = message
        super().__init__(message or status.name.lower())

    def __str__(self) -> str:
        if self.message:
            return f"{self.status.name.lower()}: {self.message}"
        return self.status.name.lower()