"""Declarative, validated parameter sets loaded from JSON-like mappings."""

from __future__ import annotations

import enum
import logging
import math
import os
import struct
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from vecindex.status import KnowhereError, Status

_log = logging.getLogger(__name__)

INT32_MAX = 2**31 - 1
FLOAT32_MAX = 3.4028234663852886e38
DEFAULT_RANGE_FILTER = math.inf


class ParamType(enum.IntFlag):
    """Which operations a parameter is read for."""

    TRAIN = 1 << 0
    SEARCH = 1 << 1
    RANGE_SEARCH = 1 << 2
    FEDER = 1 << 3
    DESERIALIZE = 1 << 4
    DESERIALIZE_FROM_FILE = 1 << 5


class FieldKind(enum.Enum):
    """Value type held by a field."""

    STRING = "string"
    FLOAT = "float"
    INT = "int"
    LIST = "list"
    BOOL = "bool"


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fail(status: Status, log_text: str, message: str) -> KnowhereError:
    _log.error(log_text)
    return KnowhereError(status, message)


@dataclass
class Field:
    """One declared parameter together with its current value."""

    name: str
    kind: FieldKind
    value: Any = None
    default: Any = None
    range: tuple[Any, Any] | None = None
    description: str | None = None
    param_type: ParamType = ParamType(0)
    empty_allowed: bool = False

    def set_default(self, value: Any) -> Field:
        """Set the default and make it the current value."""
        self.default = value
        self.value = value
        return self

    def set_range(self, low: Any, high: Any) -> Field:
        """Bound the accepted values to ``[low, high]``."""
        if self.kind not in (FieldKind.INT, FieldKind.FLOAT):
            raise TypeError(f"field {self.name} of kind {self.kind.value} cannot take a range")
        self.range = (low, high)
        return self

    def allow_empty_without_default(self) -> Field:
        """Let the parameter be absent even though it has no default."""
        self.empty_allowed = True
        return self

    def describe(self, text: str) -> Field:
        self.description = text
        return self

    def for_train(self) -> Field:
        self.param_type |= ParamType.TRAIN
        return self

    def for_search(self) -> Field:
        self.param_type |= ParamType.SEARCH
        return self

    def for_range_search(self) -> Field:
        self.param_type |= ParamType.RANGE_SEARCH
        return self

    def for_feder(self) -> Field:
        self.param_type |= ParamType.FEDER
        return self

    def for_deserialize(self) -> Field:
        self.param_type |= ParamType.DESERIALIZE
        return self

    def for_deserialize_from_file(self) -> Field:
        self.param_type |= ParamType.DESERIALIZE_FROM_FILE
        return self

    def for_train_and_search(self) -> Field:
        self.param_type |= ParamType.TRAIN | ParamType.SEARCH | ParamType.RANGE_SEARCH
        return self

    def _load(self, raw: Any) -> None:
        loaders = {
            FieldKind.INT: self._load_int,
            FieldKind.FLOAT: self._load_float,
            FieldKind.STRING: self._load_string,
            FieldKind.LIST: self._load_list,
            FieldKind.BOOL: self._load_bool,
        }
        loaders[self.kind](raw)

    def _type_conflict(self, what: str) -> KnowhereError:
        return _fail(
            Status.TYPE_CONFLICT_IN_JSON,
            f"Type conflict in json: param [{self.name}] should be {what}.",
            f"param {self.name} should be {what}",
        )

    def _out_of_range(self, low_text: str, high_text: str) -> KnowhereError:
        low, high = self.range  # type: ignore[misc]
        return _fail(
            Status.OUT_OF_RANGE_IN_JSON,
            f"Out of range in json: param [{self.name}] should be in [{low}, {high}].",
            f"param {self.name} out of range [ {low_text},{high_text} ]",
        )

    def _load_int(self, raw: Any) -> None:
        if not _is_int(raw):
            raise self._type_conflict("integer")
        if self.range is None:
            self.value = raw
            return
        if raw > INT32_MAX:
            raise _fail(
                Status.ARITHMETIC_OVERFLOW,
                f"Arithmetic overflow: param [{self.name}] should be at most {INT32_MAX}",
                f"param {self.name} should be at most {INT32_MAX}",
            )
        low, high = self.range
        if not low <= raw <= high:
            raise self._out_of_range(str(int(low)), str(int(high)))
        self.value = raw

    def _load_float(self, raw: Any) -> None:
        if not _is_number(raw):
            raise self._type_conflict("a number")
        if self.range is None:
            self.value = _to_float32(float(raw))
            return
        if float(raw) > FLOAT32_MAX:
            raise _fail(
                Status.ARITHMETIC_OVERFLOW,
                f"Arithmetic overflow: param [{self.name}] should be at most {FLOAT32_MAX}",
                f"param {self.name} should be at most 3.402823e+38",
            )
        value = _to_float32(float(raw))
        low, high = self.range
        if not low <= value <= high:
            raise self._out_of_range(f"{float(low):f}", f"{float(high):f}")
        self.value = value

    def _load_string(self, raw: Any) -> None:
        if not isinstance(raw, str):
            raise self._type_conflict("a string")
        self.value = raw

    def _load_list(self, raw: Any) -> None:
        if not isinstance(raw, list) or not all(_is_number(item) for item in raw):
            raise self._type_conflict("an array")
        self.value = [int(item) for item in raw]

    def _load_bool(self, raw: Any) -> None:
        if not isinstance(raw, bool):
            raise self._type_conflict("a boolean")
        self.value = raw


class Config:
    """A set of declared fields; field values read as attributes."""

    def __init__(self) -> None:
        object.__setattr__(self, "_fields", {})

    def declare(self, name: str, kind: FieldKind) -> Field:
        """Declare (or redeclare) a field and return it for configuration."""
        declared = Field(name=name, kind=kind)
        self._fields[name] = declared
        return declared

    def load(self, json: Mapping[str, Any], param_type: ParamType) -> None:
        """Fill the fields used for ``param_type`` from ``json``.

        Raises KnowhereError when a parameter is missing, has the wrong
        type, overflows or lies outside its range.
        """
        for name, declared in self._fields.items():
            if not (param_type & declared.param_type):
                continue
            if name not in json:
                if declared.default is None:
                    if declared.empty_allowed:
                        continue
                    raise _fail(
                        Status.INVALID_PARAM_IN_JSON,
                        f"Invalid param [{name}] in json.",
                        f"invalid param {name}",
                    )
                declared.value = declared.default
                continue
            declared._load(json[name])

    def values(self) -> dict[str, Any]:
        """Current value of every declared field."""
        return {name: declared.value for name, declared in self._fields.items()}

    @property
    def fields(self) -> dict[str, Field]:
        return dict(self._fields)

    def __getattr__(self, name: str) -> Any:
        fields = self.__dict__.get("_fields", {})
        if name in fields:
            return fields[name].value
        raise AttributeError(f"{type(self).__name__!s} has no field {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        fields = self.__dict__.get("_fields", {})
        if name in fields:
            fields[name].value = value
        else:
            object.__setattr__(self, name, value)


class BaseConfig(Config):
    """Parameters common to every index."""

    def __init__(self) -> None:
        super().__init__()
        self.declare("metric_type", FieldKind.STRING).set_default("L2").describe(
            "metric type"
        ).for_train_and_search()
        self.declare("k", FieldKind.INT).set_default(10).describe(
            "search for top k similar vector."
        ).set_range(1, INT32_MAX).for_search()
        self.declare("num_build_thread", FieldKind.INT).describe(
            "index thread limit for build."
        ).allow_empty_without_default().set_range(1, os.cpu_count() or 1).for_train()
        self.declare("radius", FieldKind.FLOAT).set_default(0.0).describe(
            "radius for range search"
        ).for_range_search()
        self.declare("range_filter", FieldKind.FLOAT).set_default(DEFAULT_RANGE_FILTER).describe(
            "result filter for range search"
        ).for_range_search()
        self.declare("trace_visit", FieldKind.BOOL).set_default(False).describe(
            "trace visit for feder"
        ).for_search().for_range_search()
        self.declare("enable_mmap", FieldKind.BOOL).set_default(False).describe(
            "enable mmap for load index"
        ).for_deserialize_from_file()
        self.declare("for_tuning", FieldKind.BOOL).set_default(False).describe(
            "for tuning"
        ).for_search()

    def check_and_adjust_for_search(self) -> None:
        """Hook for subclasses to validate search parameters."""

    def check_and_adjust_for_range_search(self) -> None:
        """Hook for subclasses to validate range-search parameters."""

    def check_and_adjust_for_build(self) -> None:
        """Hook for subclasses to validate build parameters."""