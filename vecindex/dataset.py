"""A thread-safe keyed container for vectors, ids and search results."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Any

from vecindex.params import Meta

_NUMERIC_DEFAULT = 0
_TEXT_DEFAULT = ""


class DataSet:
    """Named values describing input vectors or search results.

    The well-known entries (rows, dim, tensor, ids, distance, lims,
    json_info, json_id_set) are exposed as properties; anything else goes
    through ``set`` and ``get``.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, Any] = {}
        self.is_owner = True

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        with self._lock:
            self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value under ``key``, or ``default`` if it is absent."""
        with self._lock:
            return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    @property
    def rows(self) -> int:
        return self.get(Meta.ROWS, _NUMERIC_DEFAULT)

    @rows.setter
    def rows(self, value: int) -> None:
        self.set(Meta.ROWS, int(value))

    @property
    def dim(self) -> int:
        return self.get(Meta.DIM, _NUMERIC_DEFAULT)

    @dim.setter
    def dim(self, value: int) -> None:
        self.set(Meta.DIM, int(value))

    @property
    def tensor(self) -> Any:
        return self.get(Meta.TENSOR)

    @tensor.setter
    def tensor(self, value: Any) -> None:
        self.set(Meta.TENSOR, value)

    @property
    def ids(self) -> Sequence[int] | None:
        return self.get(Meta.IDS)

    @ids.setter
    def ids(self, value: Sequence[int] | None) -> None:
        self.set(Meta.IDS, value)

    @property
    def distance(self) -> Sequence[float] | None:
        return self.get(Meta.DISTANCE)

    @distance.setter
    def distance(self, value: Sequence[float] | None) -> None:
        self.set(Meta.DISTANCE, value)

    @property
    def lims(self) -> Sequence[int] | None:
        return self.get(Meta.LIMS)

    @lims.setter
    def lims(self, value: Sequence[int] | None) -> None:
        self.set(Meta.LIMS, value)

    @property
    def json_info(self) -> str:
        return self.get(Meta.JSON_INFO, _TEXT_DEFAULT)

    @json_info.setter
    def json_info(self, value: str) -> None:
        self.set(Meta.JSON_INFO, str(value))

    @property
    def json_id_set(self) -> str:
        return self.get(Meta.JSON_ID_SET, _TEXT_DEFAULT)

    @json_id_set.setter
    def json_id_set(self, value: str) -> None:
        self.set(Meta.JSON_ID_SET, str(value))


def gen_dataset(rows: int, dim: int, tensor: Any) -> DataSet:
    """Wrap caller-owned input vectors."""
    ds = DataSet()
    ds.rows = rows
    ds.dim = dim
    ds.tensor = tensor
    ds.is_owner = False
    return ds


def gen_ids_dataset(rows: int, ids: Sequence[int]) -> DataSet:
    """Wrap caller-owned ids."""
    ds = DataSet()
    ds.rows = rows
    ds.ids = ids
    ds.is_owner = False
    return ds


def gen_result_tensor_dataset(rows: int, dim: int, tensor: Any) -> DataSet:
    """A result holding vectors, such as those fetched by id."""
    ds = DataSet()
    ds.rows = rows
    ds.dim = dim
    ds.tensor = tensor
    return ds


def gen_result_dataset(
    nq: int, topk: int, ids: Sequence[int], distance: Sequence[float]
) -> DataSet:
    """A top-k search result: ``nq`` rows of ``topk`` ids and distances."""
    ds = DataSet()
    ds.rows = nq
    ds.dim = topk
    ds.ids = ids
    ds.distance = distance
    return ds


def gen_range_result_dataset(
    nq: int, ids: Sequence[int], distance: Sequence[float], lims: Sequence[int]
) -> DataSet:
    """A range search result; query ``i`` owns entries ``lims[i]:lims[i+1]``."""
    ds = DataSet()
    ds.rows = nq
    ds.ids = ids
    ds.distance = distance
    ds.lims = lims
    return ds


def gen_json_result_dataset(json_info: str, json_id_set: str) -> DataSet:
    """A result carrying JSON visit information and id set."""
    ds = DataSet()
    ds.json_info = json_info
    ds.json_id_set = json_id_set
    return ds