"""The interface every index implements, and a thread-pool wrapper."""

from __future__ import annotations

import abc

from vecindex.binaryset import BinarySet
from vecindex.bitset import BitsetView
from vecindex.config import BaseConfig, Config
from vecindex.dataset import DataSet
from vecindex.thread_pool import ThreadPool, get_global_thread_pool


class IndexNode(abc.ABC):
    """An index over vectors; failures are raised as KnowhereError."""

    def build(self, dataset: DataSet, cfg: Config) -> None:
        """Train on ``dataset`` and then add it."""
        self.train(dataset, cfg)
        self.add(dataset, cfg)

    @abc.abstractmethod
    def train(self, dataset: DataSet, cfg: Config) -> None: ...

    @abc.abstractmethod
    def add(self, dataset: DataSet, cfg: Config) -> None: ...

    @abc.abstractmethod
    def search(self, dataset: DataSet, cfg: Config, bitset: BitsetView) -> DataSet: ...

    @abc.abstractmethod
    def range_search(self, dataset: DataSet, cfg: Config, bitset: BitsetView) -> DataSet: ...

    @abc.abstractmethod
    def get_vector_by_ids(self, dataset: DataSet) -> DataSet: ...

    @abc.abstractmethod
    def has_raw_data(self, metric_type: str) -> bool: ...

    @abc.abstractmethod
    def get_index_meta(self, cfg: Config) -> DataSet: ...

    @abc.abstractmethod
    def serialize(self, binset: BinarySet) -> None: ...

    @abc.abstractmethod
    def deserialize(self, binset: BinarySet, cfg: Config) -> None: ...

    @abc.abstractmethod
    def deserialize_from_file(self, filename: str, cfg: Config) -> None: ...

    @abc.abstractmethod
    def create_config(self) -> BaseConfig: ...

    @abc.abstractmethod
    def dim(self) -> int: ...

    @abc.abstractmethod
    def size(self) -> int: ...

    @abc.abstractmethod
    def count(self) -> int: ...

    @abc.abstractmethod
    def type(self) -> str: ...


class ThreadPoolIndexNode(IndexNode):
    """Delegate to another node, running searches on a thread pool."""

    def __init__(self, index_node: IndexNode, thread_pool: ThreadPool | None = None) -> None:
        self._node = index_node
        self._pool = thread_pool if thread_pool is not None else get_global_thread_pool()

    def train(self, dataset: DataSet, cfg: Config) -> None:
        self._node.train(dataset, cfg)

    def add(self, dataset: DataSet, cfg: Config) -> None:
        self._node.add(dataset, cfg)

    def search(self, dataset: DataSet, cfg: Config, bitset: BitsetView) -> DataSet:
        return self._pool.submit(self._node.search, dataset, cfg, bitset).result()

    def range_search(self, dataset: DataSet, cfg: Config, bitset: BitsetView) -> DataSet:
        return self._pool.submit(self._node.range_search, dataset, cfg, bitset).result()

    def get_vector_by_ids(self, dataset: DataSet) -> DataSet:
        return self._node.get_vector_by_ids(dataset)

    def has_raw_data(self, metric_type: str) -> bool:
        return self._node.has_raw_data(metric_type)

    def get_index_meta(self, cfg: Config) -> DataSet:
        return self._node.get_index_meta(cfg)

    def serialize(self, binset: BinarySet) -> None:
        self._node.serialize(binset)

    def deserialize(self, binset: BinarySet, cfg: Config) -> None:
        self._node.deserialize(binset, cfg)

    def deserialize_from_file(self, filename: str, cfg: Config) -> None:
        self._node.deserialize_from_file(filename, cfg)

    def create_config(self) -> BaseConfig:
        return self._node.create_config()

    def dim(self) -> int:
        return self._node.dim()

    def size(self) -> int:
        return self._node.size()

    def count(self) -> int:
        return self._node.count()

    def type(self) -> str:
        return self._node.type()