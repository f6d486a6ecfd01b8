"""Well-known index names, parameter keys and metric helpers."""

from __future__ import annotations

import struct
from collections.abc import Iterable

_HASH_BASE = 13331
_HASH_MASK = (1 << 64) - 1


class IndexType:
    """Names of the index types."""

    INVALID = ""

    INDEX_FAISS_BIN_IDMAP = "BIN_FLAT"
    INDEX_FAISS_BIN_IVFFLAT = "BIN_IVF_FLAT"

    INDEX_FAISS_IDMAP = "FLAT"
    INDEX_FAISS_IVFFLAT = "IVF_FLAT"
    INDEX_FAISS_IVFFLAT_CC = "IVF_FLAT_CC"
    INDEX_FAISS_IVFPQ = "IVF_PQ"
    INDEX_FAISS_IVFSQ8 = "IVF_SQ8"

    INDEX_FAISS_GPU_IDMAP = "GPU_FAISS_FLAT"
    INDEX_FAISS_GPU_IVFFLAT = "GPU_FAISS_IVF_FLAT"
    INDEX_FAISS_GPU_IVFPQ = "GPU_FAISS_IVF_PQ"
    INDEX_FAISS_GPU_IVFSQ8 = "GPU_FAISS_IVF_SQ8"

    INDEX_RAFT_IVFFLAT = "GPU_RAFT_IVF_FLAT"
    INDEX_RAFT_IVFPQ = "GPU_RAFT_IVF_PQ"
    INDEX_RAFT_CAGRA = "GPU_RAFT_CAGRA"

    INDEX_HNSW = "HNSW"
    INDEX_DISKANN = "DISKANN"


class Meta:
    """Keys used in data sets and configuration documents."""

    INDEX_TYPE = "index_type"
    METRIC_TYPE = "metric_type"
    DIM = "dim"
    TENSOR = "tensor"
    ROWS = "rows"
    IDS = "ids"
    DISTANCE = "distance"
    LIMS = "lims"
    TOPK = "k"
    RADIUS = "radius"
    RANGE_FILTER = "range_filter"
    INPUT_IDS = "input_ids"
    OUTPUT_TENSOR = "output_tensor"
    DEVICE_ID = "gpu_id"
    NUM_BUILD_THREAD = "num_build_thread"
    TRACE_VISIT = "trace_visit"
    JSON_INFO = "json_info"
    JSON_ID_SET = "json_id_set"


class IndexParam:
    """Index-specific parameter keys."""

    # IVF
    NPROBE = "nprobe"
    NLIST = "nlist"
    NBITS = "nbits"
    M = "m"
    SSIZE = "ssize"
    # HNSW
    EFCONSTRUCTION = "efConstruction"
    HNSW_M = "M"
    EF = "ef"
    OVERVIEW_LEVELS = "overview_levels"


class Metric:
    """Names of the distance metrics."""

    IP = "IP"
    L2 = "L2"
    COSINE = "COSINE"
    HAMMING = "HAMMING"
    JACCARD = "JACCARD"
    TANIMOTO = "TANIMOTO"
    SUBSTRUCTURE = "SUBSTRUCTURE"
    SUPERSTRUCTURE = "SUPERSTRUCTURE"


def is_metric_type(name: str, metric_type: str) -> bool:
    """Compare two metric names, ignoring ASCII case."""
    return name.lower() == metric_type.lower()


def hash_vec(vector: Iterable[float]) -> int:
    """Hash a vector by the bit patterns of its float32 components.

    The result is an unsigned 64-bit integer.
    """
    values = [float(x) for x in vector]
    packed = struct.pack(f"={len(values)}f", *values)
    h = 0
    for (bits,) in struct.iter_unpack("=I", packed):
        h = (h * _HASH_BASE + bits) & _HASH_MASK
    return h