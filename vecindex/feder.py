"""Index and search views exported for visualisation, with JSON encoding."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any


def _key(name: str, **kwargs: Any) -> Any:
    return field(metadata={"json": name}, **kwargs)


def to_json(obj: Any) -> Any:
    """Turn a view object into plain JSON-compatible values."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.metadata.get("json", f.name): to_json(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, (set, frozenset)):
        return [to_json(item) for item in sorted(obj)]
    if isinstance(obj, (list, tuple)):
        return [to_json(item) for item in obj]
    return obj


# DiskANN index view


@dataclass
class DiskANNBuildConfig:
    data_path: str = ""
    max_degree: int = 0
    search_list_size: int = 0
    pq_code_budget_gb: float = 0.0
    build_dram_budget_gb: float = 0.0
    num_threads: int = 0
    disk_pq_dims: int = 0
    accelerate_build: bool = False


@dataclass
class DiskANNMeta:
    build_params: DiskANNBuildConfig = _key("build_params_", default_factory=DiskANNBuildConfig)
    num_elem: int = _key("num_elem_", default=0)
    entry_points: list[int] = _key("entry_points_", default_factory=list)


# DiskANN search view


@dataclass
class DiskANNQueryConfig:
    k: int = 0
    search_list_size: int = 0
    beamwidth: int = 0


@dataclass
class TopCandidateInfo:
    id: int = _key("id_", default=0)
    distance: float = _key("real_distance_from_q_", default=0.0)
    neighbors: list[tuple[int, float]] = _key("neighbors_", default_factory=list)

    def add_neighbor(self, id_: int, distance: float) -> None:
        self.neighbors.append((id_, distance))


@dataclass
class DiskANNVisitInfo:
    query_params: DiskANNQueryConfig = _key("query_params_", default_factory=DiskANNQueryConfig)
    infos: list[TopCandidateInfo] = _key("infos_", default_factory=list)

    def set_query_config(self, k: int, search_list_size: int, beamwidth: int) -> None:
        self.query_params = DiskANNQueryConfig(
            k=k, search_list_size=search_list_size, beamwidth=beamwidth
        )

    def add_top_candidate_info(self, id_: int, distance: float) -> None:
        self.infos.append(TopCandidateInfo(id=id_, distance=distance))

    def add_top_candidate_neighbor(self, id_: int, neighbor_id: int, distance: float) -> None:
        """Attach a neighbour to the most recent candidate, which must be ``id_``."""
        if not self.infos or self.infos[-1].id != id_:
            raise ValueError(f"the latest candidate is not {id_}")
        self.infos[-1].add_neighbor(neighbor_id, distance)


@dataclass
class DiskANNFederResult:
    visit_info: DiskANNVisitInfo = field(default_factory=DiskANNVisitInfo)
    id_set: set[int] = field(default_factory=set)


# HNSW index view


@dataclass
class NodeInfo:
    id: int = _key("id_", default=0)
    neighbors: list[int] = _key("neighbors_", default_factory=list)


@dataclass
class LevelLinkGraph:
    level: int = _key("level_", default=0)
    nodes: list[NodeInfo] = _key("nodes_", default_factory=list)

    def add_node_info(self, id_: int, links: list[int]) -> None:
        self.nodes.append(NodeInfo(id=id_, neighbors=list(links)))


@dataclass
class HNSWMeta:
    ef_construction: int = _key("ef_construction_", default=0)
    m: int = _key("M_", default=0)
    num_elem: int = _key("num_elem_", default=0)
    num_levels: int = _key("num_levels_", default=0)
    enter_point_id: int = _key("enter_point_id_", default=0)
    num_overview_levels: int = _key("num_overview_levels_", default=0)
    overview_hier_graph: list[LevelLinkGraph] = _key("overview_hier_graph_", default_factory=list)

    def add_level_link_graph(self, level: int) -> None:
        self.overview_hier_graph.append(LevelLinkGraph(level=level))

    def add_node_info(self, level: int, id_: int, links: list[int]) -> None:
        """Add a node to the most recent level, which must be ``level``."""
        if not self.overview_hier_graph or self.overview_hier_graph[-1].level != level:
            raise ValueError(f"the latest level is not {level}")
        self.overview_hier_graph[-1].add_node_info(id_, links)


# HNSW search view


@dataclass
class LevelVisitRecord:
    level: int = _key("level_", default=0)
    records: list[tuple[int, int, float]] = _key("records_", default_factory=list)

    def add_visit_record(self, id_from: int, id_to: int, distance: float) -> None:
        self.records.append((id_from, id_to, distance))


@dataclass
class HNSWVisitInfo:
    infos: list[LevelVisitRecord] = _key("infos_", default_factory=list)

    def add_level_visit_record(self, level: int) -> None:
        self.infos.append(LevelVisitRecord(level=level))

    def add_visit_record(self, level: int, id_from: int, id_to: int, distance: float) -> None:
        """Record a visit on the most recent level, which must be ``level``."""
        if not self.infos or self.infos[-1].level != level:
            raise ValueError(f"the latest level is not {level}")
        self.infos[-1].add_visit_record(id_from, id_to, distance)


@dataclass
class HNSWFederResult:
    visit_info: HNSWVisitInfo = field(default_factory=HNSWVisitInfo)
    id_set: set[int] = field(default_factory=set)


# IVF-flat index view


@dataclass
class ClusterInfo:
    id: int = _key("id_", default=0)
    node_ids: list[int] = _key("node_ids_", default_factory=list)
    centroid: list[float] = _key("centroid_vec_", default_factory=list)


@dataclass
class IVFFlatMeta:
    nlist: int = _key("nlist_", default=0)
    dim: int = _key("dim_", default=0)
    ntotal: int = _key("ntotal_", default=0)
    clusters: list[ClusterInfo] = _key("clusters_", default_factory=list)

    def add_cluster(self, id_: int, node_ids: list[int], centroid: list[float]) -> None:
        """Add a cluster; its centroid must have ``dim`` components."""
        centroid = list(centroid)
        if len(centroid) != self.dim:
            raise ValueError(f"centroid has {len(centroid)} components, expected {self.dim}")
        self.clusters.append(ClusterInfo(id=id_, node_ids=list(node_ids), centroid=centroid))