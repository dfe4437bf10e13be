import itertools
import math
from collections import deque
from collections.abc import Iterable, Mapping
from types import MappingProxyType

import numpy as np

from venue_nav.app.protocols import DistanceMetric, WalkGraph
from venue_nav.domain.entities.geography import Bounds, Coord, GraphEdge, GraphNode, to_coordinate
from venue_nav.domain.errors import (
    DisconnectedVenueError,
    DuplicateEdgeError,
    DuplicateNodeError,
    EmptyVenueError,
    InvalidEdgeLengthError,
    UnknownNodeError,
)

Adjacency = tuple[tuple[GraphEdge, GraphNode], ...]


class VenueGraph(WalkGraph):
    """
    Immutable walk network of the venue.

    Every invariant is checked here, once, so routing code can trust the
    structure: at least one node, unique node ids, known edge endpoints,
    at most one edge per node pair (edges are bidirectional, so (a, b) and
    (b, a) collide), finite non-negative lengths, and all POIs mutually
    reachable when accessibility is ignored. Violations raise VenueConfigError subclasses.
    """

    def __init__(
        self,
        *,
        nodes: Iterable[GraphNode],
        edges: Iterable[GraphEdge],
        poi_nodes: Mapping[str, str],
        metric: DistanceMetric,
        bounds: Bounds | None = None,
    ):
        self.metric, self.bounds = metric, bounds

        by_id: dict[str, GraphNode] = {}
        for n in nodes:
            if n.id in by_id:
                raise DuplicateNodeError(f"duplicate node id {n.id!r}")
            by_id[n.id] = n
        if not by_id:
            raise EmptyVenueError("venue has no walkable nodes")
        self._nodes = MappingProxyType(by_id)

        adj: dict[str, list[tuple[GraphEdge, GraphNode]]] = {nid: [] for nid in by_id}
        seen: set[frozenset[str]] = set()
        kept: list[GraphEdge] = []
        for e in edges:
            for end in (e.source, e.target):
                if end not in by_id:
                    raise UnknownNodeError(f"edge {e.source!r}->{e.target!r}: unknown node {end!r}")
            if not math.isfinite(e.length_m) or e.length_m < 0:
                raise InvalidEdgeLengthError(
                    f"edge {e.source!r}->{e.target!r} has invalid length {e.length_m!r}"
                )
            key = frozenset((e.source, e.target))
            if key in seen:
                raise DuplicateEdgeError(f"duplicate edge between {e.source!r} and {e.target!r}")
            seen.add(key)
            kept.append(e)
            adj[e.source].append((e, by_id[e.target]))
            if e.target != e.source:
                adj[e.target].append((e, by_id[e.source]))
        self._edges = tuple(kept)
        # neighbor order is part of the determinism contract
        self._adj: Mapping[str, Adjacency] = MappingProxyType(
            {nid: tuple(sorted(lst, key=lambda en: en[1].id)) for nid, lst in adj.items()}
        )

        for poi_id, nid in poi_nodes.items():
            if nid not in by_id:
                raise UnknownNodeError(f"POI {poi_id!r} maps to unknown node {nid!r}")
        self._poi_nodes = MappingProxyType(dict(poi_nodes))
        self._check_pois_connected()

        # sorted ids so argmin ties resolve to the smallest id
        self._ids = tuple(sorted(by_id))
        self._lats = self._frozen([by_id[i].coordinate.lat for i in self._ids])
        self._lons = self._frozen([by_id[i].coordinate.lon for i in self._ids])

    @staticmethod
    def _frozen(values: list[float]) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        arr.setflags(write=False)
        return arr

    def _check_pois_connected(self) -> None:
        targets = sorted(set(self._poi_nodes.values()))
        if len(targets) <= 1:
            return
        # the component holding most POI nodes is the venue; the rest are strays
        component: dict[str, int] = {}
        tags = itertools.count()
        for start in targets:
            if start in component:
                continue
            tag = component[start] = next(tags)
            q = deque([start])
            while q:
                u = q.popleft()
                for _, nb in self._adj[u]:
                    if nb.id not in component:
                        component[nb.id] = tag
                        q.append(nb.id)
        sizes: dict[int, int] = {}
        for nid in targets:
            sizes[component[nid]] = sizes.get(component[nid], 0) + 1
        main = max(sizes, key=lambda c: (sizes[c], -c))
        missing = sorted(pid for pid, nid in self._poi_nodes.items() if component[nid] != main)
        if missing:
            raise DisconnectedVenueError(missing)

    # --------------- Queries -----------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> tuple[GraphNode, ...]:
        return tuple(self._nodes[i] for i in self._ids)

    @property
    def edges(self) -> tuple[GraphEdge, ...]:
        return self._edges

    @property
    def poi_nodes(self) -> Mapping[str, str]:
        return self._poi_nodes

    def node(self, node_id: str) -> GraphNode:
        return self._nodes[node_id]  # raises KeyError if missing

    def poi_node(self, poi_id: str) -> GraphNode:
        return self._nodes[self._poi_nodes[poi_id]]

    def neighbors(self, node_id: str, accessible_only: bool = False) -> Adjacency:
        adj = self._adj[node_id]
        if not accessible_only:
            return adj
        return tuple(en for en in adj if en[0].accessible)

    def nearest_node(self, p: Coord) -> GraphNode:
        d = self.metric.distances_m(to_coordinate(p), self._lats, self._lons)
        return self._nodes[self._ids[int(np.argmin(d))]]

    def contains(self, p: Coord) -> bool:
        """True when p lies inside the venue bounds (or no bounds are known)."""
        return self.bounds is None or self.bounds.contains(to_coordinate(p))
