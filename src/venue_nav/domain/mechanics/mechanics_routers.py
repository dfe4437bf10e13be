import heapq
import time

from venue_nav.app.protocols import RoutePlanner
from venue_nav.domain.entities.geography import Coord, PathResult, to_coordinate
from venue_nav.domain.mechanics.mechanics_graph import VenueGraph
from venue_nav.runtime.hooks import EngineHooks, NoopHooks

# lengths are compared at nanometre resolution so float summation order
# cannot split a genuine tie
_TIE_DECIMALS = 9


class NetworkRoutePlanner(RoutePlanner):
    """
    Dijkstra over the venue graph with a lexicographic tie-break.

    Heap entries are keyed by (rounded length, node-id path). Among paths of
    equal length the smallest id sequence is popped first, and because every
    prefix of that path is itself smallest for its own end node, the first
    time the target is popped it carries the canonical path.
    """

    def __init__(self, graph: VenueGraph, hooks: EngineHooks | None = None):
        self.G = graph
        self._hooks = hooks or NoopHooks()

    def find_path(
        self, origin: Coord, destination: Coord, accessible_only: bool = False
    ) -> PathResult | None:
        src = self.snap(origin)
        dst = self.snap(destination)
        return self.find_path_between_nodes(src, dst, accessible_only)

    def find_path_between_nodes(
        self, source_id: str, target_id: str, accessible_only: bool = False
    ) -> PathResult | None:
        t0 = time.perf_counter()
        found = self._dijkstra(source_id, target_id, accessible_only)
        result = None
        if found is not None:
            length, node_ids = found
            result = PathResult(
                coordinates=tuple(self.G.node(n).coordinate for n in node_ids),
                total_distance_m=length,
                node_ids=node_ids,
            )
        self._hooks.route(
            result,
            source=source_id,
            target=target_id,
            accessible_only=accessible_only,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return result

    def snap(self, p: Coord) -> str:
        c = to_coordinate(p)
        n = self.G.nearest_node(c)
        self._hooks.snapped(
            c,
            node_id=n.id,
            offset_m=self.G.metric.distance_m(c, n.coordinate),
            inside=self.G.contains(c),
        )
        return n.id

    def _dijkstra(
        self, source: str, target: str, accessible_only: bool
    ) -> tuple[float, tuple[str, ...]] | None:
        best: dict[str, float] = {source: 0.0}
        settled: set[str] = set()
        q: list[tuple[float, tuple[str, ...], float]] = [(0.0, (source,), 0.0)]
        while q:
            _, path, dist = heapq.heappop(q)
            u = path[-1]
            if u in settled:
                continue
            settled.add(u)
            if u == target:
                return dist, path
            for edge, nb in self.G.neighbors(u, accessible_only):
                v = nb.id
                if v in settled:
                    continue
                nd = dist + edge.length_m
                key = round(nd, _TIE_DECIMALS)
                prev = best.get(v)
                if prev is not None and key > round(prev, _TIE_DECIMALS):
                    continue
                if prev is None or nd < prev:
                    best[v] = nd
                heapq.heappush(q, (key, path + (v,), nd))
        return None
