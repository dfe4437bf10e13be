import itertools

import pytest

from venue_nav.domain.entities.geography import GeoCoordinate, GraphEdge, GraphNode
from venue_nav.domain.mechanics.mechanics_factory import build_venue_graph
from venue_nav.domain.mechanics.mechanics_graph import VenueGraph
from venue_nav.domain.mechanics.mechanics_routers import NetworkRoutePlanner
from venue_nav.runtime.hooks import NoopHooks


# --- test hook that records route outcomes ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.routes = []
        self.snaps = []

    def route(self, result, *, source, target, accessible_only, ms):
        self.routes.append((source, target, accessible_only, result))

    def snapped(self, point, *, node_id, offset_m, inside):
        self.snaps.append((node_id, offset_m))


def _diamond(metric, lengths: dict[str, tuple[float, float]]) -> VenueGraph:
    """S -> {mid} -> T for every mid in lengths, with (S-mid, mid-T) lengths."""
    nodes = [GraphNode("S", GeoCoordinate(0.0, 0.0)), GraphNode("T", GeoCoordinate(0.0, 0.01))]
    edges = []
    for i, (mid, (a, b)) in enumerate(sorted(lengths.items())):
        nodes.append(GraphNode(mid, GeoCoordinate(0.001 * (i + 1), 0.005)))
        edges += [GraphEdge("S", mid, a), GraphEdge(mid, "T", b)]
    return VenueGraph(nodes=nodes, edges=edges, poi_nodes={"S": "S", "T": "T"}, metric=metric)


# ---------- Fixture scenario


def test_unrestricted_route_goes_through_b(abc: VenueGraph):
    r = NetworkRoutePlanner(abc).find_path(GeoCoordinate(0.0, 0.0), GeoCoordinate(3.0, 4.0))
    assert r is not None
    assert r.node_ids == ("A", "B", "C")
    assert r.coordinates == (
        GeoCoordinate(0.0, 0.0),
        GeoCoordinate(3.0, 0.0),
        GeoCoordinate(3.0, 4.0),
    )
    assert r.total_distance_m == 7.0


def test_accessible_only_has_no_route(abc: VenueGraph):
    hooks = TraceHooks()
    planner = NetworkRoutePlanner(abc, hooks=hooks)
    assert planner.find_path(GeoCoordinate(0.0, 0.0), GeoCoordinate(3.0, 4.0), True) is None
    assert hooks.routes == [("A", "C", True, None)]


def test_accessible_prefix_still_routes(abc: VenueGraph):
    r = NetworkRoutePlanner(abc).find_path(
        GeoCoordinate(0.0, 0.0), GeoCoordinate(3.0, 0.0), accessible_only=True
    )
    assert r.node_ids == ("A", "B") and r.total_distance_m == 3.0


# ---------- Snapping


def test_off_graph_points_are_snapped_to_endpoints(abc: VenueGraph):
    hooks = TraceHooks()
    r = NetworkRoutePlanner(abc, hooks=hooks).find_path(
        GeoCoordinate(0.2, -0.1), GeoCoordinate(3.1, 3.9)
    )
    assert r.coordinates[0] == GeoCoordinate(0.0, 0.0)
    assert r.coordinates[-1] == GeoCoordinate(3.0, 4.0)
    assert [n for n, _ in hooks.snaps] == ["A", "C"]
    assert all(off > 0 for _, off in hooks.snaps)


def test_same_snapped_node_gives_single_point(abc: VenueGraph):
    r = NetworkRoutePlanner(abc).find_path(GeoCoordinate(3.0, 4.0), GeoCoordinate(3.01, 4.0))
    assert r.node_ids == ("C",)
    assert r.total_distance_m == 0.0
    assert r.coordinates == (GeoCoordinate(3.0, 4.0),)


# ---------- Determinism


def test_equal_length_paths_prefer_smallest_id_sequence(metric):
    g = _diamond(metric, {"N": (1.0, 1.0), "M": (1.0, 1.0), "Q": (0.5, 1.5)})
    r = NetworkRoutePlanner(g).find_path_between_nodes("S", "T")
    assert r.node_ids == ("S", "M", "T")
    assert r.total_distance_m == 2.0


def test_float_summation_noise_does_not_break_ties(metric):
    # 0.1 + 0.2 != 0.3 in binary floating point
    g = _diamond(metric, {"A1": (0.1, 0.2), "B1": (0.15, 0.15)})
    r = NetworkRoutePlanner(g).find_path_between_nodes("S", "T")
    assert r.node_ids == ("S", "A1", "T")


def test_identical_queries_yield_identical_results(venue, metric):
    planner = NetworkRoutePlanner(build_venue_graph(venue, metric))
    a, b = GeoCoordinate(25.6681, -100.2499), GeoCoordinate(25.6704, -100.2479)
    first = planner.find_path(a, b)
    assert all(planner.find_path(a, b) == first for _ in range(20))


def test_prefers_shorter_over_fewer_hops(metric):
    nodes = [GraphNode(n, GeoCoordinate(0.0, 0.001 * i)) for i, n in enumerate("abcd")]
    edges = [
        GraphEdge("a", "d", 10.0),
        GraphEdge("a", "b", 1.0),
        GraphEdge("b", "c", 1.0),
        GraphEdge("c", "d", 1.0),
    ]
    g = VenueGraph(nodes=nodes, edges=edges, poi_nodes={"a": "a", "d": "d"}, metric=metric)
    r = NetworkRoutePlanner(g).find_path_between_nodes("a", "d")
    assert r.node_ids == ("a", "b", "c", "d") and r.total_distance_m == 3.0


# ---------- Properties over the sample venue


def test_every_poi_pair_routes_and_beats_no_straight_line(venue, metric):
    g = build_venue_graph(venue, metric)
    planner = NetworkRoutePlanner(g)
    for a, b in itertools.permutations(sorted(g.poi_nodes), 2):
        na, nb = g.poi_node(a), g.poi_node(b)
        r = planner.find_path(na.coordinate, nb.coordinate)
        assert r is not None, (a, b)
        assert r.total_distance_m >= metric.distance_m(na, nb) - 1e-9
        assert r.total_distance_m == pytest.approx(
            sum(
                metric.distance_m(g.node(u), g.node(v))
                for u, v in zip(r.node_ids, r.node_ids[1:])
            )
        )


def test_accessible_routes_use_only_accessible_edges(venue, metric):
    g = build_venue_graph(venue, metric)
    planner = NetworkRoutePlanner(g)
    r = planner.find_path_between_nodes("wc-south", "wc-north", accessible_only=True)
    assert r is not None
    for u, v in zip(r.node_ids, r.node_ids[1:]):
        assert v in {n.id for _, n in g.neighbors(u, accessible_only=True)}
    shortest = planner.find_path_between_nodes("wc-south", "wc-north")
    assert r.total_distance_m >= shortest.total_distance_m


def test_food_court_is_unreachable_step_free(venue, metric):
    planner = NetworkRoutePlanner(build_venue_graph(venue, metric))
    assert planner.find_path_between_nodes("gate", "food-1", accessible_only=True) is None
    assert planner.find_path_between_nodes("gate", "food-1") is not None
