# venue_nav/domain/mechanics/mechanics_factory.py

from venue_nav.app.protocols import DistanceMetric, WalkingTimeService
from venue_nav.config.models import VenueModel
from venue_nav.domain.entities.geography import Bounds, GeoCoordinate, GraphEdge, GraphNode
from venue_nav.domain.entities.poi import PointOfInterest, Sign
from venue_nav.domain.mechanics.mechanics_core import Wayfinder
from venue_nav.domain.mechanics.mechanics_graph import VenueGraph
from venue_nav.domain.mechanics.mechanics_locator import PlateLocator
from venue_nav.domain.mechanics.mechanics_proximity import StraightLineRanker
from venue_nav.domain.mechanics.mechanics_routers import NetworkRoutePlanner
from venue_nav.runtime.hooks import EngineHooks, NoopHooks


def build_pois(venue: VenueModel) -> list[PointOfInterest]:
    return [
        PointOfInterest(
            id=p.id,
            category=p.category,
            coordinate=GeoCoordinate(p.lat, p.lon),
            accessible=p.accessible,
            names=dict(p.names),
            node_id=p.node,
        )
        for p in venue.pois
    ]


def build_venue_graph(
    venue: VenueModel, metric: DistanceMetric, pois: list[PointOfInterest] | None = None
) -> VenueGraph:
    pois = build_pois(venue) if pois is None else pois
    nodes = [GraphNode(n.id, GeoCoordinate(n.lat, n.lon)) for n in venue.nodes]
    declared = {n.id for n in nodes}
    # a POI without a declared waypoint becomes its own node
    for p in pois:
        if p.node_id is None and p.id not in declared:
            nodes.append(GraphNode(p.id, p.coordinate))
            declared.add(p.id)

    coords = {n.id: n.coordinate for n in nodes}
    edges = []
    for e in venue.edges:
        length = e.length_m
        if length is None and e.source in coords and e.target in coords:
            length = metric.distance_m(coords[e.source], coords[e.target])
        # unknown endpoints are left for VenueGraph to reject
        edges.append(GraphEdge(e.source, e.target, 0.0 if length is None else length, e.accessible))

    b = venue.bounds
    return VenueGraph(
        nodes=nodes,
        edges=edges,
        poi_nodes={p.id: p.graph_node_id for p in pois},
        metric=metric,
        bounds=None if b is None else Bounds(b.min_lat, b.max_lat, b.min_lon, b.max_lon),
    )


def build_wayfinder(
    venue: VenueModel,
    *,
    metric: DistanceMetric,
    walking: WalkingTimeService,
    hooks: EngineHooks | None = None,
) -> Wayfinder:
    hooks = hooks or NoopHooks()
    pois = build_pois(venue)
    graph = build_venue_graph(venue, metric, pois)
    hooks.graph_built(
        nodes=len(graph),
        edges=len(graph.edges),
        accessible_edges=sum(1 for e in graph.edges if e.accessible),
        pois=len(pois),
    )
    signs = [Sign(s.code, GeoCoordinate(s.lat, s.lon)) for s in venue.signs]
    return Wayfinder(
        metric=metric,
        graph=graph,
        route_planner=NetworkRoutePlanner(graph, hooks=hooks),
        ranker=StraightLineRanker(pois, metric),
        walking=walking,
        locator=PlateLocator(signs),
    )
