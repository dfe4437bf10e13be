# venue_nav/domain/mechanics/mechanics_core.py
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from venue_nav.app.protocols import DistanceMetric, Locator, WalkingTimeService
from venue_nav.domain.entities.geography import Coord, PathResult, UserLocation
from venue_nav.domain.entities.poi import HELP_CATEGORIES, PoiCategory, PointOfInterest
from venue_nav.domain.mechanics.mechanics_graph import VenueGraph
from venue_nav.domain.mechanics.mechanics_proximity import StraightLineRanker
from venue_nav.domain.mechanics.mechanics_routers import NetworkRoutePlanner


@dataclass
class Wayfinder:
    """
    Convenience façade bundling the engine components.
    Every piece is injected; nothing here holds state between queries.
    """

    metric: DistanceMetric
    graph: VenueGraph
    route_planner: NetworkRoutePlanner
    ranker: StraightLineRanker
    walking: WalkingTimeService
    locator: Locator

    @property
    def pois(self) -> tuple[PointOfInterest, ...]:
        return self.ranker.pois

    def distance(self, a: Coord, b: Coord) -> float:
        return self.metric.distance_m(a, b)

    def find_path(
        self, origin: Coord, destination: Coord, accessible_only: bool = False
    ) -> PathResult | None:
        return self.route_planner.find_path(origin, destination, accessible_only)

    def route_to_poi(
        self, origin: Coord, poi: PointOfInterest, accessible_only: bool = False
    ) -> PathResult | None:
        # target the POI's own node rather than whatever node sits closest to it
        source = self.route_planner.snap(origin)
        return self.route_planner.find_path_between_nodes(
            source, poi.graph_node_id, accessible_only
        )

    def rank_by_distance(
        self,
        origin: Coord,
        pois: Sequence[PointOfInterest] | None = None,
        limit: int | None = None,
    ) -> list[tuple[PointOfInterest, float]]:
        return self.ranker.rank_by_distance(origin, self.pois if pois is None else pois, limit)

    def nearest_of_category(
        self, origin: Coord, category: PoiCategory, accessible_only: bool = False
    ) -> PointOfInterest | None:
        return self.ranker.nearest_of_category(origin, category, accessible_only)

    def rank_categories(
        self,
        origin: Coord,
        categories: Iterable[PoiCategory],
        *,
        accessible_only: bool = False,
        limit: int | None = None,
    ) -> list[tuple[PointOfInterest, float]]:
        return self.ranker.rank_categories(
            origin, categories, accessible_only=accessible_only, limit=limit
        )

    def nearest_help_points(self, origin: Coord, limit: int = 3):
        return self.ranker.rank_categories(origin, HELP_CATEGORIES, limit=limit)

    def filter_pois(self, **kw) -> list[PointOfInterest]:
        return self.ranker.filter_pois(**kw)

    def eta_minutes(self, route: PathResult | float | None) -> int | None:
        return self.walking.eta_minutes(route)

    def locate_plate(self, code: str) -> UserLocation | None:
        return self.locator.locate(code)
