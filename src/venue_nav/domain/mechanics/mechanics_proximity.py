from collections.abc import Iterable, Sequence

from venue_nav.app.protocols import DistanceMetric, ProximityRanker
from venue_nav.domain.entities.geography import Coord, to_coordinate
from venue_nav.domain.entities.poi import PoiCategory, PointOfInterest


class StraightLineRanker(ProximityRanker):
    """
    Straight-line proximity over the venue's POIs.

    Stateless between calls: callers re-rank on every location or filter
    change. Ordering is (distance, POI id) so equal distances come back in a
    stable order.
    """

    def __init__(self, pois: Iterable[PointOfInterest], metric: DistanceMetric):
        self.pois = tuple(sorted(pois, key=lambda p: p.id))
        self.metric = metric

    def rank_by_distance(
        self, origin: Coord, pois: Sequence[PointOfInterest], limit: int | None = None
    ) -> list[tuple[PointOfInterest, float]]:
        o = to_coordinate(origin)
        ranked = sorted(
            ((p, self.metric.distance_m(o, p.coordinate)) for p in pois),
            key=lambda pd: (pd[1], pd[0].id),
        )
        return ranked if limit is None else ranked[: max(0, limit)]

    def nearest_of_category(
        self, origin: Coord, category: PoiCategory, accessible_only: bool = False
    ) -> PointOfInterest | None:
        ranked = self.rank_categories(origin, (category,), accessible_only=accessible_only, limit=1)
        return ranked[0][0] if ranked else None

    def rank_categories(
        self,
        origin: Coord,
        categories: Iterable[PoiCategory],
        *,
        accessible_only: bool = False,
        limit: int | None = None,
    ) -> list[tuple[PointOfInterest, float]]:
        wanted = frozenset(categories)
        candidates = [
            p
            for p in self.pois
            if p.category in wanted and (p.accessible or not accessible_only)
        ]
        return self.rank_by_distance(origin, candidates, limit=limit)

    def filter_pois(
        self,
        *,
        categories: Iterable[PoiCategory] | None = None,
        accessible_only: bool = False,
        search: str | None = None,
    ) -> list[PointOfInterest]:
        out = list(self.pois)
        if accessible_only:
            out = [p for p in out if p.accessible]
        if categories is not None:
            wanted = frozenset(categories)
            if wanted:  # empty selection means "no category filter"
                out = [p for p in out if p.category in wanted]
        needle = (search or "").strip().lower()
        if needle:
            out = [p for p in out if any(needle in n.lower() for n in p.names.values())]
        return out
