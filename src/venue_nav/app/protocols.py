from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from venue_nav.domain.entities.geography import (
    Coord,
    GraphEdge,
    GraphNode,
    PathResult,
    UserLocation,
)
from venue_nav.domain.entities.poi import PoiCategory, PointOfInterest


# ------------- Mechanics --------------------
@runtime_checkable
class DistanceMetric(Protocol):
    """
    Responsibilities:
    • Meters between two coordinates; pure, symmetric, zero on identical points.
    • Vectorized form for snapping against every graph node at once.
    Shared by ranking and by edge-length precomputation so UI numbers agree.
    """

    def distance_m(self, a: Coord, b: Coord) -> float: ...
    def distances_m(self, origin: Coord, lats: np.ndarray, lons: np.ndarray) -> np.ndarray: ...


@runtime_checkable
class WalkGraph(Protocol):
    """Read-only venue network. Never mutated after construction."""

    def nearest_node(self, p: Coord) -> GraphNode: ...
    def neighbors(
        self, node_id: str, accessible_only: bool = False
    ) -> Sequence[tuple[GraphEdge, GraphNode]]: ...
    def node(self, node_id: str) -> GraphNode: ...


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Snap free points to the venue graph.
      • Shortest path between them, optionally over accessible edges only.
    A missing route is returned as None, not raised.
    """

    def find_path(
        self, origin: Coord, destination: Coord, accessible_only: bool = False
    ) -> PathResult | None: ...


@runtime_checkable
class ProximityRanker(Protocol):
    def rank_by_distance(
        self, origin: Coord, pois: Sequence[PointOfInterest], limit: int | None = None
    ) -> list[tuple[PointOfInterest, float]]: ...
    def nearest_of_category(
        self, origin: Coord, category: PoiCategory, accessible_only: bool = False
    ) -> PointOfInterest | None: ...


@runtime_checkable
class WalkingTimeService(Protocol):
    def eta_minutes(self, route: PathResult | float | None) -> int | None: ...


@runtime_checkable
class Locator(Protocol):
    def locate(self, code: str) -> UserLocation | None: ...
