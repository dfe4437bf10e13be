from dataclasses import dataclass
from typing import Literal

LocationSource = Literal["gps", "nfc"]


# Core geometry types used by mechanics
@dataclass(frozen=True)
class GeoCoordinate:
    lat: float  # WGS84 degrees
    lon: float


@dataclass(frozen=True)
class UserLocation:
    lat: float
    lon: float
    source: LocationSource = "gps"
    plate_id: str | None = None  # only for source == "nfc"

    def __post_init__(self):
        if self.source not in ("gps", "nfc"):
            raise ValueError(f"unknown location source {self.source!r}")
        if (self.source == "nfc") != (self.plate_id is not None):
            raise ValueError("plate_id must be set exactly when source is 'nfc'")

    @property
    def coordinate(self) -> GeoCoordinate:
        return GeoCoordinate(self.lat, self.lon)


@dataclass(frozen=True)
class Bounds:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, p: GeoCoordinate) -> bool:
        return self.min_lat <= p.lat <= self.max_lat and self.min_lon <= p.lon <= self.max_lon


@dataclass(frozen=True)
class GraphNode:
    id: str
    coordinate: GeoCoordinate


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    length_m: float
    accessible: bool = True


@dataclass(frozen=True)
class PathResult:
    coordinates: tuple[GeoCoordinate, ...]  # render-ready polyline
    total_distance_m: float
    node_ids: tuple[str, ...] = ()


Coord = GeoCoordinate | UserLocation | GraphNode | tuple[float, float]


def to_coordinate(p) -> GeoCoordinate:
    """Normalize anything carrying a position into a GeoCoordinate."""
    if isinstance(p, GeoCoordinate):
        return p
    if isinstance(p, UserLocation):
        return p.coordinate
    coordinate = getattr(p, "coordinate", None)
    if isinstance(coordinate, GeoCoordinate):
        return coordinate
    return GeoCoordinate(float(p[0]), float(p[1]))
