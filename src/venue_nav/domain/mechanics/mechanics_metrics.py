import math

import numpy as np

from venue_nav.app.protocols import DistanceMetric
from venue_nav.domain.entities.geography import Coord, to_coordinate

# IUGG mean Earth radius
EARTH_RADIUS_M = 6_371_008.8


class HaversineMetric(DistanceMetric):
    """Great-circle distance; a true metric, so path lengths never undercut it."""

    def __init__(self, radius_m: float = EARTH_RADIUS_M):
        self.radius_m = radius_m

    def distance_m(self, a: Coord, b: Coord) -> float:
        a, b = to_coordinate(a), to_coordinate(b)
        phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
        s_dphi = math.sin((phi2 - phi1) / 2.0)
        s_dlam = math.sin(math.radians(b.lon - a.lon) / 2.0)
        h = s_dphi * s_dphi + math.cos(phi1) * math.cos(phi2) * s_dlam * s_dlam
        # clamp float drift before asin
        h = min(1.0, max(0.0, h))
        return 2.0 * self.radius_m * math.asin(math.sqrt(h))

    def distances_m(self, origin: Coord, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
        o = to_coordinate(origin)
        phi1, phi2 = math.radians(o.lat), np.radians(lats)
        s_dphi = np.sin((phi2 - phi1) / 2.0)
        s_dlam = np.sin(np.radians(lons - o.lon) / 2.0)
        h = s_dphi * s_dphi + math.cos(phi1) * np.cos(phi2) * s_dlam * s_dlam
        return 2.0 * self.radius_m * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0)))


class EquirectangularMetric(DistanceMetric):
    """Locally-flat projection at the pair's mean latitude; fine below a few km."""

    def __init__(self, radius_m: float = EARTH_RADIUS_M):
        self.radius_m = radius_m

    def distance_m(self, a: Coord, b: Coord) -> float:
        a, b = to_coordinate(a), to_coordinate(b)
        mean_phi = math.radians((a.lat + b.lat) / 2.0)
        dx = math.radians(b.lon - a.lon) * math.cos(mean_phi)
        dy = math.radians(b.lat - a.lat)
        return self.radius_m * math.hypot(dx, dy)

    def distances_m(self, origin: Coord, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
        o = to_coordinate(origin)
        mean_phi = np.radians((lats + o.lat) / 2.0)
        dx = np.radians(lons - o.lon) * np.cos(mean_phi)
        dy = np.radians(lats - o.lat)
        return self.radius_m * np.hypot(dx, dy)


_DEFAULT = HaversineMetric()


def distance(a: Coord, b: Coord) -> float:
    """Meters between two coordinates under the default (haversine) metric."""
    return _DEFAULT.distance_m(a, b)
