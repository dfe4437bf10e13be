# venue_nav/services/walking_time.py
import math

from venue_nav.app.protocols import WalkingTimeService
from venue_nav.domain.entities.geography import PathResult


class ConstantSpeedWalkingTime(WalkingTimeService):
    """ETA in whole minutes at a fixed walking pace (4 km/h by default)."""

    def __init__(self, speed_kmh: float = 4.0, min_minutes: int = 1):
        if speed_kmh <= 0:
            raise ValueError("speed_kmh must be > 0")
        self.speed_kmh = speed_kmh
        self.min_minutes = min_minutes

    def eta_minutes(self, route: PathResult | float | None) -> int | None:
        if route is None:
            return None
        d = route.total_distance_m if isinstance(route, PathResult) else float(route)
        if d <= 0:
            return 0
        # d * 60 / (v * 1000) keeps whole-minute distances exact
        return max(self.min_minutes, math.ceil(d * 60.0 / (self.speed_kmh * 1000.0)))
