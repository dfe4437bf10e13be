# venue_nav/runtime/services_factory.py
from venue_nav.config.models import WalkingConstantSpeedModel, WalkingUnion
from venue_nav.services.walking_time import ConstantSpeedWalkingTime


def make_walking_time(cfg: WalkingUnion) -> ConstantSpeedWalkingTime:
    if isinstance(cfg, WalkingConstantSpeedModel):
        return ConstantSpeedWalkingTime(speed_kmh=cfg.speed_kmh, min_minutes=cfg.min_minutes)
    else:
        raise TypeError(cfg)
