# runtime/registries.py
from collections.abc import Callable

from venue_nav.app.protocols import DistanceMetric
from venue_nav.config.models import (
    MetricEquirectangularModel,
    MetricHaversineModel,
    MetricUnion,
    VenueByPath,
    VenueModel,
)
from venue_nav.domain.mechanics.mechanics_metrics import EquirectangularMetric, HaversineMetric
from venue_nav.runtime.resources import load_venue_from_path

MetricFactory = Callable[[MetricUnion], DistanceMetric]

_metric_registry: dict[str, MetricFactory] = {}


# ------------------- Distance metric registries ---------------------------


def register_metric(kind: str):
    def deco(fn: MetricFactory):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(cfg: MetricUnion) -> DistanceMetric:
    try:
        factory = _metric_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown metric kind {cfg.kind!r}") from None
    return factory(cfg)


@register_metric("haversine")
def _make_haversine(cfg: MetricHaversineModel):
    return HaversineMetric(radius_m=cfg.radius_m)


@register_metric("equirectangular")
def _make_equirectangular(cfg: MetricEquirectangularModel):
    return EquirectangularMetric(radius_m=cfg.radius_m)


# ----- Venue dataset --------------------------


def resolve_venue(ref: VenueByPath | None, *, venue: VenueModel | None = None) -> VenueModel:
    """
    An explicitly passed venue wins; otherwise load the file the config points at.
    """
    if venue is not None:
        return venue
    if ref is None:
        raise ValueError("No venue provided")
    if isinstance(ref, VenueByPath):
        return load_venue_from_path(ref.file)
    raise TypeError(ref)
