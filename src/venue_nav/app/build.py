# venue_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from venue_nav.config.models import EngineModel, VenueModel
from venue_nav.domain.errors import VenueConfigError
from venue_nav.domain.mechanics.mechanics_core import Wayfinder
from venue_nav.domain.mechanics.mechanics_factory import build_wayfinder
from venue_nav.io.engine_logging import EngineLogging  # JSON logs
from venue_nav.io.recorder import Recorder, Sink
from venue_nav.runtime.hooks import EngineHooks, NoopHooks
from venue_nav.runtime.registries import make_metric, resolve_venue
from venue_nav.runtime.services_factory import make_walking_time


@dataclass
class App:
    config: EngineModel
    venue: VenueModel
    hooks: EngineHooks
    recorder: Recorder | None
    wayfinder: Wayfinder


def build(
    cfg: EngineModel | Mapping | None = None,
    *,
    venue: VenueModel | Mapping | None = None,
    sinks: tuple[Sink, ...] = (),
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, EngineModel) else EngineModel.model_validate(cfg or {})
    if venue is not None and not isinstance(venue, VenueModel):
        try:
            venue = VenueModel.model_validate(venue)
        except ValidationError as exc:
            raise VenueConfigError(f"invalid venue dataset: {exc}") from exc
    venue_model = resolve_venue(model.venue, venue=venue)

    # 1) Hooks: structured logs + optional analytics sinks
    recorder = Recorder(*sinks) if sinks else None
    hooks = (
        EngineLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Shared metric and services
    metric = make_metric(model.metric)
    walking = make_walking_time(model.walking)

    # 3) Graph + engine (fatal on a malformed venue)
    try:
        wayfinder = build_wayfinder(venue_model, metric=metric, walking=walking, hooks=hooks)
    except VenueConfigError as exc:
        hooks.error(reason="venue_config", error=str(exc), venue_version=venue_model.version)
        raise

    return App(model, venue_model, hooks, recorder, wayfinder)
