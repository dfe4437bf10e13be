# runtime/hooks.py
from typing import Protocol

from venue_nav.domain.entities.geography import GeoCoordinate, PathResult


class EngineHooks(Protocol):
    def graph_built(self, *, nodes, edges, accessible_edges, pois): ...
    def snapped(self, point: GeoCoordinate, *, node_id, offset_m, inside): ...
    def route(self, result: PathResult | None, *, source, target, accessible_only, ms): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def graph_built(self, **_):
        pass

    def snapped(self, *_, **__):
        pass

    def route(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
