# io/engine_logging.py
import itertools
import json
import logging
import sys

from venue_nav.domain.entities.geography import GeoCoordinate, PathResult
from venue_nav.io.query_events import GraphBuilt, LocationSnapped, RouteComputed, RouteUnavailable
from venue_nav.io.recorder import Recorder
from venue_nav.runtime.hooks import NoopHooks


def _default_json_logger(name="venue_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class EngineLogging(NoopHooks):
    """
    One place to shape and emit structured logs for graph builds and queries.
    Query events also go to the recorder, when one is attached.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._seq = itertools.count(1)  # shared across query threads

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, cls, name: str, **fields):
        seq = next(self._seq)
        if self.recorder:
            self.recorder.emit(cls(run_id=self.run_id, seq=seq, name=name, **fields))

    # --------------------------------------------------------

    def graph_built(self, *, nodes, edges, accessible_edges, pois):
        self._emit(
            "INFO",
            "graph_built",
            nodes=nodes,
            edges=edges,
            accessible_edges=accessible_edges,
            pois=pois,
        )
        self._record(
            GraphBuilt,
            "graph_built",
            nodes=nodes,
            edges=edges,
            accessible_edges=accessible_edges,
            pois=pois,
        )

    def snapped(self, point: GeoCoordinate, *, node_id, offset_m, inside):
        fields = dict(lat=point.lat, lon=point.lon, node_id=node_id, offset_m=offset_m, inside=inside)
        if not inside:
            # accepted anyway; the caller sees the large offset
            self._emit("WARNING", "snapped_outside_venue", **fields)
        elif self.debug:
            self._emit("DEBUG", "snapped", **fields)
        self._record(LocationSnapped, "location_snapped", **fields)

    def route(self, result: PathResult | None, *, source, target, accessible_only, ms):
        if result is None:
            self._emit(
                "INFO",
                "route_unavailable",
                source=source,
                target=target,
                accessible_only=accessible_only,
                ms=ms,
            )
            self._record(
                RouteUnavailable,
                "route_unavailable",
                source=source,
                target=target,
                accessible_only=accessible_only,
            )
            return
        if self.debug:
            self._emit(
                "DEBUG",
                "route",
                source=source,
                target=target,
                accessible_only=accessible_only,
                distance_m=result.total_distance_m,
                ms=ms,
            )
        self._record(
            RouteComputed,
            "route_computed",
            source=source,
            target=target,
            accessible_only=accessible_only,
            distance_m=result.total_distance_m,
            hops=max(0, len(result.node_ids) - 1),
        )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "engine_error", reason=reason, **kw)
