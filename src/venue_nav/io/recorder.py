# venue_nav/io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger("venue_nav.recorder")


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # analytics must never fail a routing query
                log.exception("sink %s dropped %s", type(s).__name__, type(ev).__name__)
