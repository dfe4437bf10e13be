# venue_nav/io/query_events.py

from dataclasses import dataclass


# Base type for analytics events emitted per engine query
@dataclass
class QueryEvent:
    run_id: str
    seq: int  # per-engine sequence (for total ordering)
    name: str  # stable event name


@dataclass
class GraphBuilt(QueryEvent):
    nodes: int
    edges: int
    accessible_edges: int
    pois: int


@dataclass
class LocationSnapped(QueryEvent):
    lat: float
    lon: float
    node_id: str
    offset_m: float
    inside: bool


@dataclass
class RouteComputed(QueryEvent):
    source: str
    target: str
    accessible_only: bool
    distance_m: float
    hops: int


@dataclass
class RouteUnavailable(QueryEvent):
    source: str
    target: str
    accessible_only: bool
