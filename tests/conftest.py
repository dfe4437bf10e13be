import pytest

from venue_nav.config.models import VenueModel
from venue_nav.domain.entities.geography import GeoCoordinate, GraphEdge, GraphNode
from venue_nav.domain.mechanics.mechanics_graph import VenueGraph
from venue_nav.domain.mechanics.mechanics_metrics import HaversineMetric

# Park-sized bounding box, ~500 m x ~600 m
VENUE_BOUNDS = {"min_lat": 25.667, "max_lat": 25.6715, "min_lon": -100.251, "max_lon": -100.245}


def venue_dict() -> dict:
    """
    gate --(stairs)-- w1 -- w2 -- wc-north
      |               |    |
    ramp -------------+----'
    Food is only reachable over a non-accessible edge.
    """
    return {
        "version": "test-1",
        "bounds": VENUE_BOUNDS,
        "nodes": [
            {"id": "gate", "lat": 25.6680, "lon": -100.2500},
            {"id": "w1", "lat": 25.6690, "lon": -100.2490},
            {"id": "w2", "lat": 25.6700, "lon": -100.2480},
            {"id": "ramp", "lat": 25.6690, "lon": -100.2475},
        ],
        "edges": [
            {"source": "gate", "target": "wc-south"},
            {"source": "gate", "target": "w1", "accessible": False},
            {"source": "gate", "target": "ramp"},
            {"source": "ramp", "target": "w2"},
            {"source": "w1", "target": "w2"},
            {"source": "w1", "target": "food-1", "accessible": False},
            {"source": "w2", "target": "wc-north"},
            {"source": "ramp", "target": "aid-1"},
            {"source": "w1", "target": "assembly-1"},
        ],
        "pois": [
            {
                "id": "wc-north",
                "category": "restrooms",
                "names": {"es": "Baños Norte", "en": "North Restrooms"},
                "lat": 25.6705,
                "lon": -100.2478,
                "accessible": True,
            },
            {
                "id": "wc-south",
                "category": "restrooms",
                "names": {"es": "Baños Sur", "en": "South Restrooms"},
                "lat": 25.6682,
                "lon": -100.2498,
                "accessible": False,
            },
            {
                "id": "aid-1",
                "category": "first_aid",
                "names": {"es": "Enfermería", "en": "First Aid"},
                "lat": 25.6695,
                "lon": -100.2470,
                "accessible": True,
            },
            {
                "id": "assembly-1",
                "category": "assembly",
                "names": {"es": "Punto de reunión", "en": "Assembly point"},
                "lat": 25.6685,
                "lon": -100.2485,
                "accessible": True,
            },
            {
                "id": "food-1",
                "category": "food",
                "names": {"es": "Comedor", "en": "Food court"},
                "lat": 25.6698,
                "lon": -100.2492,
                "accessible": False,
            },
        ],
        "signs": [{"code": "PLACA-A12", "lat": 25.6690, "lon": -100.2490}],
    }


@pytest.fixture
def venue_data() -> dict:
    return venue_dict()


@pytest.fixture
def venue(venue_data) -> VenueModel:
    return VenueModel.model_validate(venue_data)


@pytest.fixture
def metric() -> HaversineMetric:
    return HaversineMetric()


def abc_graph(metric) -> VenueGraph:
    """A(0,0) -3- B(3,0) -4- C(3,4); B-C is not accessible, no A-C edge."""
    nodes = [
        GraphNode("A", GeoCoordinate(0.0, 0.0)),
        GraphNode("B", GeoCoordinate(3.0, 0.0)),
        GraphNode("C", GeoCoordinate(3.0, 4.0)),
    ]
    edges = [
        GraphEdge("A", "B", 3.0, accessible=True),
        GraphEdge("B", "C", 4.0, accessible=False),
    ]
    return VenueGraph(nodes=nodes, edges=edges, poi_nodes={"A": "A", "C": "C"}, metric=metric)


@pytest.fixture
def abc(metric) -> VenueGraph:
    return abc_graph(metric)
