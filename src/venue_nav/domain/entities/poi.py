# domain/entities/poi.py
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from venue_nav.domain.entities.geography import GeoCoordinate


class PoiCategory(Enum):
    RESTROOMS = "restrooms"
    FIRST_AID = "first_aid"
    FOOD = "food"
    EXIT = "exit"
    ASSEMBLY = "assembly"
    TICKETING = "ticketing"
    TOP_UP = "top_up"


# categories the emergency view offers as help points
HELP_CATEGORIES = (PoiCategory.ASSEMBLY, PoiCategory.FIRST_AID)


class Language(Enum):
    ES = "es"
    EN = "en"


@dataclass(frozen=True)
class PointOfInterest:
    id: str
    category: PoiCategory
    coordinate: GeoCoordinate
    accessible: bool = False
    names: Mapping[Language, str] = field(default_factory=dict, compare=False, hash=False)
    node_id: str | None = None  # None => graph node shares the POI id

    def __post_init__(self):
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    @property
    def graph_node_id(self) -> str:
        return self.node_id or self.id

    def name(self, language: Language) -> str:
        if language in self.names:
            return self.names[language]
        # any available translation beats an empty label
        return next(iter(self.names.values()), self.id)


@dataclass(frozen=True)
class Sign:
    code: str  # printed on the NFC plate, e.g. "PLACA-A12"
    coordinate: GeoCoordinate
