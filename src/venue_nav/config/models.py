import os
from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from venue_nav.domain.entities.poi import Language, PoiCategory
from venue_nav.domain.mechanics.mechanics_metrics import EARTH_RADIUS_M


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- VENUE DATASET ---------------------


class _Located(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    lat: float
    lon: float

    @field_validator("lat")
    @classmethod
    def _lat_range(cls, v: float) -> float:
        if not (isfinite(v) and -90.0 <= v <= 90.0):
            raise ValueError(f"latitude out of range: {v}")
        return v

    @field_validator("lon")
    @classmethod
    def _lon_range(cls, v: float) -> float:
        if not (isfinite(v) and -180.0 <= v <= 180.0):
            raise ValueError(f"longitude out of range: {v}")
        return v


class NodeModel(_Located):
    id: str


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    source: str
    target: str
    length_m: float | None = None  # None => metric distance between endpoints
    accessible: bool = True


class PoiModel(_Located):
    id: str
    category: PoiCategory
    names: dict[Language, str] = Field(default_factory=dict)
    accessible: bool = False
    node: str | None = None


class SignModel(_Located):
    code: str


class BoundsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @model_validator(mode="after")
    def _ordered(self):
        if self.min_lat >= self.max_lat or self.min_lon >= self.max_lon:
            raise ValueError("bounds must satisfy min < max on both axes")
        return self


class VenueModel(BaseModel):
    """Static, versioned venue bundle. Schema checks only; graph invariants live in VenueGraph."""

    model_config = ConfigDict(extra="forbid", frozen=True)
    version: str = "0"
    bounds: BoundsModel | None = None
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)
    pois: list[PoiModel] = Field(default_factory=list)
    signs: list[SignModel] = Field(default_factory=list)

    @field_validator("pois")
    @classmethod
    def _unique_ids(cls, v: list[PoiModel], info: ValidationInfo) -> list[PoiModel]:
        ids = [p.id for p in v]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"{info.field_name} ids must be unique, duplicated: {dupes}")
        return v

    @field_validator("signs")
    @classmethod
    def _unique_codes(cls, v: list[SignModel]) -> list[SignModel]:
        codes = [s.code for s in v]
        dupes = sorted({c for c in codes if codes.count(c) > 1})
        if dupes:
            raise ValueError(f"sign codes must be unique, duplicated: {dupes}")
        return v


class VenueByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


# ----------------- DISTANCE METRICS ---------------------


class MetricHaversineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["haversine"] = "haversine"
    radius_m: float = EARTH_RADIUS_M


class MetricEquirectangularModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["equirectangular"] = "equirectangular"
    radius_m: float = EARTH_RADIUS_M


MetricUnion = Annotated[
    MetricHaversineModel | MetricEquirectangularModel,
    Field(discriminator="kind"),
]

# ------------------ SERVICES -----------------------------


class WalkingConstantSpeedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["constant_speed"] = "constant_speed"
    speed_kmh: float = 4.0
    min_minutes: int = 1

    @field_validator("speed_kmh")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not (isfinite(v) and v > 0):
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("min_minutes")
    @classmethod
    def _nonneg(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


WalkingUnion = Annotated[WalkingConstantSpeedModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "venue"
    run_id: str = "local"
    log: LogModel = LogModel()
    metric: MetricUnion = Field(default_factory=MetricHaversineModel)
    walking: WalkingUnion = Field(default_factory=WalkingConstantSpeedModel)
    venue: VenueByPath | None = None
