# venue_nav/runtime/resources.py
from functools import lru_cache

from pydantic import ValidationError

from venue_nav.config.models import VenueModel
from venue_nav.domain.errors import VenueConfigError


@lru_cache(maxsize=8)
def load_venue_from_path(file: str) -> VenueModel:
    with open(file, encoding="utf-8") as f:
        raw = f.read()
    try:
        return VenueModel.model_validate_json(raw)
    except ValidationError as exc:
        raise VenueConfigError(f"invalid venue dataset {file!r}: {exc}") from exc
