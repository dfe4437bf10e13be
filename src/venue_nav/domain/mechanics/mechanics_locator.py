from collections.abc import Iterable

from venue_nav.app.protocols import Locator
from venue_nav.domain.entities.geography import UserLocation
from venue_nav.domain.entities.poi import Sign


class PlateLocator(Locator):
    """Resolve the code printed on an NFC plate to a 'you are here' location."""

    def __init__(self, signs: Iterable[Sign]):
        self._signs = {s.code: s for s in signs}

    def locate(self, code: str) -> UserLocation | None:
        sign = self._signs.get(code)
        if sign is None:
            return None
        c = sign.coordinate
        return UserLocation(lat=c.lat, lon=c.lon, source="nfc", plate_id=sign.code)
