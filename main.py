# main.py
import argparse
import json

from venue_nav.app.build import build
from venue_nav.domain.entities.geography import GeoCoordinate
from venue_nav.domain.entities.poi import PoiCategory


def run(venue_file: str, lat: float, lon: float, category: str, accessible_only: bool) -> dict:
    app = build({"venue": {"by": "path", "file": venue_file}})
    wf = app.wayfinder
    here = GeoCoordinate(lat, lon)

    poi = wf.nearest_of_category(here, PoiCategory(category), accessible_only)
    if poi is None:
        return {"category": category, "poi": None}

    route = wf.route_to_poi(here, poi, accessible_only)
    return {
        "category": category,
        "poi": poi.id,
        "straight_line_m": round(wf.distance(here, poi.coordinate), 1),
        "route_m": None if route is None else round(route.total_distance_m, 1),
        "eta_min": wf.eta_minutes(route),
        "polyline": None if route is None else [(c.lat, c.lon) for c in route.coordinates],
    }


if __name__ == "__main__":
    p = argparse.ArgumentParser(description="Nearest POI of a category and the walk there.")
    p.add_argument("venue_file")
    p.add_argument("lat", type=float)
    p.add_argument("lon", type=float)
    p.add_argument(
        "--category",
        default=PoiCategory.RESTROOMS.value,
        choices=[c.value for c in PoiCategory],
    )
    p.add_argument("--accessible", action="store_true")
    a = p.parse_args()
    print(json.dumps(run(a.venue_file, a.lat, a.lon, a.category, a.accessible), indent=2))
