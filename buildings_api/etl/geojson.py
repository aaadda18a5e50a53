"""GeoJSON helpers for map clients."""

from typing import Any, Dict, Iterable, Optional, Sequence

from buildings_api.models import BoundingBox, Building


def buildings_to_geojson(buildings: Iterable[Building]) -> Dict[str, Any]:
    """Convert buildings to a FeatureCollection of points with flat properties."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": building.id,
                "geometry": {"type": "Point", "coordinates": [building.lng, building.lat]},
                "properties": building.to_dict(),
            }
            for building in buildings
        ],
    }


def calculate_bounds(buildings: Sequence[Building]) -> Optional[BoundingBox]:
    if not buildings:
        return None
    lngs = [building.lng for building in buildings]
    lats = [building.lat for building in buildings]
    return BoundingBox(min_lng=min(lngs), min_lat=min(lats), max_lng=max(lngs), max_lat=max(lats))
