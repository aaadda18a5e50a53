"""Utilities for turning raw dataset rows into Building records."""

import math
from typing import Any, Dict, Optional

from buildings_api.models import Building


def to_building(raw: Dict[str, Any]) -> Building:
    """Normalize one JSON object from the dataset.

    Text fields are stripped and default to an empty string. Numeric fields are
    parsed leniently; only the identifier, the name and a usable position are
    mandatory.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"building row must be an object, got {type(raw).__name__}")

    building_id = _strip_or_none(raw.get("id"))
    name = _strip_or_none(raw.get("name"))
    if not building_id or not name:
        raise ValueError("id and name are required for a building")

    lat = _safe_float(raw.get("lat"))
    lng = _safe_float(raw.get("lng"))
    if lat is None or lng is None:
        raise ValueError(f"building {building_id} has no usable coordinates")

    return Building(
        id=building_id,
        name=name,
        city=_strip_or_none(raw.get("city")) or "",
        address=_strip_or_none(raw.get("address")) or "",
        usage=_strip_or_none(raw.get("usage")) or "",
        dpe=(_strip_or_none(raw.get("dpe")) or "").upper(),
        lat=lat,
        lng=lng,
        surface=_safe_float(raw.get("surface")) or 0.0,
        floors=_safe_int(raw.get("floors")) or 0,
        construction_year=_safe_int(raw.get("constructionYear", raw.get("construction_year"))) or 0,
    )


def _strip_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    value_str = str(value).strip()
    return value_str or None


def _safe_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _safe_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    number = _safe_float(value)
    if number is None:
        return None
    return int(number)
