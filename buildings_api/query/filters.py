"""Conjunctive filtering of buildings by usage, rating range, text and area."""

from typing import Collection, Iterable, List, Optional

from buildings_api.models import BoundingBox, Building, QueryParams
from buildings_api.query.ranking import DPE_SCALE, RatingScale


def matches_usage(building: Building, usage: Collection[str]) -> bool:
    return not usage or building.usage in usage


def matches_dpe_range(
    building: Building,
    dpe_min: Optional[str],
    dpe_max: Optional[str],
    scale: RatingScale = DPE_SCALE,
) -> bool:
    """Keep grades at least as good as ``dpe_min`` and at least as bad as ``dpe_max``.

    Both bounds are inclusive. A building whose grade is not on the scale never
    matches while either bound is set.
    """
    if not dpe_min and not dpe_max:
        return True

    position = scale.ordinal(building.dpe)
    if position is None:
        return False
    if dpe_min:
        min_position = scale.ordinal(dpe_min)
        if min_position is None or position > min_position:
            return False
    if dpe_max:
        max_position = scale.ordinal(dpe_max)
        if max_position is None or position < max_position:
            return False
    return True


def matches_search(building: Building, term: Optional[str]) -> bool:
    if not term:
        return True
    needle = term.lower()
    return (
        needle in building.name.lower()
        or needle in building.address.lower()
        or needle in building.city.lower()
    )


def matches_bbox(building: Building, bbox: Optional[BoundingBox]) -> bool:
    return bbox is None or bbox.contains(building.lng, building.lat)


def filter_buildings(
    buildings: Iterable[Building],
    params: QueryParams,
    scale: RatingScale = DPE_SCALE,
) -> List[Building]:
    """Return the buildings matching every active filter, in input order."""
    usage = frozenset(params.usage)
    return [
        building
        for building in buildings
        if matches_usage(building, usage)
        and matches_dpe_range(building, params.dpe_min, params.dpe_max, scale)
        and matches_search(building, params.search)
        and matches_bbox(building, params.bbox)
    ]
