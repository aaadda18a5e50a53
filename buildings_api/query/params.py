"""Parsing and validation of building query parameters."""

import logging
import math
import re
from typing import List, Mapping, Optional

from buildings_api.models import BoundingBox, QueryParams
from buildings_api.query.ranking import DPE_SCALE, SORT_FIELDS, RatingScale

logger = logging.getLogger(__name__)

MAX_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class QueryValidationError(ValueError):
    """Raised when query parameters are invalid; the message is safe to show to callers."""


def parse_query_params(args: Mapping[str, str], max_limit: int = MAX_LIMIT) -> QueryParams:
    """Build QueryParams from string arguments such as a URL query string.

    Parsing never rejects anything: a bbox that is not four numbers is dropped
    and a limit without a leading integer is ignored. Logical checks happen in
    :func:`validate_params`.
    """
    usage_raw = args.get("usage") or ""
    usage = tuple(part.strip() for part in usage_raw.split(",") if part.strip())

    return QueryParams(
        usage=usage,
        dpe_min=_optional(args.get("dpeMin")),
        dpe_max=_optional(args.get("dpeMax")),
        search=args.get("search") or None,
        bbox=_parse_bbox(args.get("bbox")),
        cursor=_optional(args.get("cursor")),
        limit=_parse_limit(args.get("limit"), max_limit),
        sort=_optional(args.get("sort")),
    )


def validate_params(
    params: QueryParams,
    scale: RatingScale = DPE_SCALE,
    max_limit: int = MAX_LIMIT,
) -> None:
    grades = ", ".join(scale)
    if params.dpe_min and params.dpe_min not in scale:
        raise QueryValidationError(f"Invalid dpeMin: {params.dpe_min}. Must be one of: {grades}")
    if params.dpe_max and params.dpe_max not in scale:
        raise QueryValidationError(f"Invalid dpeMax: {params.dpe_max}. Must be one of: {grades}")

    if params.sort and params.sort not in SORT_FIELDS:
        raise QueryValidationError(
            f"Invalid sort: {params.sort}. Must be one of: {', '.join(SORT_FIELDS)}"
        )

    if params.limit is not None and not 1 <= params.limit <= max_limit:
        raise QueryValidationError(f"Invalid limit: {params.limit}. Must be between 1 and {max_limit}")

    bbox = params.bbox
    if bbox is not None:
        if not all(math.isfinite(value) for value in bbox.as_list()):
            raise QueryValidationError("Invalid bbox: coordinates must be finite numbers")
        if bbox.min_lng > bbox.max_lng or bbox.min_lat > bbox.max_lat:
            raise QueryValidationError("Invalid bbox: min values must not exceed max values")
        if bbox.min_lng < -180 or bbox.max_lng > 180 or bbox.min_lat < -90 or bbox.max_lat > 90:
            raise QueryValidationError("Invalid bbox: coordinates out of valid range")


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_bbox(value: Optional[str]) -> Optional[BoundingBox]:
    """Parse ``minLng,minLat,maxLng,maxLat``; anything else means no bbox filter."""
    if not value:
        return None
    parts: List[float] = []
    for part in value.split(","):
        try:
            number = float(part.strip())
        except ValueError:
            logger.debug("Ignoring malformed bbox %r", value)
            return None
        if not math.isfinite(number):
            logger.debug("Ignoring non-finite bbox %r", value)
            return None
        parts.append(number)
    if len(parts) != 4:
        logger.debug("Ignoring bbox with %d components: %r", len(parts), value)
        return None
    return BoundingBox(min_lng=parts[0], min_lat=parts[1], max_lng=parts[2], max_lat=parts[3])


def _parse_limit(value: Optional[str], max_limit: int) -> Optional[int]:
    """Read the leading integer of ``value`` ("15", "15px", "2.5" -> 2); anything else is ignored."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    limit = int(match.group(1))
    return min(max(1, limit), max_limit)
