"""Cursor-based slicing of a sorted building sequence."""

import logging
from typing import Optional, Sequence

from buildings_api.models import Building, Cursor, Page
from buildings_api.query.cursor import decode_cursor, encode_cursor
from buildings_api.query.ranking import DPE_SCALE, RatingScale, primary_rank, sort_key, sort_value

logger = logging.getLogger(__name__)


def resume_index(
    sorted_buildings: Sequence[Building],
    cursor: Optional[Cursor],
    sort_field: str,
    scale: RatingScale = DPE_SCALE,
) -> int:
    """Index of the first building strictly after ``cursor`` in the sort order.

    Falls back to 0 when there is no cursor, when its sort value does not fit
    ``sort_field``, or when no building comes after it.
    """
    if cursor is None:
        return 0

    rank = primary_rank(cursor.sort_value, sort_field, scale)
    if rank is None:
        logger.debug("Cursor value %r does not fit sort field %s", cursor.sort_value, sort_field)
        return 0

    cursor_key = (rank, cursor.id)
    for index, building in enumerate(sorted_buildings):
        if sort_key(building, sort_field, scale) > cursor_key:
            return index
    return 0


def paginate(
    sorted_buildings: Sequence[Building],
    cursor: Optional[str],
    limit: int,
    sort_field: str,
    scale: RatingScale = DPE_SCALE,
) -> Page:
    """Return up to ``limit`` buildings after ``cursor`` and the cursor for the next page.

    ``sorted_buildings`` must already be ordered by ``sort_field`` (see
    :func:`buildings_api.query.ranking.sort_buildings`). ``next_cursor`` is set
    only when the page is full and more buildings follow it.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    start_index = resume_index(sorted_buildings, decode_cursor(cursor), sort_field, scale)
    data = list(sorted_buildings[start_index:start_index + limit])

    next_cursor = None
    if len(data) == limit and start_index + limit < len(sorted_buildings):
        last = data[-1]
        next_cursor = encode_cursor(sort_value(last, sort_field), last.id)

    return Page(data=data, next_cursor=next_cursor, start_index=start_index)
