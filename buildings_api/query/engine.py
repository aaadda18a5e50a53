"""Query pipeline over the building record set.

validate -> filter -> aggregate -> sort -> paginate. The pipeline has no
state of its own; it reads the record collection it is given and returns a new
result, so any number of queries may run at once against the same snapshot.
"""

import logging
from typing import Iterable

from buildings_api.models import Building, QueryParams, QueryResult
from buildings_api.query.aggregation import aggregate
from buildings_api.query.filters import filter_buildings
from buildings_api.query.pagination import paginate
from buildings_api.query.params import MAX_LIMIT, validate_params
from buildings_api.query.ranking import DEFAULT_SORT_FIELD, DPE_SCALE, RatingScale, sort_buildings

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


def run_query(
    buildings: Iterable[Building],
    params: QueryParams,
    *,
    scale: RatingScale = DPE_SCALE,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> QueryResult:
    """Run one query. Raises QueryValidationError before touching any record."""
    validate_params(params, scale=scale, max_limit=max_limit)

    limit = params.limit or default_limit
    sort_field = params.sort or DEFAULT_SORT_FIELD

    filtered = filter_buildings(buildings, params, scale)
    aggregations = aggregate(filtered)
    ordered = sort_buildings(filtered, sort_field, scale)
    page = paginate(ordered, params.cursor, limit, sort_field, scale)

    logger.debug(
        "Query matched %d buildings; returning %d from index %d (sort=%s, more=%s)",
        len(ordered),
        len(page.data),
        page.start_index,
        sort_field,
        page.next_cursor is not None,
    )

    return QueryResult(
        data=page.data,
        next_cursor=page.next_cursor,
        total_count=len(ordered),
        aggregations=aggregations,
    )
