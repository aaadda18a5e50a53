"""Group counts over a filtered building set."""

from collections import Counter
from typing import Iterable

from buildings_api.models import Aggregations, Building


def aggregate(buildings: Iterable[Building]) -> Aggregations:
    """Count buildings per usage and per rating grade in a single pass.

    Callers pass the filtered set before pagination so the counts describe
    every match, not just the current page.
    """
    by_usage: Counter = Counter()
    by_dpe: Counter = Counter()
    for building in buildings:
        by_usage[building.usage] += 1
        by_dpe[building.dpe] += 1
    return Aggregations(by_usage=dict(by_usage), by_dpe=dict(by_dpe))
