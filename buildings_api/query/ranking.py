"""Per-field ordering of buildings.

Every ordering is total: records that tie on the requested field are ordered by
identifier, so a ``(sort value, id)`` pair pins down exactly one position. The
paginator relies on that to resume from a cursor.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from buildings_api.models import Building, SortValue

SORT_FIELDS = ("name", "dpe", "city", "constructionYear")
DEFAULT_SORT_FIELD = "id"

_TEXT_FIELDS = {"name", "city"}


class RatingScale:
    """Ordered set of rating grades, best first.

    Grades compare by their position on the scale, never by their labels.
    """

    def __init__(self, grades: Iterable[str]) -> None:
        self.grades: Tuple[str, ...] = tuple(grades)
        if not self.grades:
            raise ValueError("a rating scale needs at least one grade")
        self._positions: Dict[str, int] = {grade: index for index, grade in enumerate(self.grades)}
        if len(self._positions) != len(self.grades):
            raise ValueError(f"rating scale has duplicate grades: {self.grades}")

    def __contains__(self, grade: object) -> bool:
        return grade in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self.grades)

    def __len__(self) -> int:
        return len(self.grades)

    def __repr__(self) -> str:
        return f"RatingScale({''.join(self.grades)!r})"

    def ordinal(self, grade: str) -> Optional[int]:
        return self._positions.get(grade)

    def rank(self, grade: str) -> int:
        """Position used for sorting; grades off the scale go after every known grade."""
        position = self._positions.get(grade)
        return len(self.grades) if position is None else position


# Energy performance diagnostic grades, A (best) to G (worst).
DPE_SCALE = RatingScale("ABCDEFG")


def sort_value(building: Building, sort_field: str) -> SortValue:
    """Value of ``sort_field`` as carried by a cursor."""
    if sort_field == "name":
        return building.name.lower()
    if sort_field == "city":
        return building.city.lower()
    if sort_field == "dpe":
        return building.dpe
    if sort_field == "constructionYear":
        return building.construction_year
    return building.id


def primary_rank(value: object, sort_field: str, scale: RatingScale = DPE_SCALE) -> Optional[SortValue]:
    """Comparable rank of a raw sort value, or None when its type does not fit the field."""
    if sort_field == "constructionYear":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value
    if not isinstance(value, str):
        return None
    if sort_field == "dpe":
        return scale.rank(value)
    if sort_field in _TEXT_FIELDS:
        return value.lower()
    return value


def sort_key(building: Building, sort_field: str, scale: RatingScale = DPE_SCALE) -> Tuple[SortValue, str]:
    return primary_rank(sort_value(building, sort_field), sort_field, scale), building.id


def compare(a: Building, b: Building, sort_field: str, scale: RatingScale = DPE_SCALE) -> int:
    key_a = sort_key(a, sort_field, scale)
    key_b = sort_key(b, sort_field, scale)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_buildings(
    buildings: Iterable[Building],
    sort_field: str = DEFAULT_SORT_FIELD,
    scale: RatingScale = DPE_SCALE,
) -> List[Building]:
    return sorted(buildings, key=lambda building: sort_key(building, sort_field, scale))
