"""Core data models shared by the building query engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

SortValue = Union[str, int, float]


@dataclass(frozen=True, slots=True)
class Building:
    """Read-only snapshot of a geocoded building record."""

    id: str
    name: str
    city: str
    address: str
    usage: str
    dpe: str
    lat: float
    lng: float
    surface: float = 0.0
    floors: int = 0
    construction_year: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "city": self.city,
            "address": self.address,
            "usage": self.usage,
            "dpe": self.dpe,
            "lat": self.lat,
            "lng": self.lng,
            "surface": self.surface,
            "floors": self.floors,
            "constructionYear": self.construction_year,
        }


@dataclass(frozen=True, slots=True)
class BoundingBox:
    min_lng: float
    min_lat: float
    max_lng: float
    max_lat: float

    def contains(self, lng: float, lat: float) -> bool:
        return self.min_lng <= lng <= self.max_lng and self.min_lat <= lat <= self.max_lat

    def as_list(self) -> List[float]:
        return [self.min_lng, self.min_lat, self.max_lng, self.max_lat]


@dataclass(frozen=True)
class QueryParams:
    """Filters, ordering and paging options for one query. Every field is optional."""

    usage: Tuple[str, ...] = ()
    dpe_min: Optional[str] = None
    dpe_max: Optional[str] = None
    search: Optional[str] = None
    bbox: Optional[BoundingBox] = None
    cursor: Optional[str] = None
    limit: Optional[int] = None
    sort: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Cursor:
    sort_value: SortValue
    id: str


@dataclass(slots=True)
class Page:
    data: List[Building]
    next_cursor: Optional[str]
    start_index: int = 0


@dataclass(slots=True)
class Aggregations:
    by_usage: Dict[str, int] = field(default_factory=dict)
    by_dpe: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {"byUsage": dict(self.by_usage), "byDpe": dict(self.by_dpe)}


@dataclass(slots=True)
class QueryResult:
    data: List[Building]
    next_cursor: Optional[str]
    total_count: int
    aggregations: Aggregations

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [building.to_dict() for building in self.data],
            "pagination": {
                "nextCursor": self.next_cursor,
                "totalCount": self.total_count,
            },
            "aggregations": self.aggregations.to_dict(),
        }
