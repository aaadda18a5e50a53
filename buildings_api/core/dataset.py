"""Read-only provider of the building record set.

The dataset is a static JSON array loaded once per process. Queries receive the
whole snapshot as an immutable tuple, so concurrent requests never observe a
partially loaded or mutated collection.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from buildings_api.core.config import get_settings
from buildings_api.etl.transform import to_building
from buildings_api.models import Building

logger = logging.getLogger(__name__)

_buildings: Optional[Tuple[Building, ...]] = None


class DatasetError(RuntimeError):
    """Raised when the dataset file is missing or is not a JSON array."""


def load_buildings(path: Union[str, Path]) -> Tuple[Building, ...]:
    """Parse a dataset file, skipping rows that cannot be normalized."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            rows = json.load(fh)
    except FileNotFoundError as exc:
        raise DatasetError(f"dataset file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"dataset file {path} is not valid JSON: {exc}") from exc

    if not isinstance(rows, list):
        raise DatasetError(f"dataset file {path} must contain a JSON array")

    buildings = []
    seen_ids = set()
    for index, raw in enumerate(rows):
        try:
            building = to_building(raw)
        except ValueError as exc:
            logger.warning("Skipping dataset row %d: %s", index, exc)
            continue
        if building.id in seen_ids:
            logger.warning("Skipping dataset row %d: duplicate id %s", index, building.id)
            continue
        seen_ids.add(building.id)
        buildings.append(building)

    logger.info("Loaded %d buildings from %s", len(buildings), path)
    return tuple(buildings)


def init_dataset() -> Tuple[Building, ...]:
    """Load and return the shared snapshot."""
    global _buildings
    if _buildings is None:
        settings = get_settings()
        _buildings = load_buildings(settings.dataset_path)
    return _buildings


def get_buildings() -> Tuple[Building, ...]:
    return init_dataset()


def reset_dataset() -> None:
    global _buildings
    _buildings = None
