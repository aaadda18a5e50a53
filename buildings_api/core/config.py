"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).resolve().parents[1] / "data" / "buildings.json"


@dataclass(frozen=True)
class Settings:
    dataset_path: Path
    port: int = 8080
    default_limit: int = 20
    max_limit: int = 100


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    dataset_path_raw = os.getenv("BUILDINGS_DATASET_PATH", "").strip()
    dataset_path = Path(dataset_path_raw) if dataset_path_raw else DEFAULT_DATASET_PATH
    port = int(os.getenv("PORT", "8080"))
    max_limit = int(os.getenv("BUILDINGS_MAX_LIMIT", "100"))
    default_limit = int(os.getenv("BUILDINGS_DEFAULT_LIMIT", "20"))

    if max_limit < 1:
        logger.warning("BUILDINGS_MAX_LIMIT=%d is below 1; falling back to 100.", max_limit)
        max_limit = 100
    if not 1 <= default_limit <= max_limit:
        logger.warning(
            "BUILDINGS_DEFAULT_LIMIT=%d is outside [1, %d]; clamping.", default_limit, max_limit
        )
        default_limit = min(max(1, default_limit), max_limit)
    if not dataset_path.is_file():
        logger.warning("Dataset file %s does not exist; queries will fail.", dataset_path)

    return Settings(
        dataset_path=dataset_path,
        port=port,
        default_limit=default_limit,
        max_limit=max_limit,
    )
