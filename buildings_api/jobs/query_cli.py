"""CLI job that runs a single building query and prints the JSON result."""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from buildings_api.core.config import get_settings
from buildings_api.core.dataset import DatasetError, get_buildings, load_buildings
from buildings_api.etl.geojson import buildings_to_geojson
from buildings_api.query.engine import run_query
from buildings_api.query.params import QueryValidationError, parse_query_params
from buildings_api.query.ranking import SORT_FIELDS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the buildings dataset")
    parser.add_argument("--usage", help="Comma-separated usage tags, e.g. 'residential,office'")
    parser.add_argument("--dpe-min", dest="dpe_min", help="Best accepted grade bound (inclusive)")
    parser.add_argument("--dpe-max", dest="dpe_max", help="Worst accepted grade bound (inclusive)")
    parser.add_argument("--search", help="Case-insensitive text matched against name, address and city")
    parser.add_argument("--bbox", help="Bounding box as minLng,minLat,maxLng,maxLat")
    parser.add_argument("--sort", help=f"Sort field, one of: {', '.join(SORT_FIELDS)}")
    parser.add_argument("--limit", help="Page size")
    parser.add_argument("--cursor", help="Cursor returned by a previous call")
    parser.add_argument("--dataset", help="Path to a dataset JSON file (defaults to settings)")
    parser.add_argument("--geojson", action="store_true", help="Print the page as GeoJSON")
    return parser


def _query_args(args: argparse.Namespace) -> Dict[str, str]:
    names = {
        "usage": "usage",
        "dpe_min": "dpeMin",
        "dpe_max": "dpeMax",
        "search": "search",
        "bbox": "bbox",
        "sort": "sort",
        "limit": "limit",
        "cursor": "cursor",
    }
    return {key: getattr(args, attr) for attr, key in names.items() if getattr(args, attr) is not None}


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    try:
        buildings = load_buildings(args.dataset) if args.dataset else get_buildings()
        params = parse_query_params(_query_args(args), max_limit=settings.max_limit)
        result = run_query(
            buildings,
            params,
            default_limit=settings.default_limit,
            max_limit=settings.max_limit,
        )
    except (QueryValidationError, DatasetError) as exc:
        logger.error("%s", exc)
        return 2
    except Exception as exc:  # pragma: no cover - CLI fallback
        logger.error("Query failed: %s", exc, exc_info=True)
        return 1

    if args.geojson:
        payload = buildings_to_geojson(result.data)
        payload["pagination"] = {"nextCursor": result.next_cursor, "totalCount": result.total_count}
    else:
        payload = result.to_dict()
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
