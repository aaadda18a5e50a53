"""HTTP entrypoint exposing the building query API."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from buildings_api.core.config import get_settings
from buildings_api.core.dataset import get_buildings
from buildings_api.etl.geojson import buildings_to_geojson, calculate_bounds
from buildings_api.models import QueryResult
from buildings_api.query.engine import run_query
from buildings_api.query.params import QueryValidationError, parse_query_params

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    """Simple root to avoid 404 on GET /"""
    return "ok", 200


@app.get("/healthz")
def healthcheck() -> Any:
    """Report whether the dataset snapshot can be served."""
    try:
        count = len(get_buildings())
    except Exception as exc:  # noqa: BLE001
        logger.exception("Dataset unavailable: %s", exc)
        return jsonify({"status": "error", "error": "dataset unavailable"}), 503
    return jsonify({"status": "ok", "buildings": count}), 200


@app.get("/api/buildings")
def list_buildings() -> Any:
    """
    Query buildings.
    Optional query args: usage (comma-separated), dpeMin, dpeMax, search,
    bbox (minLng,minLat,maxLng,maxLat), sort, limit, cursor.
    """
    result = _run_request_query()
    if not isinstance(result, QueryResult):
        return result
    return jsonify(result.to_dict()), 200


@app.get("/api/buildings/geojson")
def list_buildings_geojson() -> Any:
    """Same query as /api/buildings, rendered as a GeoJSON FeatureCollection."""
    result = _run_request_query()
    if not isinstance(result, QueryResult):
        return result

    payload = buildings_to_geojson(result.data)
    bounds = calculate_bounds(result.data)
    payload["bbox"] = bounds.as_list() if bounds is not None else None
    payload["pagination"] = {"nextCursor": result.next_cursor, "totalCount": result.total_count}
    return jsonify(payload), 200


# ---------- Internals ----------


def _run_request_query() -> Any:
    """Run the query described by the request args, or build the error response."""
    settings = get_settings()
    try:
        params = parse_query_params(request.args, max_limit=settings.max_limit)
        return run_query(
            get_buildings(),
            params,
            default_limit=settings.default_limit,
            max_limit=settings.max_limit,
        )
    except QueryValidationError as exc:
        logger.info("Rejected query %s: %s", request.query_string.decode("utf-8", "replace"), exc)
        return jsonify({"error": str(exc)}), 400
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error in GET %s: %s", request.path, exc)
        return jsonify({"error": "Internal server error"}), 500


def main() -> None:
    settings = get_settings()
    logger.info("[BOOT] Binding on 0.0.0.0:%d", settings.port)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
