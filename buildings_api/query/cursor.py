"""Opaque pagination cursors.

A cursor is the ``(sort value, id)`` pair of the last record on a page,
serialized as compact JSON and wrapped in unpadded URL-safe base64. Callers
treat the token as opaque. Decoding is lenient: anything that does not decode
to a well-formed pair yields ``None`` so pagination restarts from the top.
"""

import base64
import json
import logging
import math
from typing import Optional

from buildings_api.models import Cursor, SortValue

logger = logging.getLogger(__name__)

MAX_TOKEN_LENGTH = 4096


def encode_cursor(sort_value: SortValue, building_id: str) -> str:
    payload = json.dumps(
        {"sortValue": sort_value, "id": building_id},
        separators=(",", ":"),
        ensure_ascii=False,
    )
    token = base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")
    return token.rstrip("=")


def decode_cursor(token: Optional[str]) -> Optional[Cursor]:
    if not token or not isinstance(token, str):
        return None
    if len(token) > MAX_TOKEN_LENGTH:
        logger.debug("Ignoring oversized cursor of %d characters", len(token))
        return None

    try:
        padded = token + "=" * (-len(token) % 4)
        raw = base64.urlsafe_b64decode(padded)
        data = json.loads(raw.decode("utf-8"))
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Ignoring undecodable cursor %r: %s", token[:64], exc)
        return None

    if not isinstance(data, dict):
        logger.debug("Ignoring cursor that is not a JSON object: %r", token[:64])
        return None

    sort_value = data.get("sortValue")
    building_id = data.get("id")
    if not isinstance(building_id, str) or not _is_sort_value(sort_value):
        logger.debug("Ignoring cursor with unexpected fields: %r", data)
        return None

    return Cursor(sort_value=sort_value, id=building_id)


def _is_sort_value(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, int)):
        return True
    return isinstance(value, float) and math.isfinite(value)
