"""Encode/decode boundary for list values stored as JSON text columns.

Decoding is lenient on purpose: a bad value in one row must never fail a read.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def decode_skills(raw: Any) -> list:
    """Normalize a stored skills value to a list.

    None/empty -> [], JSON array -> the array, other JSON -> [value],
    anything unparsable -> [raw].
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid skills JSON %r, treating as single skill", raw)
        return [raw]
    if parsed is None:
        return []
    return parsed if isinstance(parsed, list) else [parsed]


def encode_skills(value: Any) -> str:
    """Store skills as a JSON array. Accepts a list or a comma-separated string."""
    if value is None:
        return "[]"
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",")]
    else:
        items = [str(part).strip() for part in value]
    return json.dumps([item for item in items if item])


def decode_json_list(raw: Any, row_id: Any = None, field: str = "value") -> list:
    """Decode a JSON list column (company jobs/reviews). Anything malformed becomes []."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.error("Error parsing %s for id %s: %s", field, row_id, e)
        return []
    return parsed if isinstance(parsed, list) else []


def encode_json_list(value: list | None) -> str:
    return json.dumps(list(value or []))
