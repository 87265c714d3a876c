"""Decode ipdata.co JSON into models and encode models back to JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .exceptions import DecodeError
from .models import BulkLookupResult, LookupResult

logger = logging.getLogger(__name__)


def _loc_path(prefix: str, loc: tuple) -> str:
    """Render a pydantic error location as ``threat.is_tor`` or ``[1].asn``."""
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def _validate(model: type, data: Any, prefix: str = ""):
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise DecodeError(_loc_path(prefix, error["loc"]), error["msg"]) from exc


def parse_lookup(data: Any) -> LookupResult:
    """Decode a single-lookup response object."""
    result = _validate(LookupResult, data)
    logger.debug("Decoded lookup result for %s", result.ip or "<no ip>")
    return result


def parse_bulk_record(data: Any, path: str = "") -> BulkLookupResult:
    """Decode one record of a bulk response."""
    return _validate(BulkLookupResult, data, path)


def parse_bulk_response(payload: Any) -> tuple[BulkLookupResult, ...]:
    """Decode a bulk response (a JSON array of records), preserving order."""
    if not isinstance(payload, list):
        raise DecodeError(
            "", f"expected an array of records, got {type(payload).__name__}"
        )
    records = tuple(
        parse_bulk_record(item, f"[{i}]") for i, item in enumerate(payload)
    )
    logger.debug("Decoded %d bulk record(s)", len(records))
    return records


def to_wire(result: LookupResult | BulkLookupResult) -> dict[str, Any]:
    """Encode a record as a JSON-ready dict using the API's wire keys.

    Absent nested objects and an empty language list are omitted, as is a
    time zone's ``current_time`` when it was not supplied.
    """
    wire = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not wire.get("language"):
        wire.pop("language", None)
    return wire


def load_json(path: Path | str) -> Any:
    """Read a UTF-8 JSON document from disk."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
