"""JSON documents to header/row form.

Three shapes are tabular: an array of objects (headers from the first
object's keys), an array of primitives (one "Value" column) and a single
object (one row).  Everything else is rejected.
"""

import json
import logging
from typing import Any

from plotdata.parsing.errors import InvalidJsonError, UnsupportedJsonShapeError
from plotdata.parsing.patterns import JSON_MISSING_PLACEHOLDER, JSON_VALUE_HEADER
from plotdata.parsing.schema import NumberCell, TextCell

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """NaN and Infinity are not standard JSON."""
    raise ValueError(f"non-standard JSON constant {name!r}")


def load_json_document(text: str, source_name: str | None = None) -> Any:
    """Parse *text* as strict JSON, raising InvalidJsonError on malformed input."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJsonError(f"Invalid JSON: {exc}", source_name=source_name) from exc


def json_cell(value: Any) -> TextCell | NumberCell:
    """Map one JSON value to a cell; strings are kept verbatim, not coerced."""
    if isinstance(value, bool):
        return TextCell(value="true" if value else "false")
    if isinstance(value, (int, float)):
        try:
            return NumberCell(value=float(value))
        except OverflowError:
            return TextCell(value=str(value))
    if isinstance(value, str):
        return TextCell(value=value)
    if value is None:
        return TextCell(value="null")
    return TextCell(value=json.dumps(value, separators=(",", ":"), ensure_ascii=False))


def _record_row(record: dict, headers: tuple[str, ...]) -> tuple[TextCell | NumberCell, ...]:
    return tuple(json_cell(record[key]) if key in record else TextCell(value=JSON_MISSING_PLACEHOLDER) for key in headers)


def json_to_table(document: Any, source_name: str | None = None) -> tuple[tuple[str, ...], list[tuple]]:
    """Return ``(headers, rows)`` for a decoded JSON document.

    Keys that appear only on later records are ignored; keys missing from a
    later record yield an "undefined" text cell.
    """
    if isinstance(document, list):
        if document and all(isinstance(item, dict) for item in document):
            headers = tuple(document[0].keys())
            if not headers:
                raise UnsupportedJsonShapeError("JSON objects have no keys to use as columns", source_name=source_name)
            return headers, [_record_row(item, headers) for item in document]
        if any(isinstance(item, (dict, list)) for item in document):
            raise UnsupportedJsonShapeError(
                "JSON arrays must hold only objects or only primitive values", source_name=source_name
            )
        return (JSON_VALUE_HEADER,), [(json_cell(item),) for item in document]

    if isinstance(document, dict):
        headers = tuple(document.keys())
        if not headers:
            raise UnsupportedJsonShapeError("JSON object has no keys to use as columns", source_name=source_name)
        return headers, [_record_row(document, headers)]

    raise UnsupportedJsonShapeError(source_name=source_name)
