"""
Equality filtering and field projection for list queries.

Every query parameter other than ``fields`` is an equality filter on the
record field of the same name.  How a raw query string is compared
depends on the field's declared type in the ``ServiceSpecification``
schema; fields the schema does not declare (extra client fields) fall
back to the type of the stored value.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..schemas.service_specification import declared_field_types

FIELDS_PARAM = "fields"


class FieldKind(str, Enum):
    BOOLEAN = "boolean"
    STRING = "string"
    OTHER = "other"


def _kind_of_type(annotation: Any) -> FieldKind:
    if annotation is bool:
        return FieldKind.BOOLEAN
    if annotation is str:
        return FieldKind.STRING
    return FieldKind.OTHER


DECLARED_KINDS: Dict[str, FieldKind] = {
    name: _kind_of_type(annotation) for name, annotation in declared_field_types().items()
}


def field_kind(field: str, value: Any) -> FieldKind:
    """Return the comparison kind for ``field`` holding ``value``."""
    if field in DECLARED_KINDS:
        return DECLARED_KINDS[field]
    return _kind_of_type(type(value))


def coerce_to_string(value: Any) -> str:
    """Render a stored value the way it appears in a JSON document."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"))


def matches(record: Mapping[str, Any], field: str, raw: str) -> bool:
    """Return whether ``record[field]`` equals the query value ``raw``.

    Records without the field, or with a ``null`` value, never match.
    """
    value = record.get(field)
    if value is None:
        return False
    kind = field_kind(field, value)
    if kind is FieldKind.BOOLEAN:
        return value == (raw == "true")
    if kind is FieldKind.STRING:
        return coerce_to_string(value).lower() == raw.lower()
    return coerce_to_string(value) == raw


def apply_filters(records: Iterable[Dict[str, Any]], filters: Mapping[str, str]) -> List[Dict[str, Any]]:
    results = list(records)
    for field, raw in filters.items():
        results = [record for record in results if matches(record, field, raw)]
    return results


def parse_fields(fields: Optional[str]) -> List[str]:
    if not fields:
        return []
    return [name.strip() for name in fields.split(",") if name.strip()]


def project(records: Iterable[Dict[str, Any]], fields: List[str]) -> List[Dict[str, Any]]:
    """Reduce each record to the requested ``fields`` it actually has."""
    return [
        {name: record[name] for name in fields if name in record}
        for record in records
    ]


def filter_records(
    records: Iterable[Dict[str, Any]],
    filters: Mapping[str, str],
    fields: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Filter ``records`` by ``filters`` then project them onto ``fields``.

    ``fields`` is the raw comma‑separated selection; when it is empty no
    projection takes place.  A ``fields`` key inside ``filters`` is
    ignored so callers can pass the query parameters through unchanged.
    """
    filters = {key: value for key, value in filters.items() if key != FIELDS_PARAM}
    results = apply_filters(records, filters)
    selected = parse_fields(fields)
    if selected:
        results = project(results, selected)
    return results
