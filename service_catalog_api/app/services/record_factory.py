"""
Construction of normalized ServiceSpecification records.

``build_record`` turns whatever partial mapping a client posted into a
complete record: an identifier is generated when missing, defaults are
filled in and ``href`` is derived from the identifier.  The helpers in
this module are also used when records are updated, so that links and
timestamps are produced the same way everywhere.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from ..core.config import BASE_PATH
from ..schemas.service_specification import (
    DEFAULT_LIFECYCLE_STATUS,
    DEFAULT_VERSION,
    SERVICE_SPECIFICATION_TYPE,
)

RESOURCE_PATH = "/serviceSpecification"

# Keys the factory computes itself; anything else in the payload is
# carried over untouched.
_NORMALIZED_FIELDS = (
    "@type",
    "id",
    "href",
    "name",
    "version",
    "lifecycleStatus",
    "isBundle",
    "lastUpdate",
)


def href_for(base_url: str, record_id: str) -> str:
    """Return the self link of the record with ``record_id``."""
    return f"{base_url.rstrip('/')}{BASE_PATH}{RESOURCE_PATH}/{record_id}"


def utc_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO‑8601 UTC with millisecond precision."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now(offset_seconds: float = 0) -> str:
    return utc_timestamp(datetime.now(timezone.utc) + timedelta(seconds=offset_seconds))


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO‑8601 string, returning ``None`` for anything else."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def next_timestamp(previous: Any = None) -> str:
    """Return a stamp for a mutation that sorts after ``previous``.

    Normally this is the current time.  When the clock has not moved past
    the previous stamp (same millisecond, or a stamp pushed into the future
    at creation), one millisecond after ``previous`` is used instead.
    """
    now = datetime.now(timezone.utc)
    last = parse_timestamp(previous)
    if last is not None and now <= last:
        now = last + timedelta(milliseconds=1)
    return utc_timestamp(now)


def build_record(
    payload: Optional[Mapping[str, Any]],
    base_url: str,
    now: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a complete record from a partial ``payload``.

    Parameters
    ----------
    payload : Mapping or None
        Fields supplied by the caller.  Empty or missing input is legal.
    base_url : str
        Scheme and host the record is served from, used for ``href``.
    now : str, optional
        Stamp to use when the payload carries no ``lastUpdate``.  Defaults
        to the current time.

    Returns
    -------
    dict
        The normalized record.  Client supplied ``href`` values are
        ignored; ``lastUpdate`` from the payload is trusted.
    """
    payload = dict(payload or {})
    record_id = str(payload.get("id") or uuid.uuid4())

    record: Dict[str, Any] = {
        "@type": payload.get("@type") or SERVICE_SPECIFICATION_TYPE,
        "id": record_id,
        "href": href_for(base_url, record_id),
        "name": payload.get("name") or f"Default Service {record_id}",
        "version": payload.get("version") or DEFAULT_VERSION,
        "lifecycleStatus": payload.get("lifecycleStatus") or DEFAULT_LIFECYCLE_STATUS,
        "isBundle": payload["isBundle"] if "isBundle" in payload else False,
        "lastUpdate": payload.get("lastUpdate") or now or utc_now(),
    }
    for key, value in payload.items():
        if key not in _NORMALIZED_FIELDS:
            record[key] = value
    return record


def reassert_defaults(record: Dict[str, Any], base_url: str) -> Dict[str, Any]:
    """Restore derived and defaulted fields after a merge.

    ``href`` is recomputed from ``id``; the type tag, ``lifecycleStatus``
    and ``isBundle`` get their defaults back if the merge cleared them.
    The record is modified in place and returned.
    """
    record["href"] = href_for(base_url, record["id"])
    if not record.get("@type"):
        record["@type"] = SERVICE_SPECIFICATION_TYPE
    if record.get("isBundle") is None:
        record["isBundle"] = False
    if not record.get("lifecycleStatus"):
        record["lifecycleStatus"] = DEFAULT_LIFECYCLE_STATUS
    return record
