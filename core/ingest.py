"""Turn raw GraphQL payloads into typed records."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from core.models import CachedDataset, Record, RecordKind, UserProfile

__all__ = [
    "classify_record_type",
    "build_record",
    "build_records",
    "build_user",
    "build_dataset",
]

logger = logging.getLogger(__name__)

_EXACT_KINDS = {
    "xp": RecordKind.XP,
    "up": RecordKind.AUDIT_DONE,
    "down": RecordKind.AUDIT_RECEIVED,
}


def classify_record_type(raw_type: Optional[str]) -> Optional[RecordKind]:
    """Map a raw transaction ``type`` onto a :class:`RecordKind`, or ``None``."""

    if not raw_type:
        return None
    if raw_type.startswith("skill_"):
        return RecordKind.SKILL
    return _EXACT_KINDS.get(raw_type)


def _coerce_float(value: Any, default: float = 0.0) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(amount):
        return default
    return amount


def _coerce_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    stamp = pd.to_datetime(value, errors="coerce", utc=True)
    if pd.isna(stamp):
        return None
    return stamp.to_pydatetime()


def build_record(
    raw: Mapping[str, Any],
    default_kind: Optional[RecordKind] = None,
) -> Optional[Record]:
    """Build a record from one transaction row.

    ``default_kind`` applies when the row carries no ``type`` field, which is
    how XP rows come back from a query already filtered on ``type``.
    """

    raw_type = raw.get("type") or ""
    kind = classify_record_type(raw_type) if raw_type else default_kind
    if kind is None:
        logger.debug("Dropping transaction %s with unsupported type %r", raw.get("id"), raw_type)
        return None

    related = raw.get("object") or {}
    return Record(
        id=str(raw.get("id", "")),
        kind=kind,
        amount=_coerce_float(raw.get("amount")),
        created_at=_parse_timestamp(raw.get("createdAt")),
        path=str(raw.get("path") or ""),
        type=str(raw_type or kind.value),
        event_id=_coerce_int(raw.get("eventId")),
        object_name=related.get("name") if isinstance(related, Mapping) else None,
    )


def build_records(
    rows: Optional[Iterable[Mapping[str, Any]]],
    default_kind: Optional[RecordKind] = None,
) -> tuple[Record, ...]:
    records = (build_record(row, default_kind) for row in rows or ())
    return tuple(record for record in records if record is not None)


def build_user(rows: Any) -> UserProfile:
    """Return the signed-in user from the ``user`` query result."""

    if isinstance(rows, list):
        rows = rows[0] if rows else None
    if not isinstance(rows, Mapping):
        return UserProfile()

    return UserProfile(
        id=str(rows.get("id") or "N/A"),
        login=str(rows.get("login") or "N/A"),
        audit_ratio=_coerce_float(rows.get("auditRatio")),
    )


def build_dataset(payload: Mapping[str, Any]) -> CachedDataset:
    """Build a dataset snapshot from the combined profile query payload."""

    xp = build_records(payload.get("xp"), RecordKind.XP)
    skills = build_records(payload.get("skills"))
    audits = build_records(payload.get("auditsDone"), RecordKind.AUDIT_DONE) + build_records(
        payload.get("auditsReceived"), RecordKind.AUDIT_RECEIVED
    )
    dataset = CachedDataset(
        xp=tuple(record for record in xp if record.kind is RecordKind.XP),
        skills=tuple(record for record in skills if record.kind is RecordKind.SKILL),
        audits=audits,
        user=build_user(payload.get("user")),
    )
    logger.info(
        "Loaded %d XP, %d skill and %d audit records",
        len(dataset.xp),
        len(dataset.skills),
        len(dataset.audits),
    )
    return dataset
