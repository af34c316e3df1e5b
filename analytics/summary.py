"""Scalar profile statistics shown beside the charts."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from analytics.aggregation import coerce_amount, skill_levels, xp_by_project
from analytics.naming import normalize_project_name
from core.formatting import format_ratio, format_xp
from core.models import CachedDataset, ProfileSummary, Record, RecentRow, RecordKind

__all__ = [
    "TotalXpPolicy",
    "compute_total_xp",
    "count_audits",
    "build_recent_rows",
    "build_profile_summary",
]


class TotalXpPolicy(str, Enum):
    """Which XP transactions count toward the headline total."""

    ALL = "all"
    EVENT = "event"


def compute_total_xp(
    records: Iterable[Record],
    policy: TotalXpPolicy = TotalXpPolicy.EVENT,
    event_id: Optional[int] = None,
) -> float:
    xp_records = [record for record in records if record.kind is RecordKind.XP]
    if policy is TotalXpPolicy.EVENT and event_id is not None:
        xp_records = [record for record in xp_records if record.event_id == event_id]
    return float(sum(coerce_amount(record.amount) for record in xp_records))


def count_audits(records: Iterable[Record]) -> tuple[int, int]:
    """Return ``(done, received)`` audit counts."""

    done = received = 0
    for record in records:
        if record.kind is RecordKind.AUDIT_DONE:
            done += 1
        elif record.kind is RecordKind.AUDIT_RECEIVED:
            received += 1
    return done, received


def _recency(record: Record) -> float:
    return record.created_at.timestamp() if record.created_at else float("-inf")


def _task_name(record: Record) -> str:
    if record.path:
        return normalize_project_name(record.path)
    return record.object_name or "Unknown Task"


def build_recent_rows(records: Iterable[Record], limit: int = 10) -> list[RecentRow]:
    """Return the latest XP transactions, newest first."""

    xp_records = [record for record in records if record.kind is RecordKind.XP]
    xp_records.sort(key=_recency, reverse=True)

    rows: list[RecentRow] = []
    for record in xp_records[:limit]:
        rows.append(
            {
                "name": _task_name(record),
                "amount": coerce_amount(record.amount),
                "date": record.created_at.strftime("%d %b %Y") if record.created_at else "",
            }
        )
    return rows


def build_profile_summary(
    dataset: CachedDataset,
    policy: TotalXpPolicy = TotalXpPolicy.EVENT,
    event_id: Optional[int] = None,
) -> ProfileSummary:
    total_xp = compute_total_xp(dataset.xp, policy, event_id)
    audits_done, audits_received = count_audits(dataset.audits)

    return {
        "total_xp": total_xp,
        "total_xp_label": format_xp(total_xp),
        "audit_ratio": format_ratio(dataset.user.audit_ratio),
        "audits_done": audits_done,
        "audits_received": audits_received,
        "project_count": len(xp_by_project(dataset.xp, top_n=len(dataset.xp))),
        "skill_count": len(skill_levels(dataset.skills, top_n=len(dataset.skills))),
        "recent_rows": build_recent_rows(dataset.xp),
    }
