"""Shared fixtures for the LearnBoard test suite."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models import CachedDataset, Margin, Record, RecordKind, UserProfile, Viewport


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)


def make_record(
    kind: RecordKind,
    amount,
    *,
    path: str = "",
    type: str = "",
    created_at: datetime | None = None,
    event_id: int | None = None,
    record_id: str = "t",
) -> Record:
    return Record(
        id=record_id,
        kind=kind,
        amount=amount,
        created_at=created_at,
        path=path,
        type=type or kind.value,
        event_id=event_id,
    )


@pytest.fixture()
def xp_records() -> list[Record]:
    return [
        make_record(
            RecordKind.XP,
            1200,
            path="/school/div-01/graphql",
            created_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
            event_id=75,
            record_id="x1",
        ),
        make_record(
            RecordKind.XP,
            400,
            path="/school/piscine-go/ex00",
            created_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
            event_id=12,
            record_id="x2",
        ),
        make_record(
            RecordKind.XP,
            800,
            path="/school/div-01/graphql",
            created_at=datetime(2024, 3, 5, tzinfo=timezone.utc),
            event_id=75,
            record_id="x3",
        ),
        make_record(
            RecordKind.XP,
            300,
            path="/school/div-01/quest-ascii-art/42",
            created_at=datetime(2024, 2, 2, tzinfo=timezone.utc),
            event_id=75,
            record_id="x4",
        ),
    ]


@pytest.fixture()
def skill_records() -> list[Record]:
    return [
        make_record(RecordKind.SKILL, 40, type="skill_go", record_id="s1"),
        make_record(RecordKind.SKILL, 65, type="skill_go", record_id="s2"),
        make_record(RecordKind.SKILL, 30, type="skill_js", record_id="s3"),
        make_record(RecordKind.SKILL, 55, type="skill_front-end", record_id="s4"),
    ]


@pytest.fixture()
def dataset(xp_records, skill_records) -> CachedDataset:
    audits = (
        make_record(RecordKind.AUDIT_DONE, 100, record_id="a1"),
        make_record(RecordKind.AUDIT_DONE, 150, record_id="a2"),
        make_record(RecordKind.AUDIT_RECEIVED, 90, record_id="a3"),
    )
    return CachedDataset(
        xp=tuple(xp_records),
        skills=tuple(skill_records),
        audits=audits,
        user=UserProfile(id="42", login="learner", audit_ratio=1.26),
    )


@pytest.fixture()
def viewport() -> Viewport:
    return Viewport(width=500, height=380, margin=Margin(top=40, right=30, bottom=120, left=70))


@pytest.fixture()
def viewports(viewport) -> dict[str, Viewport]:
    return {
        "xp": viewport,
        "skills": Viewport(width=500, height=400, margin=Margin(top=40, right=30, bottom=100, left=70)),
    }
