"""Tests for turning GraphQL rows into typed records."""

from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from analytics.aggregation import xp_by_project
from core.ingest import build_dataset, build_record, build_user, classify_record_type
from core.models import AxisTick, GridLine, RecordKind, UserProfile
from visualization.scene import build_chart_result
from visualization.theme import XP_CHART_STYLE


@pytest.fixture()
def profile_payload() -> dict:
    return {
        "user": [{"id": 42, "login": "learner", "auditRatio": 1.26}],
        "xp": [
            {
                "id": 1,
                "amount": 1200,
                "createdAt": "2024-03-01T10:00:00.000Z",
                "path": "/school/div-01/graphql",
                "eventId": 75,
                "object": {"name": "graphql"},
            },
            {"id": 2, "amount": None, "createdAt": "not a date", "path": "/school/div-01/go-reloaded"},
        ],
        "skills": [
            {"id": 3, "type": "skill_go", "amount": 65},
            {"id": 4, "type": "level", "amount": 12},
        ],
        "auditsDone": [{"id": 5, "type": "up", "amount": 100}],
        "auditsReceived": [{"id": 6, "type": "down", "amount": 90}, {"id": 7, "amount": 40}],
    }


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("xp", RecordKind.XP),
        ("skill_go", RecordKind.SKILL),
        ("up", RecordKind.AUDIT_DONE),
        ("down", RecordKind.AUDIT_RECEIVED),
        ("level", None),
        ("", None),
        (None, None),
    ],
)
def test_classify_record_type(raw, expected):
    assert classify_record_type(raw) is expected


def test_build_record_parses_fields(profile_payload):
    record = build_record(profile_payload["xp"][0], RecordKind.XP)

    assert record is not None
    assert record.id == "1"
    assert record.kind is RecordKind.XP
    assert record.amount == pytest.approx(1200.0)
    assert record.created_at == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)
    assert record.event_id == 75
    assert record.object_name == "graphql"


def test_build_record_coerces_bad_values(profile_payload):
    record = build_record(profile_payload["xp"][1], RecordKind.XP)

    assert record is not None
    assert record.amount == 0.0
    assert record.created_at is None
    assert record.event_id is None


def test_build_record_drops_unknown_types():
    assert build_record({"id": 9, "type": "level", "amount": 3}) is None
    assert build_record({"id": 9, "amount": 3}) is None


def test_build_dataset(profile_payload):
    dataset = build_dataset(profile_payload)

    assert len(dataset.xp) == 2
    assert [record.type for record in dataset.skills] == ["skill_go"]
    assert [record.kind for record in dataset.audits] == [
        RecordKind.AUDIT_DONE,
        RecordKind.AUDIT_RECEIVED,
        RecordKind.AUDIT_RECEIVED,
    ]
    assert dataset.user == UserProfile(id="42", login="learner", audit_ratio=1.26)


@pytest.mark.parametrize("rows", [[], None, "unexpected"])
def test_build_user_defaults(rows):
    assert build_user(rows) == UserProfile()


def test_build_user_missing_ratio():
    assert build_user({"id": 1, "login": "x"}).audit_ratio == 0.0


@pytest.mark.parametrize("amount", ["1e400", float("inf"), [1, 2], {"v": 1}])
def test_build_record_zeroes_unusable_amounts(amount):
    record = build_record({"id": 1, "type": "xp", "amount": amount})

    assert record is not None
    assert record.amount == 0.0


def test_overflowing_amount_leaves_chart_geometry_finite(viewport):
    rows = [
        {"id": 1, "amount": "1e400", "path": "/school/div-01/graphql"},
        {"id": 2, "amount": 300, "path": "/school/div-01/ascii-art"},
    ]
    records = [build_record(row, RecordKind.XP) for row in rows]

    result = build_chart_result(xp_by_project(records), viewport, XP_CHART_STYLE)

    assert result.placeholder is None
    for element in result.elements:
        if isinstance(element, GridLine):
            assert math.isfinite(element.position)
        if isinstance(element, AxisTick):
            assert element.label != "nan"
