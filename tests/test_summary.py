"""Tests for the scalar profile statistics."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from analytics.summary import (
    TotalXpPolicy,
    build_profile_summary,
    build_recent_rows,
    compute_total_xp,
    count_audits,
)
from core.formatting import format_number, format_xp
from core.models import Record, RecordKind
from conftest import make_record


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (999, "999 XP"),
        (1_000, "1.0 KB"),
        (123_456, "123.5 KB"),
        (1_250_000, "1.2 MB"),
        (0, "0 XP"),
    ],
)
def test_format_xp(amount, expected):
    assert format_xp(amount) == expected


def test_format_number_drops_trailing_zeroes():
    assert format_number(1234.5) == "1,234.5"
    assert format_number(2000.0) == "2,000"


def test_total_xp_policies(xp_records):
    assert compute_total_xp(xp_records, TotalXpPolicy.ALL) == pytest.approx(2700.0)
    assert compute_total_xp(xp_records, TotalXpPolicy.EVENT, 75) == pytest.approx(2300.0)


def test_event_policy_without_event_id_counts_everything(xp_records):
    assert compute_total_xp(xp_records, TotalXpPolicy.EVENT, None) == pytest.approx(2700.0)


def test_count_audits(dataset):
    assert count_audits(dataset.audits) == (2, 1)


def test_recent_rows_are_newest_first(xp_records):
    rows = build_recent_rows(xp_records, limit=3)

    assert [row["name"] for row in rows] == ["Graphql", "Graphql", "Ascii Art"]
    assert rows[0]["amount"] == pytest.approx(800.0)
    assert rows[0]["date"] == "05 Mar 2024"


def test_recent_rows_fall_back_to_object_name():
    record = Record(
        id="o1",
        kind=RecordKind.XP,
        amount=50,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        object_name="Checkpoint",
    )
    undated = make_record(RecordKind.XP, 10)

    rows = build_recent_rows([undated, record])

    assert rows[0]["name"] == "Checkpoint"
    assert rows[1]["name"] == "Unknown Task"
    assert rows[1]["date"] == ""


def test_build_profile_summary(dataset):
    summary = build_profile_summary(dataset, TotalXpPolicy.EVENT, 75)

    assert summary["total_xp"] == pytest.approx(2300.0)
    assert summary["total_xp_label"] == "2.3 KB"
    assert summary["audit_ratio"] == "1.3"
    assert summary["audits_done"] == 2
    assert summary["audits_received"] == 1
    assert summary["project_count"] == 3
    assert summary["skill_count"] == 3
    assert len(summary["recent_rows"]) == 4
