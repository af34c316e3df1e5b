"""Tests for grouping, reducing and ranking records."""

from __future__ import annotations

import pytest

from analytics.aggregation import aggregate, coerce_amount, skill_levels, xp_by_project
from analytics.naming import normalize_project_name, normalize_skill_name
from core.models import LabeledValue, RecordKind
from conftest import make_record


def _by_skill(record):
    return normalize_skill_name(record.type)


def test_duplicate_skills_keep_the_maximum():
    records = [
        make_record(RecordKind.SKILL, 40, type="skill_go"),
        make_record(RecordKind.SKILL, 65, type="skill_go"),
    ]

    series = aggregate(records, _by_skill, "max")

    assert series == (LabeledValue("Go", 65.0),)


def test_sum_reducer_adds_amounts_per_label(xp_records):
    series = aggregate(xp_records, lambda record: normalize_project_name(record.path), "sum")

    assert series[0] == LabeledValue("Graphql", 2000.0)
    assert [entry.label for entry in series] == ["Graphql", "Ex00", "Ascii Art"]


def test_series_is_sorted_and_capped_at_ten():
    records = [
        make_record(RecordKind.XP, amount, path=f"/school/project-{index}")
        for index, amount in enumerate([5, 90, 12, 70, 33, 1, 64, 8, 45, 27, 99, 3, 50])
    ]

    series = aggregate(records, lambda record: normalize_project_name(record.path), "sum")

    values = [entry.value for entry in series]
    assert len(series) == 10
    assert values == sorted(values, reverse=True)
    assert values[0] == pytest.approx(99.0)


def test_ties_keep_discovery_order():
    records = [
        make_record(RecordKind.XP, 10, path="/b"),
        make_record(RecordKind.XP, 10, path="/a"),
        make_record(RecordKind.XP, 10, path="/c"),
    ]

    series = aggregate(records, lambda record: normalize_project_name(record.path), "sum")

    assert [entry.label for entry in series] == ["B", "A", "C"]


def test_empty_input_returns_empty_series():
    assert aggregate([], lambda record: "x", "sum") == ()


def test_all_zero_values_still_produce_a_series():
    records = [make_record(RecordKind.SKILL, 0, type="skill_go")]

    assert aggregate(records, _by_skill, "max") == (LabeledValue("Go", 0.0),)


def test_malformed_amounts_count_as_zero():
    records = [
        make_record(RecordKind.XP, None, path="/a"),
        make_record(RecordKind.XP, "oops", path="/a"),
        make_record(RecordKind.XP, float("nan"), path="/b"),
        make_record(RecordKind.XP, "25", path="/b"),
    ]

    series = aggregate(records, lambda record: normalize_project_name(record.path), "sum")

    assert series == (LabeledValue("B", 25.0), LabeledValue("A", 0.0))


def test_negative_totals_are_clipped():
    records = [make_record(RecordKind.XP, -50, path="/a")]

    series = aggregate(records, lambda record: normalize_project_name(record.path), "sum")

    assert series == (LabeledValue("A", 0.0),)


def test_unknown_reducer_is_rejected():
    with pytest.raises(ValueError):
        aggregate([], lambda record: "x", "mean")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 0.0),
        ("12.5", 12.5),
        ("", 0.0),
        (7, 7.0),
        ("1e400", 0.0),
        (float("inf"), 0.0),
        (float("-inf"), 0.0),
        ([1, 2], 0.0),
        ({"v": 1}, 0.0),
    ],
)
def test_coerce_amount(raw, expected):
    assert coerce_amount(raw) == pytest.approx(expected)


def test_xp_by_project_skips_non_positive_amounts(xp_records):
    records = xp_records + [make_record(RecordKind.XP, 0, path="/school/empty")]

    series = xp_by_project(records)

    assert "Empty" not in [entry.label for entry in series]
    assert series[0].value == pytest.approx(2000.0)


def test_skill_levels_ignores_other_kinds(skill_records, xp_records):
    series = skill_levels(skill_records + xp_records)

    assert series == (
        LabeledValue("Go", 65.0),
        LabeledValue("Front End", 55.0),
        LabeledValue("Js", 30.0),
    )


def test_infinite_and_non_scalar_amounts_do_not_break_the_series():
    records = [
        make_record(RecordKind.XP, "1e400", path="/a"),
        make_record(RecordKind.XP, [1, 2], path="/a"),
        make_record(RecordKind.XP, {"v": 1}, path="/b"),
        make_record(RecordKind.XP, 40, path="/b"),
    ]

    series = aggregate(records, lambda record: normalize_project_name(record.path), "sum")

    assert series == (LabeledValue("B", 40.0), LabeledValue("A", 0.0))
