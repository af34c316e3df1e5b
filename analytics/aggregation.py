"""Group records by display label and rank them into chart series."""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, Literal

import numpy as np
import pandas as pd

from analytics.naming import normalize_project_name, normalize_skill_name
from core.models import LabeledValue, Record, RecordKind, Series

__all__ = [
    "TOP_N",
    "Reducer",
    "coerce_amount",
    "aggregate",
    "xp_by_project",
    "skill_levels",
]

TOP_N = 10

Reducer = Literal["sum", "max"]
_REDUCERS = frozenset({"sum", "max"})


def coerce_amount(value: Any) -> float:
    """Return ``value`` as a float, treating missing, malformed or infinite input as 0."""

    if not np.isscalar(value):
        return 0.0
    amount = float(pd.to_numeric(value, errors="coerce"))
    if not math.isfinite(amount):
        return 0.0
    return amount


def aggregate(
    records: Iterable[Record],
    label_of: Callable[[Record], str],
    reducer: Reducer = "sum",
    *,
    top_n: int = TOP_N,
) -> Series:
    """Reduce ``records`` to one value per label and return the top ``top_n``.

    Labels keep their first-seen order so equal values rank in discovery
    order. Negative totals are clipped to zero.
    """

    if reducer not in _REDUCERS:
        raise ValueError(f"Unknown reducer '{reducer}'. Use 'sum' or 'max'.")

    frame = pd.DataFrame(
        [(label_of(record), coerce_amount(record.amount)) for record in records],
        columns=["label", "value"],
    )
    if frame.empty:
        return ()

    totals = frame.groupby("label", sort=False)["value"].agg(reducer).clip(lower=0.0)
    ranked = totals.sort_values(ascending=False, kind="stable").head(top_n)
    return tuple(LabeledValue(str(label), float(value)) for label, value in ranked.items())


def xp_by_project(records: Iterable[Record], *, top_n: int = TOP_N) -> Series:
    """Sum positive XP amounts per project."""

    earning = [
        record
        for record in records
        if record.kind is RecordKind.XP and coerce_amount(record.amount) > 0
    ]
    return aggregate(earning, lambda record: normalize_project_name(record.path), "sum", top_n=top_n)


def skill_levels(records: Iterable[Record], *, top_n: int = TOP_N) -> Series:
    """Highest observed level per skill; duplicates do not add up."""

    skills = [record for record in records if record.kind is RecordKind.SKILL]
    return aggregate(skills, lambda record: normalize_skill_name(record.type), "max", top_n=top_n)
