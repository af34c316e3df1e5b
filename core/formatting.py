"""Formatting helpers for LearnBoard labels and summaries."""

from __future__ import annotations

__all__ = ["format_number", "format_xp", "format_ratio", "truncate_label"]


def format_number(value: float) -> str:
    """Format ``value`` with thousands separators and at most three decimals."""

    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_xp(amount: float) -> str:
    """Scale an XP amount to the platform's byte-style units."""

    if amount >= 1_000_000:
        return f"{amount / 1_000_000:.1f} MB"
    if amount >= 1_000:
        return f"{amount / 1_000:.1f} KB"
    return f"{format_number(amount)} XP"


def format_ratio(ratio: float) -> str:
    return f"{ratio:.1f}"


def truncate_label(label: str, max_chars: int, keep_chars: int) -> str:
    if len(label) > max_chars:
        return label[:keep_chars] + "..."
    return label
