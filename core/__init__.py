"""Core domain package for the LearnBoard application."""

from .models import (
    CachedDataset,
    ChartResult,
    LabeledValue,
    Margin,
    ProfileSummary,
    Record,
    RecordKind,
    Scale,
    ScaleError,
    Series,
    UserProfile,
    Viewport,
)

__all__ = [
    "CachedDataset",
    "ChartResult",
    "LabeledValue",
    "Margin",
    "ProfileSummary",
    "Record",
    "RecordKind",
    "Scale",
    "ScaleError",
    "Series",
    "UserProfile",
    "Viewport",
]
