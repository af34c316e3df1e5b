"""Shared data model definitions for the LearnBoard dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Literal, NamedTuple, Optional, TypedDict, Union


class RecordKind(str, Enum):
    XP = "xp"
    SKILL = "skill"
    AUDIT_DONE = "up"
    AUDIT_RECEIVED = "down"


@dataclass(frozen=True)
class Record:
    id: str
    kind: RecordKind
    amount: float
    created_at: Optional[datetime] = None
    path: str = ""
    type: str = ""
    event_id: Optional[int] = None
    object_name: Optional[str] = None


@dataclass(frozen=True)
class LabeledValue:
    label: str
    value: float


Series = tuple[LabeledValue, ...]


@dataclass(frozen=True)
class Margin:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float
    margin: Margin

    @property
    def plot_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def plot_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom


class Tick(NamedTuple):
    """A ``(value, position)`` pair along the value axis."""

    value: float
    position: float


@dataclass(frozen=True)
class Scale:
    """Linear value-to-pixel mapping for one chart's plotting area.

    Pixel ``0`` is the top of the plotting area, so larger values map to
    smaller pixel positions and bars grow upward from ``map(0)``.
    """

    domain_max: float
    pixel_range: float
    ticks: tuple[Tick, ...] = ()

    def map(self, value: float) -> float:
        domain = self.domain_max or 1
        return self.pixel_range - (value / domain) * self.pixel_range


class ScaleError(str, Enum):
    VIEWPORT_TOO_SMALL = "viewport_too_small"
    ALL_ZERO = "all_zero"
    EMPTY_SERIES = "empty_series"


@dataclass(frozen=True)
class GradientFill:
    gradient_id: str
    top_color: str
    bottom_color: str


@dataclass(frozen=True)
class GridLine:
    position: float
    x_start: float
    x_end: float


@dataclass(frozen=True)
class AxisTick:
    position: float
    label: str
    axis: Literal["x", "y"] = "x"
    offset: float = 0.0
    rotation: float = 0.0


@dataclass(frozen=True)
class AxisTitle:
    text: str
    x: float
    y: float
    rotation: float = -90.0


@dataclass(frozen=True)
class Bar:
    x: float
    y: float
    width: float
    height: float
    tooltip: str
    value_label: Optional[str] = None


SceneElement = Union[GradientFill, GridLine, AxisTick, AxisTitle, Bar]


@dataclass(frozen=True)
class ChartResult:
    elements: tuple[SceneElement, ...] = ()
    placeholder: Optional[str] = None
    error: Optional[ScaleError] = None

    @property
    def is_placeholder(self) -> bool:
        return self.placeholder is not None


@dataclass(frozen=True)
class UserProfile:
    id: str = "N/A"
    login: str = "N/A"
    audit_ratio: float = 0.0


@dataclass(frozen=True)
class CachedDataset:
    """Snapshot of one successful profile load."""

    xp: tuple[Record, ...] = ()
    skills: tuple[Record, ...] = ()
    audits: tuple[Record, ...] = ()
    user: UserProfile = field(default_factory=UserProfile)


class RecentRow(TypedDict):
    name: str
    amount: float
    date: str


class ProfileSummary(TypedDict):
    total_xp: float
    total_xp_label: str
    audit_ratio: str
    audits_done: int
    audits_received: int
    project_count: int
    skill_count: int
    recent_rows: list[RecentRow]


__all__ = [
    "RecordKind",
    "Record",
    "LabeledValue",
    "Series",
    "Margin",
    "Viewport",
    "Tick",
    "Scale",
    "ScaleError",
    "GradientFill",
    "GridLine",
    "AxisTick",
    "AxisTitle",
    "Bar",
    "SceneElement",
    "ChartResult",
    "UserProfile",
    "CachedDataset",
    "RecentRow",
    "ProfileSummary",
]
