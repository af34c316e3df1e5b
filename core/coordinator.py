"""Render scheduling for the dashboard charts.

The coordinator owns the last successfully loaded dataset so viewport
changes can redraw the charts without fetching again. All work is
synchronous and driven by the caller's events; the only timing concern is
the resize quiet period, measured against an injectable clock.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Mapping, Optional

from analytics.aggregation import TOP_N, skill_levels, xp_by_project
from core.models import CachedDataset, ChartResult, Series, Viewport
from visualization.scale import DEFAULT_TICK_COUNT
from visualization.scene import build_chart_result
from visualization.theme import CHART_STYLES, ChartStyle

__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "Surface",
    "DatasetCache",
    "Debouncer",
    "RenderCoordinator",
]

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 250

Surface = Callable[[str, ChartResult, Viewport], None]
Clock = Callable[[], float]


class DatasetCache:
    """Single-slot holder for the latest dataset; replaced, never mutated."""

    def __init__(self) -> None:
        self._dataset: Optional[CachedDataset] = None

    def get(self) -> Optional[CachedDataset]:
        return self._dataset

    def set(self, dataset: CachedDataset) -> None:
        self._dataset = dataset

    def clear(self) -> None:
        self._dataset = None


class Debouncer:
    """Coalesce triggers until ``quiet_period`` seconds pass without one."""

    def __init__(self, quiet_period: float, clock: Clock = time.monotonic) -> None:
        self.quiet_period = quiet_period
        self._clock = clock
        self._deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def trigger(self, now: Optional[float] = None) -> None:
        start = self._clock() if now is None else now
        self._deadline = start + self.quiet_period

    def due(self, now: Optional[float] = None) -> bool:
        if self._deadline is None:
            return False
        current = self._clock() if now is None else now
        return current >= self._deadline

    def cancel(self) -> None:
        self._deadline = None


class RenderCoordinator:
    """Decide when the XP and skills charts are rebuilt and push the results."""

    def __init__(
        self,
        surface: Surface,
        *,
        styles: Optional[Mapping[str, ChartStyle]] = None,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        tick_count: int = DEFAULT_TICK_COUNT,
        top_n: int = TOP_N,
        clock: Clock = time.monotonic,
    ) -> None:
        self.surface = surface
        self.styles = dict(styles or CHART_STYLES)
        self.tick_count = tick_count
        self.top_n = top_n
        self.cache = DatasetCache()
        self.last_results: dict[str, ChartResult] = {}
        self._debouncer = Debouncer(debounce_ms / 1000.0, clock)
        self._pending_viewports: Optional[Mapping[str, Viewport]] = None
        self._load_in_flight = False

    @property
    def load_in_flight(self) -> bool:
        return self._load_in_flight

    def _series_for(self, dataset: CachedDataset) -> dict[str, Series]:
        return {
            "xp": xp_by_project(dataset.xp, top_n=self.top_n),
            "skills": skill_levels(dataset.skills, top_n=self.top_n),
        }

    def render(
        self,
        dataset: CachedDataset,
        viewports: Mapping[str, Viewport],
    ) -> dict[str, ChartResult]:
        """Build every chart from ``dataset`` and push each result to the surface."""

        results: dict[str, ChartResult] = {}
        for name, series in self._series_for(dataset).items():
            style = self.styles[name]
            viewport = viewports[name]
            result = build_chart_result(series, viewport, style, self.tick_count)
            if result.is_placeholder:
                logger.debug("Chart %s shows placeholder: %s", name, result.error)
            self.surface(name, result, viewport)
            results[name] = result
        self.last_results = results
        return results

    def begin_load(self) -> None:
        self._load_in_flight = True

    def complete_load(
        self,
        dataset: CachedDataset,
        viewports: Mapping[str, Viewport],
    ) -> dict[str, ChartResult]:
        """Cache a freshly loaded dataset and render it straight away."""

        self._load_in_flight = False
        self._debouncer.cancel()
        self._pending_viewports = None
        self.cache.set(dataset)
        logger.info("Dataset loaded; rendering %d charts", len(self.styles))
        return self.render(dataset, viewports)

    def fail_load(self) -> None:
        self._load_in_flight = False

    def request_resize(
        self,
        viewports: Mapping[str, Viewport],
        now: Optional[float] = None,
    ) -> bool:
        """Schedule a redraw for new viewports; ignored until data has loaded."""

        if self.cache.get() is None:
            logger.debug("Ignoring resize: no dataset cached")
            return False
        self._pending_viewports = viewports
        self._debouncer.trigger(now)
        return True

    def poll(self, now: Optional[float] = None) -> Optional[dict[str, ChartResult]]:
        """Run the pending resize once its quiet period has elapsed."""

        if not self._debouncer.due(now):
            return None
        return self._run_pending()

    def flush(self) -> Optional[dict[str, ChartResult]]:
        """Run the pending resize now, for surfaces that already coalesce events."""

        if not self._debouncer.pending:
            return None
        return self._run_pending()

    def _run_pending(self) -> Optional[dict[str, ChartResult]]:
        viewports = self._pending_viewports
        self._debouncer.cancel()
        self._pending_viewports = None

        if self._load_in_flight:
            logger.debug("Skipping resize render while a load is in flight")
            return None
        dataset = self.cache.get()
        if dataset is None or viewports is None:
            return None
        return self.render(dataset, viewports)

    def logout(self) -> None:
        self.cache.clear()
        self._debouncer.cancel()
        self._pending_viewports = None
        self._load_in_flight = False
        self.last_results = {}
