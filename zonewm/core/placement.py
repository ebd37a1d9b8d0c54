"""
zonewm.core.placement - Applying a composed layout.

The engine only computes rectangles.  A PlacementExecutor is the sink that
actually moves/resizes windows on some platform.  apply_layout() drives an
executor over a Layout, one call per window, in layout order (the same
order the overlap resolver used, so "first wins" still holds on screen).

A failing window never aborts the rest: the error is logged and recorded
in the returned outcomes.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass, field

from zonewm.core.errors import PlacementFailed
from zonewm.geometry.rect import Rect
from zonewm.layout.model import Layout

log = logging.getLogger(__name__)


class PlacementExecutor(abc.ABC):
    """Sink that moves/resizes the window of one application."""

    @abc.abstractmethod
    def place(self, app_id: str, rect: Rect) -> None:
        """
        Move/resize the window of *app_id* to *rect*.

        Raises:
            PlacementFailed: If the window cannot be placed.
        """
        ...


class LoggingExecutor(PlacementExecutor):
    """Dry-run executor: logs every call and remembers it."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Rect]] = []

    def place(self, app_id: str, rect: Rect) -> None:
        self.calls.append((app_id, rect))
        log.info("PLACE %s -> %s", app_id, rect)


@dataclass(frozen=True, slots=True)
class PlacementOutcome:
    """Result of placing one window."""

    app_id: str
    rect: Rect
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class PlacementReport:
    """Outcomes of apply_layout(), in application order."""

    outcomes: list[PlacementOutcome] = field(default_factory=list)

    @property
    def failed(self) -> list[str]:
        return [o.app_id for o in self.outcomes if not o.ok]

    @property
    def all_ok(self) -> bool:
        return all(o.ok for o in self.outcomes)


def apply_layout(layout: Layout, executor: PlacementExecutor) -> PlacementReport:
    """
    Place every window of *layout* through *executor*.

    Args:
        layout:   Composed layout.
        executor: Platform sink.

    Returns:
        PlacementReport with one outcome per assignment.
    """
    report = PlacementReport()

    for a in layout:
        try:
            executor.place(a.app_id, a.rect)
        except PlacementFailed as exc:
            log.warning("%s", exc)
            report.outcomes.append(PlacementOutcome(a.app_id, a.rect, str(exc)))
            continue
        except Exception as exc:
            log.exception("Error placing %s", a.app_id)
            report.outcomes.append(PlacementOutcome(a.app_id, a.rect, repr(exc)))
            continue
        report.outcomes.append(PlacementOutcome(a.app_id, a.rect))

    log.info(
        "Layout applied: %s | %d windows | %d failed",
        layout.name,
        len(report.outcomes),
        len(report.failed),
    )
    return report
