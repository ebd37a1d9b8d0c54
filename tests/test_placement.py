"""Tests for apply_layout() and the placement executors."""

from zonewm.core.errors import PlacementFailed
from zonewm.core.placement import LoggingExecutor, PlacementExecutor, apply_layout
from zonewm.geometry.assignment import WindowAssignment
from zonewm.geometry.rect import Rect
from zonewm.layout.model import Layout


LAYOUT = Layout("test", [
    WindowAssignment("a", "main", Rect(0, 25, 960, 1055)),
    WindowAssignment("b", "main", Rect(960, 25, 960, 527)),
    WindowAssignment("c", "main", Rect(960, 552, 960, 528)),
])


class FlakyExecutor(PlacementExecutor):
    """Fails for selected apps."""

    def __init__(self, refuse=(), crash=()):
        self.refuse = set(refuse)
        self.crash = set(crash)
        self.placed = []

    def place(self, app_id, rect):
        if app_id in self.refuse:
            raise PlacementFailed(app_id, "window not found")
        if app_id in self.crash:
            raise OSError("access denied")
        self.placed.append(app_id)


class TestApplyLayout:

    def test_places_in_layout_order(self):
        executor = LoggingExecutor()
        report = apply_layout(LAYOUT, executor)
        assert [app for app, _ in executor.calls] == ["a", "b", "c"]
        assert executor.calls[1][1] == Rect(960, 25, 960, 527)
        assert report.all_ok

    def test_failure_does_not_abort_other_windows(self):
        executor = FlakyExecutor(refuse={"a"}, crash={"b"})
        report = apply_layout(LAYOUT, executor)

        assert executor.placed == ["c"]
        assert report.failed == ["a", "b"]
        assert "window not found" in report.outcomes[0].error
        assert "access denied" in report.outcomes[1].error
        assert report.outcomes[2].ok

    def test_empty_layout(self):
        report = apply_layout(Layout("empty"), LoggingExecutor())
        assert report.outcomes == []
        assert report.all_ok
