"""
zonewm.core.errors - Exception hierarchy.

Structural problems with the input (no displays, a bad grid, a bad slot)
are raised and abort composition of the affected layout.  Geometric
imperfections (residual overlaps, undersized windows) are never raised:
they are collected in the validation report instead.
"""

from __future__ import annotations


class LayoutError(RuntimeError):
    """Base class for every error raised by zonewm."""


class EmptyTopology(LayoutError):
    """The display enumerator reported no displays at all."""

    def __init__(self, message: str = "No displays to lay out on") -> None:
        super().__init__(message)


class InvalidTopology(LayoutError):
    """A display record is malformed or two displays share an id."""


class InvalidGridSpec(LayoutError):
    """
    A grid is unusable.

    Raised when rows or cols is below 1, when the usable area is narrower
    than cols or shorter than rows (a cell would be empty), or when a zone
    reference falls outside the grid.
    """


class InvalidRegion(LayoutError):
    """A region descriptor resolves to an empty or negative rectangle."""


class InvalidLayoutSpec(LayoutError):
    """A layout spec names the same app id in more than one slot."""


class PlacementFailed(LayoutError):
    """
    A Placement Executor could not move/resize one window.

    Raised by executors only; apply_layout() catches it per window.
    """

    def __init__(self, app_id: str, reason: str = "") -> None:
        self.app_id = app_id
        self.reason = reason
        msg = f"Placement failed for {app_id!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
