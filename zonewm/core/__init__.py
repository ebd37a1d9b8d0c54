"""
zonewm.core - Errors and the seams to the outside world.

This package contains:
    - errors    : Exception hierarchy (LayoutError and subclasses)
    - displays  : Display enumerators (displayplacer report, Win32)
    - placement : Placement executor protocol and apply_layout()
"""

from zonewm.core.errors import (
    LayoutError,
    EmptyTopology,
    InvalidTopology,
    InvalidGridSpec,
    InvalidRegion,
    InvalidLayoutSpec,
    PlacementFailed,
)

__all__ = [
    "LayoutError", "EmptyTopology", "InvalidTopology", "InvalidGridSpec",
    "InvalidRegion", "InvalidLayoutSpec", "PlacementFailed",
]
