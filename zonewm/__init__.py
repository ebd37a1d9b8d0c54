"""
zonewm - Motor de layouts multi-monitor.

Calcula posiciones y tamanos de ventanas alineados y sin solapamientos a
partir de la topologia de monitores y un LayoutSpec:

    topology = build_topology(enumerate_win32_displays())
    result = compose(topology, professional_coding())
    if result.valid:
        apply_layout(result.layout, executor)
"""

from zonewm.geometry import (
    Rect,
    WindowAssignment,
    Display,
    DisplayTopology,
    build_topology,
)
from zonewm.layout import (
    ComposeResult,
    Layout,
    LayoutSpec,
    Slot,
    ValidationReport,
    compose,
    validate,
)
from zonewm.config.settings import DEFAULT_CONFIG, LayoutConfig

__all__ = [
    "Rect",
    "WindowAssignment",
    "Display",
    "DisplayTopology",
    "build_topology",
    "ComposeResult",
    "Layout",
    "LayoutSpec",
    "Slot",
    "ValidationReport",
    "compose",
    "validate",
    "DEFAULT_CONFIG",
    "LayoutConfig",
]
