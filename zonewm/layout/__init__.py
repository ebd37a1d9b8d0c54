"""
zonewm.layout - Composicion y validacion de layouts.

Este paquete contiene:
    - spec       : LayoutSpec, Slot, DisplaySelector y las regiones
    - model      : Layout (resultado que se entrega al ejecutor)
    - validation : validate() y ValidationReport
    - composer   : compose() y ComposeResult
"""

from zonewm.layout.spec import (
    DisplaySelector,
    Region,
    ExplicitRegion,
    ZoneRegion,
    FractionRegion,
    InsetRegion,
    Slot,
    LayoutSpec,
)
from zonewm.layout.model import Layout
from zonewm.layout.validation import ValidationReport, validate
from zonewm.layout.composer import ComposeResult, compose, select_display

__all__ = [
    "DisplaySelector",
    "Region",
    "ExplicitRegion",
    "ZoneRegion",
    "FractionRegion",
    "InsetRegion",
    "Slot",
    "LayoutSpec",
    "Layout",
    "ValidationReport",
    "validate",
    "ComposeResult",
    "compose",
    "select_display",
]
