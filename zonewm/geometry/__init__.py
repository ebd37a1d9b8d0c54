"""
zonewm.geometry - Motor geometrico de layouts.

Este paquete contiene:
    - rect       : Estructura Rect (posicion + tamano, inmutable)
    - assignment : WindowAssignment (app -> monitor -> Rect)
    - topology   : Display y DisplayTopology (monitores normalizados)
    - zoning     : Rejillas de zonas sobre el area utilizable
    - snapping   : Alineacion de bordes con tolerancia
    - overlap    : Deteccion y resolucion de solapamientos
"""

from zonewm.geometry.rect import Rect
from zonewm.geometry.assignment import WindowAssignment
from zonewm.geometry.topology import Display, DisplayTopology, build_topology
from zonewm.geometry.zoning import Zone, zones, union_zones, zone_span
from zonewm.geometry.snapping import snap
from zonewm.geometry.overlap import (
    ResolutionResult,
    find_overlaps,
    rects_overlap,
    resolve_overlaps,
    resolve_pass,
)

__all__ = [
    "Rect",
    "WindowAssignment",
    "Display",
    "DisplayTopology",
    "build_topology",
    "Zone",
    "zones",
    "union_zones",
    "zone_span",
    "snap",
    "ResolutionResult",
    "find_overlaps",
    "rects_overlap",
    "resolve_overlaps",
    "resolve_pass",
]
