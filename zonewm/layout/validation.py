"""
zonewm.layout.validation - Validacion de un layout terminado.

Pasada de solo lectura: lista los pares de ventanas que se solapan (con
el mismo predicado que usa el resolvedor) y las ventanas por debajo del
tamano minimo viable. No corrige nada; el llamador decide si aplica el
layout igualmente, reintenta con otros parametros o lo descarta.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zonewm.config.settings import DEFAULT_CONFIG, LayoutConfig
from zonewm.geometry.overlap import find_overlaps
from zonewm.layout.model import Layout

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """
    Resultado de validate().

    Atributos:
        overlaps:   Pares (app_id_a, app_id_b) solapados, a antes que b.
        undersized: app_ids por debajo del tamano minimo.
        sizes:      Pares (app_id, (w, h)) de cada ventana en undersized.
    """

    overlaps: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    undersized: tuple[str, ...] = field(default_factory=tuple)
    sizes: tuple[tuple[str, tuple[int, int]], ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        """True si no hay solapamientos ni ventanas demasiado pequenas."""
        return not self.overlaps and not self.undersized

    @property
    def issues(self) -> list[str]:
        """Descripcion legible de cada problema."""
        lines = [f"Overlap detected: {a} and {b}" for a, b in self.overlaps]
        sizes = dict(self.sizes)
        for app_id in self.undersized:
            w, h = sizes.get(app_id, (0, 0))
            lines.append(f"Window too small: {app_id} ({w}x{h})")
        return lines


def validate(
    layout: Layout,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> ValidationReport:
    """
    Valida *layout* contra el predicado de solapamiento y el tamano minimo.

    Args:
        layout: Layout a validar.
        config: Fuente de min_width / min_height.

    Returns:
        ValidationReport; valid es True si ambas listas estan vacias.
    """
    overlaps = find_overlaps(layout.assignments)

    undersized: list[str] = []
    sizes: list[tuple[str, tuple[int, int]]] = []
    min_w, min_h = config.min_size
    for a in layout.assignments:
        if a.rect.w < min_w or a.rect.h < min_h:
            undersized.append(a.app_id)
            sizes.append((a.app_id, (a.rect.w, a.rect.h)))

    report = ValidationReport(
        overlaps=tuple(overlaps),
        undersized=tuple(undersized),
        sizes=tuple(sizes),
    )

    if report.valid:
        log.debug("Layout %r valido (%d ventanas)", layout.name, len(layout))
    else:
        for issue in report.issues:
            log.warning("Layout %r: %s", layout.name, issue)
    return report
