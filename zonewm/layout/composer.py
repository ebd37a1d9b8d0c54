"""
zonewm.layout.composer - Composicion de layouts.

compose() es el punto de entrada del motor. Para un LayoutSpec y la
topologia actual:

    1. Resuelve el monitor de cada slot (main/left/right, con fallback)
       y su rectangulo crudo (rejilla, fracciones, margenes o explicito).
    2. Alinea cada rectangulo (snap) contra los ya colocados en el mismo
       monitor, en el orden de los slots.
    3. Resuelve solapamientos sobre el conjunto completo.
    4. Valida el resultado.

Los errores estructurales (topologia vacia, rejilla o region invalida)
abortan la composicion. Los problemas geometricos (solapamientos
residuales, ventanas pequenas) nunca la abortan: se devuelven en el
reporte junto con el Layout para que el llamador decida.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from zonewm.config.settings import DEFAULT_CONFIG, LayoutConfig
from zonewm.geometry.assignment import WindowAssignment
from zonewm.geometry.overlap import ResolutionResult, resolve_overlaps
from zonewm.geometry.snapping import snap
from zonewm.geometry.topology import (
    Display,
    DisplayRecord,
    DisplayTopology,
    build_topology,
)
from zonewm.layout.model import Layout
from zonewm.layout.spec import DisplaySelector, LayoutSpec, Slot
from zonewm.layout.validation import ValidationReport, validate

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ComposeResult:
    """
    Resultado de compose().

    Atributos:
        layout:     Layout final (siempre presente).
        report:     Reporte de validacion.
        resolution: Detalle del resolvedor (pasadas, convergencia).
        skipped:    app_ids cuyo monitor no existe en la topologia.
    """

    layout: Layout
    report: ValidationReport
    resolution: ResolutionResult
    skipped: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return self.report.valid

    def dump_state(self) -> str:
        """Resumen legible del layout y su reporte."""
        status = "OK" if self.report.valid else "CON PROBLEMAS"
        lines = [
            f"=== Layout: {self.layout.name} [{status}] ===",
            f"    Ventanas: {len(self.layout)}",
            f"    Pasadas de resolucion: {self.resolution.passes}"
            f" (convergio={self.resolution.converged})",
            "",
        ]
        for i, a in enumerate(self.layout):
            lines.append(f"    [{i}] {a.app_id:<24s} {a.display_id:<12s} {a.rect}")
        for app_id in self.skipped:
            lines.append(f"    [--] {app_id:<24s} (monitor no disponible)")
        for issue in self.report.issues:
            lines.append(f"    ! {issue}")
        return "\n".join(lines)


def select_display(
    topology: DisplayTopology,
    selector: DisplaySelector,
) -> Optional[Display]:
    """
    Resuelve un selector de monitor.

    MAIN es el primero de la topologia; LEFT y RIGHT son los vecinos
    directos del principal segun display_left_of / display_right_of.
    """
    main = topology.main
    if selector is DisplaySelector.MAIN:
        return main
    if selector is DisplaySelector.LEFT:
        return topology.display_left_of(main)
    return topology.display_right_of(main)


def _resolve_slot(
    topology: DisplayTopology,
    slot: Slot,
) -> Optional[WindowAssignment]:
    """Monitor + rectangulo crudo de un slot, siguiendo los fallbacks."""
    current: Optional[Slot] = slot
    while current is not None:
        display = select_display(topology, current.display)
        if display is not None:
            rect = current.region.resolve(display)
            log.debug(
                "SLOT %s -> %s %s (%r)",
                slot.app_id,
                display.id,
                rect,
                current.region,
            )
            return WindowAssignment(slot.app_id, display.id, rect)
        log.debug(
            "SLOT %s: no hay monitor %s",
            slot.app_id,
            current.display.value,
        )
        current = current.fallback
    return None


def compose(
    topology: Union[DisplayTopology, Iterable[DisplayRecord]],
    spec: LayoutSpec,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> ComposeResult:
    """
    Compone un layout a partir de la topologia y el spec.

    Args:
        topology: DisplayTopology, o los registros crudos del enumerador
                  (se normalizan con build_topology en cada llamada).
        spec:     Slots a colocar, en orden de prioridad.
        config:   Tolerancia de snapping, tamano minimo, limite de pasadas.

    Returns:
        ComposeResult con el Layout y el reporte de validacion.

    Raises:
        EmptyTopology:   Si no hay monitores.
        InvalidTopology: Si un registro de monitor es invalido.
        InvalidGridSpec: Si la rejilla de algun slot es invalida.
        InvalidRegion:   Si la region de algun slot es vacia.
    """
    if not isinstance(topology, DisplayTopology):
        topology = build_topology(topology)

    # 1 + 2. Resolver cada slot y alinearlo contra los ya colocados
    placed: list[WindowAssignment] = []
    skipped: list[str] = []
    for slot in spec.slots:
        raw = _resolve_slot(topology, slot)
        if raw is None:
            log.info("Layout %r: %s omitido, monitor no disponible", spec.name, slot.app_id)
            skipped.append(slot.app_id)
            continue

        display = topology[raw.display_id]
        siblings = [a for a in placed if a.display_id == display.id]
        snapped = snap(
            raw.rect,
            siblings,
            display,
            tolerance=config.snap_tolerance,
            owner=raw.app_id,
        )
        placed.append(raw.with_rect(snapped))

    # 3. Resolver solapamientos sobre el conjunto completo
    displays = {d.id: d for d in topology}
    resolution = resolve_overlaps(placed, displays, config.max_resolve_passes)

    # 4. Validar
    layout = Layout(name=spec.name, assignments=tuple(resolution.assignments))
    report = validate(layout, config)

    log.info(
        "Layout compuesto: %s | %d ventanas | %d omitidas | valido=%s",
        spec.name,
        len(layout),
        len(skipped),
        report.valid,
    )
    return ComposeResult(
        layout=layout,
        report=report,
        resolution=resolution,
        skipped=skipped,
    )
