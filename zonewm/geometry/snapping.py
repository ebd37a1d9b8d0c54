"""
zonewm.geometry.snapping - Alineacion de bordes (edge snapping).

snap() traslada un rectangulo para pegar sus bordes a los bordes cercanos
del monitor o de otras ventanas, si estan a menos de *tolerance* pixeles.
Nunca cambia el tamano, solo la posicion, y nunca corrige solapamientos:
eso lo hace el resolvedor de overlap despues de alinear todo el layout.

Cada eje (x, y) se alinea de forma independiente. Los objetivos se
prueban en este orden y el primero que coincide gana:

    1. Bordes del monitor (izquierdo/superior utilizable, luego
       derecho/inferior).
    2. Bordes de ventanas hermanas (solo si no hubo snap al monitor), en
       el orden en que se pasan: pegado al borde derecho/inferior de la
       hermana, luego pegado a su borde izquierdo/superior.

El resultado de una alineacion puede quedar a su vez dentro de la
tolerancia de un objetivo de mayor prioridad; por eso cada eje se
realinea hasta que deja de moverse. Asi snap() es idempotente:
snap(snap(r)) == snap(r).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from zonewm.config.settings import DEFAULT_SNAP_TOLERANCE
from zonewm.geometry.assignment import WindowAssignment
from zonewm.geometry.rect import Rect
from zonewm.geometry.topology import Display

log = logging.getLogger(__name__)


def _snap_axis(
    start: int,
    size: int,
    targets: Sequence[tuple[int, int]],
    tolerance: int,
) -> int:
    """
    Alinea una coordenada en un eje.

    Args:
        start:     Coordenada inicial (x o y) del rectangulo.
        size:      Tamano en ese eje (w o h).
        targets:   Pares (borde_objetivo, lado) en orden de prioridad.
                   lado 0 compara el borde inicial del rectangulo, lado 1
                   compara el borde final.
        tolerance: Distancia maxima (exclusiva) para alinear.

    Returns:
        Nueva coordenada inicial.
    """
    # Cada regla que gana sigue coincidiendo (distancia 0) en la pasada
    # siguiente, asi que el indice ganador nunca sube: como mucho
    # len(targets) + 1 pasadas.
    for _ in range(len(targets) + 1):
        new_start = start
        for edge, side in targets:
            if side == 0 and abs(start - edge) < tolerance:
                new_start = edge
                break
            if side == 1 and abs(start + size - edge) < tolerance:
                new_start = edge - size
                break
        if new_start == start:
            break
        start = new_start
    return start


def _axis_targets(
    near: int,
    far: int,
    siblings: Sequence[Rect],
    horizontal: bool,
) -> list[tuple[int, int]]:
    """Objetivos de un eje: monitor primero, luego hermanas en orden."""
    targets: list[tuple[int, int]] = [(near, 0), (far, 1)]
    for s in siblings:
        if horizontal:
            targets.append((s.right, 0))
            targets.append((s.x, 1))
        else:
            targets.append((s.bottom, 0))
            targets.append((s.y, 1))
    return targets


def snap(
    rect: Rect,
    siblings: Sequence[WindowAssignment],
    display: Display,
    tolerance: int = DEFAULT_SNAP_TOLERANCE,
    owner: Optional[str] = None,
) -> Rect:
    """
    Alinea *rect* a los bordes del monitor y de las ventanas hermanas.

    Args:
        rect:      Rectangulo candidato.
        siblings:  Ventanas ya colocadas en el mismo monitor.
        display:   Monitor duenio del rectangulo.
        tolerance: Distancia de snapping; <= 0 desactiva el snapping.
        owner:     app_id de la ventana que se alinea; las hermanas con
                   el mismo app_id se ignoran.

    Returns:
        Un Rect con el mismo tamano, posiblemente trasladado.
    """
    if tolerance <= 0:
        return rect

    others = [s.rect for s in siblings if owner is None or s.app_id != owner]

    x = _snap_axis(
        rect.x,
        rect.w,
        _axis_targets(display.x, display.right, others, horizontal=True),
        tolerance,
    )
    y = _snap_axis(
        rect.y,
        rect.h,
        _axis_targets(display.usable_top, display.bottom, others, horizontal=False),
        tolerance,
    )

    if x == rect.x and y == rect.y:
        return rect

    snapped = rect.move_to(x, y)
    log.debug("SNAP %s: %s -> %s", owner or "?", rect, snapped)
    return snapped
