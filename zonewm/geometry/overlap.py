"""
zonewm.geometry.overlap - Deteccion y resolucion de solapamientos.

El resolvedor recorre los pares (i, j) con i < j en el orden de entrada.
Si se solapan, el rectangulo i queda fijo ("el primero gana") y j se
recoloca junto a i, probando en este orden la primera posicion que cabe
dentro de los limites utiles del monitor de j:

    1. A la derecha de i   (j.x = i.right)
    2. Debajo de i         (j.y = i.bottom)
    3. A la izquierda de i (j.x = i.x - j.w)
    4. Encima de i         (j.y = i.y - j.h)

Si ninguna cabe, j no se toca y el par queda como solapamiento residual.
El resolvedor nunca falla: reporta lo que no pudo resolver.

Una pasada simple no es transitiva (mover j puede crear un solapamiento
con un k ya visitado), asi que resolve_overlaps() repite la pasada hasta
que no quedan solapamientos, hasta que una pasada no mueve nada, o hasta
agotar max_passes; en los dos ultimos casos reporta converged=False.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from zonewm.config.settings import DEFAULT_MAX_RESOLVE_PASSES
from zonewm.geometry.assignment import WindowAssignment
from zonewm.geometry.rect import Rect
from zonewm.geometry.topology import Display

log = logging.getLogger(__name__)


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Predicado de solapamiento; bordes que solo se tocan no cuentan."""
    return a.overlaps(b)


def find_overlaps(assignments: Sequence[WindowAssignment]) -> list[tuple[str, str]]:
    """
    Todos los pares (app_id_a, app_id_b) que se solapan, con a antes de b
    en el orden de entrada.
    """
    pairs: list[tuple[str, str]] = []
    for i, a in enumerate(assignments):
        for b in assignments[i + 1:]:
            if rects_overlap(a.rect, b.rect):
                pairs.append((a.app_id, b.app_id))
    return pairs


def relocate(moving: Rect, fixed: Rect, display: Optional[Display]) -> Optional[Rect]:
    """
    Busca una posicion para *moving* pegada a *fixed* y sin solaparla.

    Args:
        moving:  Rectangulo a recolocar (conserva su tamano).
        fixed:   Rectangulo que no se mueve.
        display: Monitor de *moving*; si es None no se limita al monitor.

    Returns:
        El nuevo Rect, o None si ninguna de las cuatro posiciones cabe.
    """
    candidates = (
        ("derecha", moving.move_to(x=fixed.right), True),
        ("abajo", moving.move_to(y=fixed.bottom), False),
        ("izquierda", moving.move_to(x=fixed.x - moving.w), True),
        ("arriba", moving.move_to(y=fixed.y - moving.h), False),
    )
    for where, candidate, horizontal in candidates:
        if display is None or _fits(candidate, display, horizontal):
            log.debug("RELOCATE %s -> %s (%s de %s)", moving, candidate, where, fixed)
            return candidate
    return None


def _fits(rect: Rect, display: Display, horizontal: bool) -> bool:
    """True si *rect* cabe en el area util del monitor en el eje movido."""
    usable = display.usable
    if horizontal:
        return rect.x >= usable.x and rect.right <= usable.right
    return rect.y >= usable.y and rect.bottom <= usable.bottom


@dataclass(slots=True)
class ResolutionResult:
    """
    Resultado de resolve_overlaps().

    Atributos:
        assignments: Asignaciones resultantes, en el orden de entrada.
        unresolved:  Pares (app_id_a, app_id_b) que siguen solapados.
        passes:      Pasadas ejecutadas.
        converged:   True si no queda ningun solapamiento.
        moved:       app_ids cuyo rectangulo cambio.
    """

    assignments: list[WindowAssignment]
    unresolved: list[tuple[str, str]] = field(default_factory=list)
    passes: int = 0
    converged: bool = True
    moved: list[str] = field(default_factory=list)


def resolve_pass(
    assignments: Sequence[WindowAssignment],
    displays: Mapping[str, Display],
) -> tuple[list[WindowAssignment], list[str]]:
    """
    Una pasada del resolvedor: cada par (i, j) con i < j se evalua una vez.

    Args:
        assignments: Asignaciones en el orden que decide quien gana.
        displays:    Monitores por id, para limitar las recolocaciones.

    Returns:
        Tupla (asignaciones nuevas, app_ids movidos en esta pasada).
    """
    resolved = list(assignments)
    moved: list[str] = []

    for i in range(len(resolved)):
        for j in range(i + 1, len(resolved)):
            fixed = resolved[i]
            moving = resolved[j]
            if not rects_overlap(fixed.rect, moving.rect):
                continue

            new_rect = relocate(
                moving.rect, fixed.rect, displays.get(moving.display_id)
            )
            if new_rect is None:
                log.debug(
                    "Sin posicion libre para %s junto a %s",
                    moving.app_id,
                    fixed.app_id,
                )
                continue

            resolved[j] = moving.with_rect(new_rect)
            if moving.app_id not in moved:
                moved.append(moving.app_id)

    return resolved, moved


def resolve_overlaps(
    assignments: Sequence[WindowAssignment],
    displays: Mapping[str, Display],
    max_passes: int = DEFAULT_MAX_RESOLVE_PASSES,
) -> ResolutionResult:
    """
    Elimina solapamientos donde sea geometricamente posible.

    La primera asignacion de cada par en conflicto nunca cambia; se ajusta
    la posterior. Repite resolve_pass() hasta un punto fijo acotado por
    *max_passes* (con max_passes=1 es el algoritmo de una sola pasada).

    Args:
        assignments: Asignaciones en orden de prioridad.
        displays:    Monitores por id.
        max_passes:  Limite de pasadas (>= 1).

    Returns:
        ResolutionResult con las asignaciones y los conflictos residuales.
    """
    current = list(assignments)
    result = ResolutionResult(assignments=current)

    if not find_overlaps(current):
        return result

    for n in range(1, max(1, max_passes) + 1):
        current, moved = resolve_pass(current, displays)
        result.passes = n
        for app_id in moved:
            if app_id not in result.moved:
                result.moved.append(app_id)
        if not moved or not find_overlaps(current):
            break

    result.assignments = current
    result.unresolved = find_overlaps(current)
    result.converged = not result.unresolved

    if result.converged:
        log.debug("Solapamientos resueltos en %d pasada(s)", result.passes)
    else:
        log.warning(
            "Solapamientos sin resolver tras %d pasada(s): %s",
            result.passes,
            ", ".join(f"{a}/{b}" for a, b in result.unresolved),
        )
    return result
