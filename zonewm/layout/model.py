"""
zonewm.layout.model - Layout resultante.

Un Layout es lo unico que sale del motor: el nombre mas la lista de
asignaciones, en el orden en que deben aplicarse.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from zonewm.geometry.assignment import WindowAssignment


@dataclass(frozen=True, slots=True)
class Layout:
    """
    Conjunto con nombre de asignaciones app -> Rect.

    El invariante "sin solapamientos" no se impone al construirlo: lo
    comprueba validate() y lo reporta.
    """

    name: str
    assignments: tuple[WindowAssignment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "assignments", tuple(self.assignments))

    def get(self, app_id: str) -> Optional[WindowAssignment]:
        """Asignacion de *app_id*, o None."""
        for a in self.assignments:
            if a.app_id == app_id:
                return a
        return None

    def __iter__(self) -> Iterator[WindowAssignment]:
        return iter(self.assignments)

    def __len__(self) -> int:
        return len(self.assignments)
