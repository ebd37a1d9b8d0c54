"""
zonewm.geometry.assignment - Asignacion de un rectangulo a una ventana.
"""

from __future__ import annotations

from dataclasses import dataclass

from zonewm.geometry.rect import Rect


@dataclass(frozen=True, slots=True)
class WindowAssignment:
    """
    Liga un Rect a una ventana logica en un monitor.

    Atributos:
        app_id:     Identificador opaco de la aplicacion (unico por layout).
        display_id: Monitor al que pertenece la ventana.
        rect:       Posicion y tamano destino.
    """

    app_id: str
    display_id: str
    rect: Rect

    def with_rect(self, rect: Rect) -> WindowAssignment:
        """Copia con otro rectangulo."""
        return WindowAssignment(self.app_id, self.display_id, rect)

    def __str__(self) -> str:
        return f"{self.app_id}@{self.display_id} {self.rect}"
