"""
zonewm.config.settings - Configuracion explicita del motor de layouts.

Los valores que antes eran constantes implicitas (tolerancia de snapping,
tamano minimo de ventana) viven aqui y se pasan a cada punto de entrada
(compose, resolve_overlaps, validate), para que el comportamiento sea
reproducible llamada a llamada.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


# Valores por defecto
DEFAULT_SNAP_TOLERANCE = 10
DEFAULT_MIN_WIDTH = 400
DEFAULT_MIN_HEIGHT = 300
DEFAULT_MAX_RESOLVE_PASSES = 8


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """
    Parametros de composicion de un layout.

    Atributos:
        snap_tolerance:     Distancia (px) por debajo de la cual un borde
                            se alinea con otro. <= 0 desactiva el snapping.
        min_width:          Ancho minimo viable de una ventana.
        min_height:         Alto minimo viable de una ventana.
        max_resolve_passes: Pasadas maximas del resolvedor de solapamientos
                            antes de reportar que no convergio.
    """

    snap_tolerance: int = DEFAULT_SNAP_TOLERANCE
    min_width: int = DEFAULT_MIN_WIDTH
    min_height: int = DEFAULT_MIN_HEIGHT
    max_resolve_passes: int = DEFAULT_MAX_RESOLVE_PASSES

    def __post_init__(self) -> None:
        if self.max_resolve_passes < 1:
            raise ValueError("max_resolve_passes debe ser >= 1")
        if self.min_width < 0 or self.min_height < 0:
            raise ValueError("El tamano minimo no puede ser negativo")

    @property
    def min_size(self) -> tuple[int, int]:
        return (self.min_width, self.min_height)

    def with_overrides(self, **changes: int) -> LayoutConfig:
        """Retorna una copia con los campos indicados reemplazados."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = LayoutConfig()
