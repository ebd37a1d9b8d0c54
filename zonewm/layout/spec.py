"""
zonewm.layout.spec - Descripcion declarativa de un layout.

Un LayoutSpec es un nombre mas una lista ordenada de slots. Cada slot
dice que aplicacion va en que monitor y en que region de ese monitor.
El orden de los slots importa: es el orden de prioridad del resolvedor
de solapamientos (el primero gana) y el orden de aplicacion.

Regiones disponibles (todas implementan la interfaz `Region`):
    - ExplicitRegion : Rectangulo fijo, relativo al origen del monitor
    - ZoneRegion     : Una zona (o bloque de zonas) de una rejilla
    - FractionRegion : Fracciones del area utilizable
    - InsetRegion    : Area utilizable menos margenes
"""

from __future__ import annotations

import abc
import enum
import math
from dataclasses import dataclass, field
from typing import Optional

from zonewm.core.errors import InvalidLayoutSpec, InvalidRegion
from zonewm.geometry.rect import Rect
from zonewm.geometry.topology import Display
from zonewm.geometry.zoning import zone_span


# ============================================================================
# DisplaySelector enum
# ============================================================================
class DisplaySelector(enum.Enum):
    """Monitor destino de un slot, relativo al monitor principal."""
    MAIN = "main"
    LEFT = "left"
    RIGHT = "right"


# ============================================================================
# Region (clase base abstracta)
# ============================================================================
class Region(abc.ABC):
    """
    Interfaz abstracta para una region de un monitor.

    Una region sabe calcular su rectangulo en coordenadas del escritorio
    a partir del monitor elegido para el slot.
    """

    @abc.abstractmethod
    def resolve(self, display: Display) -> Rect:
        """
        Calcula el rectangulo de la region en *display*.

        Raises:
            InvalidRegion:   Si el rectangulo resultante seria vacio.
            InvalidGridSpec: (ZoneRegion) si la rejilla es invalida.
        """
        ...


def _make_rect(x: int, y: int, w: int, h: int, what: Region) -> Rect:
    if w <= 0 or h <= 0:
        raise InvalidRegion(f"{what!r} produce un rectangulo vacio ({w}x{h})")
    return Rect(x, y, w, h)


@dataclass(frozen=True, slots=True)
class ExplicitRegion(Region):
    """
    Rectangulo fijo.

    Por defecto (x, y) es relativo al origen del monitor (no al area
    utilizable); con absolute=True son coordenadas del escritorio.
    """

    x: int
    y: int
    w: int
    h: int
    absolute: bool = False

    def resolve(self, display: Display) -> Rect:
        if self.absolute:
            return _make_rect(self.x, self.y, self.w, self.h, self)
        return _make_rect(display.x + self.x, display.y + self.y, self.w, self.h, self)


@dataclass(frozen=True, slots=True)
class ZoneRegion(Region):
    """
    Zona (row, col) de una rejilla rows x cols, opcionalmente extendida
    a un bloque de row_span x col_span zonas contiguas.

    Ejemplo: en una rejilla 2x5, ZoneRegion(2, 5, 0, 0, row_span=2,
    col_span=3) ocupa las tres primeras columnas a todo lo alto.
    """

    rows: int
    cols: int
    row: int = 0
    col: int = 0
    row_span: int = 1
    col_span: int = 1

    def resolve(self, display: Display) -> Rect:
        return zone_span(
            display,
            self.rows,
            self.cols,
            self.row,
            self.col,
            self.row_span,
            self.col_span,
        )


@dataclass(frozen=True, slots=True)
class FractionRegion(Region):
    """
    Region expresada en fracciones del area utilizable.

    x e y estan en [0, 1), w y h en (0, 1]. Las posiciones y tamanos se
    redondean hacia abajo: FractionRegion(0, 0, 0.6, 1) en un monitor de
    1920 de ancho da 1152 px.
    """

    x: float
    y: float
    w: float
    h: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x < 1.0 and 0.0 <= self.y < 1.0):
            raise InvalidRegion(f"Origen fraccional fuera de [0, 1): {self!r}")
        if not (0.0 < self.w <= 1.0 and 0.0 < self.h <= 1.0):
            raise InvalidRegion(f"Tamano fraccional fuera de (0, 1]: {self!r}")

    def resolve(self, display: Display) -> Rect:
        area = display.usable
        x = area.x + math.floor(area.w * self.x)
        y = area.y + math.floor(area.h * self.y)
        w = min(math.floor(area.w * self.w), area.right - x)
        h = min(math.floor(area.h * self.h), area.bottom - y)
        return _make_rect(x, y, w, h, self)


@dataclass(frozen=True, slots=True)
class InsetRegion(Region):
    """Area utilizable reducida por margenes en cada lado."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def uniform(cls, margin: int) -> InsetRegion:
        return cls(margin, margin, margin, margin)

    def resolve(self, display: Display) -> Rect:
        area = display.usable
        return _make_rect(
            area.x + self.left,
            area.y + self.top,
            area.w - self.left - self.right,
            area.h - self.top - self.bottom,
            self,
        )


# ============================================================================
# Slot / LayoutSpec
# ============================================================================
@dataclass(frozen=True, slots=True)
class Slot:
    """
    Una ventana a colocar.

    Atributos:
        app_id:   Identificador opaco de la aplicacion.
        region:   Donde va la ventana dentro del monitor.
        display:  Monitor destino (main / left / right).
        fallback: Slot alternativo si *display* no existe en la topologia.
                  Debe tener el mismo app_id.
    """

    app_id: str
    region: Region
    display: DisplaySelector = DisplaySelector.MAIN
    fallback: Optional[Slot] = None

    def __post_init__(self) -> None:
        if self.fallback is not None and self.fallback.app_id != self.app_id:
            raise InvalidLayoutSpec(
                f"El fallback de {self.app_id!r} es para {self.fallback.app_id!r}"
            )


@dataclass(frozen=True, slots=True)
class LayoutSpec:
    """
    Layout con nombre: lista ordenada de slots, un slot por app_id.

    Raises:
        InvalidLayoutSpec: Si un app_id aparece en mas de un slot.
    """

    name: str
    slots: tuple[Slot, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", tuple(self.slots))
        seen: set[str] = set()
        for slot in self.slots:
            if slot.app_id in seen:
                raise InvalidLayoutSpec(
                    f"app_id duplicado en el layout {self.name!r}: {slot.app_id!r}"
                )
            seen.add(slot.app_id)

    @property
    def app_ids(self) -> list[str]:
        return [s.app_id for s in self.slots]
