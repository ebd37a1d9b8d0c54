"""
zonewm.geometry.rect - Estructura geometrica Rect.

Define un rectangulo inmutable que representa la posicion y el tamano
de una ventana (o de un area de pantalla) en el escritorio virtual
compartido por todos los monitores.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Todas las coordenadas estan en pixeles del escritorio virtual. El
    origen (0, 0) es la esquina superior-izquierda del monitor primario,
    por lo que x e y pueden ser negativos en monitores secundarios.

    La igualdad es estructural (dataclass), asi que dos Rect con las
    mismas coordenadas son intercambiables.

    Atributos:
        x: Coordenada horizontal de la esquina superior-izquierda.
        y: Coordenada vertical de la esquina superior-izquierda.
        w: Ancho en pixeles (siempre > 0).
        h: Alto en pixeles (siempre > 0).

    Raises:
        ValueError: Si w o h no son positivos.
    """

    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0:
            raise ValueError(
                f"Rect requiere dimensiones positivas, recibido {self.w}x{self.h}"
            )

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def area(self) -> int:
        return self.w * self.h

    # ------------------------------------------------------------------
    # Operaciones geometricas
    # ------------------------------------------------------------------
    def overlaps(self, other: Rect) -> bool:
        """
        True si los dos rectangulos comparten area.

        Los bordes que solo se tocan (a.right == b.x) no cuentan como
        solapamiento: dos ventanas contiguas son validas.
        """
        return not (
            self.right <= other.x
            or other.right <= self.x
            or self.bottom <= other.y
            or other.bottom <= self.y
        )

    def contains(self, other: Rect) -> bool:
        """True si *other* cabe completamente dentro de este rectangulo."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def move_to(self, x: int | None = None, y: int | None = None) -> Rect:
        """Retorna una copia trasladada; el tamano no cambia nunca."""
        return Rect(
            self.x if x is None else x,
            self.y if y is None else y,
            self.w,
            self.h,
        )

    def slice_rows(self, count: int) -> list[Rect]:
        """
        Divide el rectangulo en *count* filas.

        Cada fila mide floor(h / count); la ultima absorbe los pixeles
        sobrantes para que no queden huecos.

        Args:
            count: Numero de filas.

        Returns:
            Lista de Rect, de arriba hacia abajo.
        """
        if count <= 0:
            return []
        if count == 1:
            return [self]

        base_h = self.h // count
        rects: list[Rect] = []
        y = self.y

        for i in range(count):
            # La ultima fila absorbe los pixeles sobrantes
            h = base_h if i < count - 1 else self.h - (y - self.y)
            rects.append(Rect(self.x, y, self.w, h))
            y += h

        return rects

    def slice_columns(self, count: int) -> list[Rect]:
        """
        Divide el rectangulo en *count* columnas.

        Args:
            count: Numero de columnas.

        Returns:
            Lista de Rect, de izquierda a derecha.
        """
        if count <= 0:
            return []
        if count == 1:
            return [self]

        base_w = self.w // count
        rects: list[Rect] = []
        x = self.x

        for i in range(count):
            w = base_w if i < count - 1 else self.w - (x - self.x)
            rects.append(Rect(x, self.y, w, self.h))
            x += w

        return rects

    # ------------------------------------------------------------------
    # Conversion (left, top, right, bottom)
    # ------------------------------------------------------------------
    def to_ltrb(self) -> tuple[int, int, int, int]:
        """Retorna (left, top, right, bottom)."""
        return (self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        """Crea un Rect desde coordenadas (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def bounding(cls, rects: Iterable[Rect]) -> Rect:
        """
        Rectangulo minimo que contiene a todos los de *rects*.

        Raises:
            ValueError: Si *rects* esta vacio.
        """
        rects = list(rects)
        if not rects:
            raise ValueError("bounding() requiere al menos un Rect")
        return cls.from_ltrb(
            min(r.left for r in rects),
            min(r.top for r in rects),
            max(r.right for r in rects),
            max(r.bottom for r in rects),
        )

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.w}x{self.h}+{self.x}+{self.y})"
