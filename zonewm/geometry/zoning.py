"""
zonewm.geometry.zoning - Particion de un monitor en una rejilla de zonas.

zones(display, rows, cols) divide el area utilizable del monitor en
rows*cols zonas indexadas por fila (row-major). El ancho de cada zona es
floor(ancho / cols) y el alto floor(alto / rows); el resto de la division
no se reparte: la ultima columna y la ultima fila lo absorben. Asi la
rejilla cubre el area exactamente, sin pixeles muertos, aunque las zonas
no sean todas iguales.

Esquema (rows=2, cols=3):
    +--------+--------+----------+
    | 0_0    | 0_1    | 0_2      |
    +--------+--------+----------+
    | 1_0    | 1_1    | 1_2      |
    |        |        | (+resto) |
    +--------+--------+----------+
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from zonewm.core.errors import InvalidGridSpec
from zonewm.geometry.rect import Rect
from zonewm.geometry.topology import Display


@dataclass(frozen=True, slots=True)
class Zone:
    """
    Una celda de la rejilla.

    Atributos:
        rect: Area de la zona en coordenadas del escritorio.
        row:  Fila (0 = arriba).
        col:  Columna (0 = izquierda).
    """

    rect: Rect
    row: int
    col: int

    @property
    def id(self) -> str:
        """Identificador de diagnostico, p.ej. 'zone_0_3'."""
        return f"zone_{self.row}_{self.col}"

    @property
    def x(self) -> int:
        return self.rect.x

    @property
    def y(self) -> int:
        return self.rect.y

    @property
    def w(self) -> int:
        return self.rect.w

    @property
    def h(self) -> int:
        return self.rect.h


def zones(display: Display, rows: int, cols: int) -> list[Zone]:
    """
    Calcula las zonas de una rejilla rows x cols sobre *display*.

    Args:
        display: Monitor cuya area utilizable se divide.
        rows:    Numero de filas (>= 1).
        cols:    Numero de columnas (>= 1).

    Returns:
        Lista de rows*cols Zone en orden row-major: el indice de la zona
        (row, col) es row * cols + col.

    Raises:
        InvalidGridSpec: Si rows o cols son menores que 1, o si el area
                         no alcanza un pixel por celda.
    """
    if rows < 1 or cols < 1:
        raise InvalidGridSpec(f"Rejilla invalida {rows}x{cols}: rows y cols deben ser >= 1")

    usable = display.usable
    if usable.w < cols or usable.h < rows:
        raise InvalidGridSpec(
            f"Rejilla {rows}x{cols} demasiado fina para {usable} en {display.id}"
        )

    result: list[Zone] = []
    for row, band in enumerate(usable.slice_rows(rows)):
        for col, cell in enumerate(band.slice_columns(cols)):
            result.append(Zone(rect=cell, row=row, col=col))
    return result


def zone_at(grid: Sequence[Zone], cols: int, row: int, col: int) -> Zone:
    """
    Zona (row, col) de una rejilla producida por zones().

    Raises:
        InvalidGridSpec: Si (row, col) cae fuera de la rejilla.
    """
    rows = len(grid) // cols if cols > 0 else 0
    if not (0 <= row < rows and 0 <= col < cols):
        raise InvalidGridSpec(f"Zona ({row}, {col}) fuera de la rejilla {rows}x{cols}")
    return grid[row * cols + col]


def union_zones(selected: Sequence[Zone]) -> Rect:
    """
    Une un bloque rectangular contiguo de zonas en un solo Rect.

    Se usa para dar a una ventana varias celdas (p.ej. 3 de 5 columnas).
    Solo es valida para rangos alineados a los ejes y sin huecos: el
    conjunto de (row, col) debe ser exactamente un rectangulo completo.

    Raises:
        InvalidGridSpec: Si no hay zonas, o no forman un bloque contiguo.
    """
    if not selected:
        raise InvalidGridSpec("union_zones() requiere al menos una zona")

    cells = {(z.row, z.col) for z in selected}
    rows = sorted({r for r, _ in cells})
    cols = sorted({c for _, c in cells})
    contiguous = (
        rows == list(range(rows[0], rows[-1] + 1))
        and cols == list(range(cols[0], cols[-1] + 1))
        and len(cells) == len(rows) * len(cols)
        and len(cells) == len(selected)
    )
    if not contiguous:
        ids = ", ".join(z.id for z in selected)
        raise InvalidGridSpec(f"Las zonas no forman un bloque contiguo: {ids}")

    return Rect.bounding(z.rect for z in selected)


def zone_span(
    display: Display,
    rows: int,
    cols: int,
    row: int,
    col: int,
    row_span: int = 1,
    col_span: int = 1,
) -> Rect:
    """
    Atajo: rectangulo de las zonas [row, row+row_span) x [col, col+col_span).

    Raises:
        InvalidGridSpec: Si la rejilla o el rango son invalidos.
    """
    if row_span < 1 or col_span < 1:
        raise InvalidGridSpec(f"Span invalido {row_span}x{col_span}")

    grid = zones(display, rows, cols)
    selected = [
        zone_at(grid, cols, r, c)
        for r in range(row, row + row_span)
        for c in range(col, col + col_span)
    ]
    return union_zones(selected)
