"""
zonewm.geometry.topology - Modelo de la topologia de monitores.

Normaliza la lista cruda de monitores que entrega un enumerador
(win32, displayplacer, o datos de prueba) en una instantanea inmutable
con un orden de iteracion definido:

    1. El monitor primario primero.
    2. El resto por x de origen ascendente (empate: y, luego id).

Este orden es parte del contrato: "main" es siempre el primero, y las
consultas display_left_of / display_right_of lo usan para desempatar.

La topologia se reconstruye en cada peticion de layout; no se cachea
porque los monitores pueden conectarse y desconectarse en cualquier
momento.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from zonewm.core.errors import EmptyTopology, InvalidTopology
from zonewm.geometry.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Display
# ============================================================================
@dataclass(frozen=True, slots=True)
class Display:
    """
    Representa un monitor fisico dentro del escritorio virtual.

    Atributos:
        id:           Identificador unico del monitor.
        bounds:       Area total del monitor (origen + resolucion).
        is_primary:   True si es el monitor principal.
        reserved_top: Pixeles ocupados arriba por chrome persistente
                      (barra de menu) que no estan disponibles.
    """

    id: str
    bounds: Rect
    is_primary: bool = False
    reserved_top: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.reserved_top < self.bounds.h:
            raise InvalidTopology(
                f"reserved_top={self.reserved_top} fuera de rango para el "
                f"monitor {self.id!r} de alto {self.bounds.h}"
            )

    @property
    def x(self) -> int:
        return self.bounds.x

    @property
    def y(self) -> int:
        return self.bounds.y

    @property
    def width(self) -> int:
        return self.bounds.w

    @property
    def height(self) -> int:
        return self.bounds.h

    @property
    def right(self) -> int:
        return self.bounds.right

    @property
    def bottom(self) -> int:
        return self.bounds.bottom

    @property
    def usable_top(self) -> int:
        """Primera coordenada y disponible (debajo de la barra de menu)."""
        return self.bounds.y + self.reserved_top

    @property
    def usable(self) -> Rect:
        """Area utilizable: los bounds menos reserved_top."""
        return Rect(
            self.bounds.x,
            self.usable_top,
            self.bounds.w,
            self.bounds.h - self.reserved_top,
        )

    def __str__(self) -> str:
        mark = " *" if self.is_primary else ""
        return f"Display({self.id} {self.bounds}{mark})"


DisplayRecord = Union[Display, Mapping[str, Any]]


# ============================================================================
# Normalizacion de registros crudos
# ============================================================================
def _pick(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Primer valor presente entre *keys* (acepta camelCase y snake_case)."""
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


_TRUE_WORDS = frozenset({"true", "yes", "1"})
_FALSE_WORDS = frozenset({"false", "no", "0", ""})


def _as_flag(value: Any, index: int) -> bool:
    """bool real, o texto true/yes/false/no. Cualquier otra cosa es invalida."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise InvalidTopology(f"Monitor #{index}: isPrimary invalido: {value!r}")


def display_from_record(record: DisplayRecord, index: int = 0) -> Display:
    """
    Convierte un registro crudo en un Display.

    El registro puede traer el origen y el tamano anidados
    (``{"origin": {"x", "y"}, "size": {"width", "height"}}``) o planos
    (``{"x", "y", "width", "height"}``). ``isPrimary`` es False si falta;
    ``reservedTop`` es 0 si falta; el id por defecto es ``display_<index>``.

    Raises:
        InvalidTopology: Si falta el origen o el tamano, si origen, tamano
                         o reservedTop no son enteros validos, o si
                         isPrimary no es un booleano.
    """
    if isinstance(record, Display):
        return record

    origin = _pick(record, "origin", default=record)
    size = _pick(record, "size", "resolution", default=record)

    try:
        x = int(origin["x"])
        y = int(origin["y"])
        width = int(_pick(size, "width", "w"))
        height = int(_pick(size, "height", "h"))
        reserved_top = int(_pick(record, "reservedTop", "reserved_top", default=0))
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTopology(
            f"Registro de monitor #{index} sin origen/tamano validos: {record!r}"
        ) from exc

    try:
        bounds = Rect(x, y, width, height)
    except ValueError as exc:
        raise InvalidTopology(f"Monitor #{index}: {exc}") from exc

    return Display(
        id=str(_pick(record, "id", default=f"display_{index}")),
        bounds=bounds,
        is_primary=_as_flag(
            _pick(record, "isPrimary", "is_primary", "isMain", default=False), index
        ),
        reserved_top=reserved_top,
    )


# ============================================================================
# DisplayTopology
# ============================================================================
class DisplayTopology:
    """
    Instantanea inmutable de los monitores conectados.

    Se construye con build_topology(); iterarla recorre los monitores en
    el orden documentado (primario primero, luego por x ascendente).
    """

    __slots__ = ("_displays", "_by_id")

    def __init__(self, displays: Iterable[Display]) -> None:
        ordered = sorted(
            displays,
            key=lambda d: (not d.is_primary, d.x, d.y, d.id),
        )
        if not ordered:
            raise EmptyTopology()

        self._displays: tuple[Display, ...] = tuple(ordered)
        self._by_id: dict[str, Display] = {}
        for d in self._displays:
            if d.id in self._by_id:
                raise InvalidTopology(f"Id de monitor duplicado: {d.id!r}")
            self._by_id[d.id] = d

        if sum(1 for d in self._displays if d.is_primary) > 1:
            raise InvalidTopology("Hay mas de un monitor primario")

    # ------------------------------------------------------------------
    # Acceso
    # ------------------------------------------------------------------
    @property
    def displays(self) -> tuple[Display, ...]:
        return self._displays

    @property
    def main(self) -> Display:
        """El monitor primario, o el primero del orden si no hay primario."""
        return self._displays[0]

    def __getitem__(self, display_id: str) -> Display:
        return self._by_id[display_id]

    def __iter__(self) -> Iterator[Display]:
        return iter(self._displays)

    def __len__(self) -> int:
        return len(self._displays)

    def __contains__(self, display_id: object) -> bool:
        return display_id in self._by_id

    # ------------------------------------------------------------------
    # Consultas direccionales
    # ------------------------------------------------------------------
    def display_left_of(self, display: Display) -> Optional[Display]:
        """
        El monitor inmediatamente a la izquierda de *display*.

        Entre los monitores con x < display.x cuyo borde derecho es
        <= display.x, elige el de borde derecho mas cercano. En empate
        gana el primero en el orden de la topologia.

        Returns:
            El Display encontrado, o None si no hay ninguno.
        """
        best: Optional[Display] = None
        for d in self._displays:
            if d.id == display.id or d.x >= display.x:
                continue
            if d.right > display.x:
                continue
            if best is None or d.right > best.right:
                best = d
        return best

    def display_right_of(self, display: Display) -> Optional[Display]:
        """
        El monitor inmediatamente a la derecha de *display*.

        Simetrico a display_left_of: entre los monitores con
        x >= display.right, elige el de borde izquierdo mas cercano.
        """
        best: Optional[Display] = None
        for d in self._displays:
            if d.id == display.id or d.x <= display.x:
                continue
            if d.x < display.right:
                continue
            if best is None or d.x < best.x:
                best = d
        return best

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def dump_state(self) -> str:
        lines = [f"=== DisplayTopology: {len(self._displays)} monitores ==="]
        for i, d in enumerate(self._displays):
            role = "main" if i == 0 else f"#{i}"
            lines.append(
                f"    [{role}] {d.id} | total={d.bounds} | util={d.usable}"
                f"{' | primario' if d.is_primary else ''}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DisplayTopology({', '.join(d.id for d in self._displays)})"


def build_topology(records: Iterable[DisplayRecord]) -> DisplayTopology:
    """
    Construye la topologia a partir de los registros del enumerador.

    Si varios registros dicen ser primarios, conserva el flag en el
    primero (en orden de entrada) y degrada al resto con un warning.

    Raises:
        EmptyTopology:   Si no hay registros.
        InvalidTopology: Si un registro es invalido o hay ids repetidos.
    """
    displays = [display_from_record(r, i) for i, r in enumerate(records)]
    if not displays:
        log.error("Topologia vacia: no hay monitores")
        raise EmptyTopology()

    seen_primary = False
    normalized: list[Display] = []
    for d in displays:
        if d.is_primary:
            if seen_primary:
                log.warning("Monitor %s degradado: ya hay un primario", d.id)
                d = Display(d.id, d.bounds, False, d.reserved_top)
            seen_primary = True
        normalized.append(d)

    topology = DisplayTopology(normalized)
    for d in topology:
        log.debug(
            "Monitor: %s | total=%s | util=%s | primario=%s",
            d.id,
            d.bounds,
            d.usable,
            d.is_primary,
        )
    log.info("Topologia: %d monitores, main=%s", len(topology), topology.main.id)
    return topology
