"""
zonewm.config.presets - Layouts predefinidos.

Cada preset es una funcion que recibe los app_ids de las aplicaciones y
retorna un LayoutSpec. Los monitores laterales son opcionales: si no
existen, sus slots se omiten (o usan su fallback).

    professional_coding:
        +-----------------+---------+      +-------------+
        |                 | browser |      |             |
        |     editor      +---------+      |  assistant  |
        |   (3/5 cols)    | terminal|      |             |
        +-----------------+---------+      +-------------+
                  main                         right

    multi_monitor:
        +---------+  +-------------------+  +-----------+
        | browser |  |                   |  |           |
        +---------+  |      editor       |  | assistant |
        | terminal|  |                   |  |           |
        +---------+  +-------------------+  +-----------+
           left              main               right

    coding_pro: como professional_coding pero con un reparto 60/40
    fraccional; sin monitor derecho, el asistente va a una ventana
    400x600 en el principal.
"""

from __future__ import annotations

from collections.abc import Callable

from zonewm.layout.spec import (
    DisplaySelector,
    ExplicitRegion,
    FractionRegion,
    InsetRegion,
    LayoutSpec,
    Slot,
    ZoneRegion,
)

# App ids por defecto
EDITOR = "Visual Studio Code"
BROWSER = "Safari"
TERMINAL = "iTerm"
ASSISTANT = "Claude"

PresetFactory = Callable[..., LayoutSpec]


def professional_coding(
    editor: str = EDITOR,
    browser: str = BROWSER,
    terminal: str = TERMINAL,
    assistant: str = ASSISTANT,
) -> LayoutSpec:
    """Rejilla 2x5 en el principal; asistente en el monitor derecho."""
    return LayoutSpec(
        name="Professional Non-Overlapping Coding",
        slots=(
            Slot(editor, ZoneRegion(rows=2, cols=5, row=0, col=0, row_span=2, col_span=3)),
            Slot(browser, ZoneRegion(rows=2, cols=5, row=0, col=3, col_span=2)),
            Slot(terminal, ZoneRegion(rows=2, cols=5, row=1, col=3, col_span=2)),
            Slot(assistant, InsetRegion.uniform(50), DisplaySelector.RIGHT),
        ),
    )


def multi_monitor(
    editor: str = EDITOR,
    browser: str = BROWSER,
    terminal: str = TERMINAL,
    assistant: str = ASSISTANT,
) -> LayoutSpec:
    """Editor a pantalla completa; navegador y terminal a la izquierda."""
    return LayoutSpec(
        name="Ultimate Multi-Monitor Non-Overlapping",
        slots=(
            Slot(editor, FractionRegion(0.0, 0.0, 1.0, 1.0)),
            Slot(browser, ZoneRegion(rows=2, cols=1, row=0), DisplaySelector.LEFT),
            Slot(terminal, ZoneRegion(rows=2, cols=1, row=1), DisplaySelector.LEFT),
            Slot(assistant, InsetRegion.uniform(25), DisplaySelector.RIGHT),
        ),
    )


def coding_pro(
    editor: str = EDITOR,
    browser: str = BROWSER,
    terminal: str = TERMINAL,
    assistant: str = ASSISTANT,
) -> LayoutSpec:
    """Reparto 60/40 en el principal; asistente a la derecha o flotante."""
    return LayoutSpec(
        name="Coding Pro",
        slots=(
            Slot(editor, FractionRegion(0.0, 0.0, 0.6, 1.0)),
            Slot(browser, FractionRegion(0.6, 0.0, 0.4, 0.5)),
            Slot(terminal, FractionRegion(0.6, 0.5, 0.4, 0.5)),
            Slot(
                assistant,
                InsetRegion.uniform(50),
                DisplaySelector.RIGHT,
                fallback=Slot(assistant, ExplicitRegion(100, 100, 400, 600)),
            ),
        ),
    )


PRESETS: dict[str, PresetFactory] = {
    "professional_coding": professional_coding,
    "multi_monitor": multi_monitor,
    "coding_pro": coding_pro,
}


def get_preset(name: str, **app_ids: str) -> LayoutSpec:
    """
    Construye el preset *name*.

    Raises:
        KeyError: Si no existe, con la lista de presets disponibles.
    """
    try:
        factory = PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Preset desconocido {name!r}; disponibles: {', '.join(sorted(PRESETS))}"
        ) from None
    return factory(**app_ids)
