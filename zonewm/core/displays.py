"""
zonewm.core.displays - Display enumerators.

Each enumerator returns plain display records (dicts) that
zonewm.geometry.topology.build_topology() normalizes.  The topology model
never talks to the OS itself; these functions are the only place that
does.

    - parse_displayplacer()    : macOS, text report of `displayplacer list`
    - enumerate_win32_displays(): Windows, via pywin32
"""

from __future__ import annotations

import logging
import re
from typing import Any

log = logging.getLogger(__name__)

# Default height of the macOS menu bar
MENU_BAR_HEIGHT = 25

_RESOLUTION_RE = re.compile(r"(\d+)x(\d+)")
_ORIGIN_RE = re.compile(r"\((-?\d+),\s*(-?\d+)\)")

DisplayDict = dict[str, Any]


# ============================================================================
# displayplacer
# ============================================================================
def parse_displayplacer(
    text: str,
    menu_bar_height: int = MENU_BAR_HEIGHT,
) -> list[DisplayDict]:
    """
    Parse the output of `displayplacer list` into display records.

    A new display starts at every ``Persistent screen id:`` line.  Within a
    block, ``Resolution: WxH``, ``Origin: (x,y)`` and ``Main Display: Yes``
    (or an origin line ending in ``- main display``) are recognised;
    everything else, including the list of available modes, is ignored.  Blocks that end up
    without an origin or resolution are dropped with a warning.

    Args:
        text:            Raw report text.
        menu_bar_height: Reserved top chrome applied to every display.

    Returns:
        List of records in report order.
    """
    displays: list[DisplayDict] = []
    current: DisplayDict = {}

    def _flush() -> None:
        if not current.get("id"):
            return
        if "origin" not in current or "size" not in current:
            log.warning("displayplacer: incomplete display block %s", current.get("id"))
            return
        current.setdefault("isPrimary", False)
        current["reservedTop"] = menu_bar_height
        displays.append(dict(current))

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("Persistent screen id:"):
            _flush()
            current = {"id": line.split(":", 1)[1].strip()}
        elif not current:
            continue
        elif line.startswith("Type:"):
            current["type"] = line.split(":", 1)[1].strip()
        elif line.startswith("Resolution:"):
            m = _RESOLUTION_RE.search(line)
            if m:
                current["size"] = {"width": int(m.group(1)), "height": int(m.group(2))}
        elif line.startswith("Origin:"):
            m = _ORIGIN_RE.search(line)
            if m:
                current["origin"] = {"x": int(m.group(1)), "y": int(m.group(2))}
            # Newer versions report "Origin: (0,0) - main display"
            if "main display" in line.lower():
                current["isPrimary"] = True
        elif line.startswith("Main Display:"):
            current["isPrimary"] = line.split(":", 1)[1].strip().lower() == "yes"

    _flush()

    log.info("displayplacer: %d displays parsed", len(displays))
    return displays


# ============================================================================
# Win32
# ============================================================================
def enumerate_win32_displays() -> list[DisplayDict]:
    """
    Enumerate connected monitors with win32api (pywin32).

    ``reservedTop`` is the gap between the monitor top and its work-area
    top (a taskbar docked at the top).  Taskbars on other edges are not
    represented.

    Returns:
        List of records in enumeration order.
    """
    import win32api
    import win32con

    displays: list[DisplayDict] = []

    for hmonitor, _hdc, _rect in win32api.EnumDisplayMonitors(None, None):
        try:
            info = win32api.GetMonitorInfo(hmonitor)
        except Exception:
            log.warning("Could not read monitor info for %s", hmonitor)
            continue

        # info['Monitor'] = (left, top, right, bottom) - full area
        # info['Work']    = (left, top, right, bottom) - work area
        left, top, right, bottom = info["Monitor"]
        work_top = info["Work"][1]

        record = {
            "id": info["Device"],
            "origin": {"x": left, "y": top},
            "size": {"width": right - left, "height": bottom - top},
            "isPrimary": bool(info["Flags"] & win32con.MONITORINFOF_PRIMARY),
            "reservedTop": max(0, work_top - top),
        }
        displays.append(record)
        log.debug("Monitor detected: %s", record)

    log.info("Win32: %d monitors detected", len(displays))
    return displays
