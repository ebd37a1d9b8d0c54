"""Tests for the display enumerators."""

import sys
from types import SimpleNamespace

from zonewm.core.displays import enumerate_win32_displays, parse_displayplacer
from zonewm.geometry.rect import Rect
from zonewm.geometry.topology import build_topology


DISPLAYPLACER_REPORT = """\
Persistent screen id: 37D8832A-2D66-02CA-B9F7-8F30A301B230
Contextual screen id: 1
Type: MacBook built in screen
Resolution: 1440x900
Hertz: N/A
Color Depth: 4
Scaling: on
Origin: (0,0) - main display
Rotation: 0
Resolutions for rotation 0:
  mode 1: res:1440x900 hz:60 color_depth:4 <-- current mode
  mode 2: res:1280x800 hz:60 color_depth:4

Persistent screen id: 5EB0F8C1-1111-2222-3333-444455556666
Contextual screen id: 2
Type: 27 inch external screen
Resolution: 2560x1440
Origin: (-2560,-270)
Rotation: 0

Persistent screen id: BROKEN
Type: 24 inch external screen
"""


class TestDisplayplacer:

    def test_parses_each_block(self):
        records = parse_displayplacer(DISPLAYPLACER_REPORT)
        assert [r["id"] for r in records] == [
            "37D8832A-2D66-02CA-B9F7-8F30A301B230",
            "5EB0F8C1-1111-2222-3333-444455556666",
        ]
        builtin, external = records
        assert builtin["size"] == {"width": 1440, "height": 900}
        assert builtin["isPrimary"] is True
        assert external["origin"] == {"x": -2560, "y": -270}
        assert external["isPrimary"] is False
        assert builtin["reservedTop"] == 25

    def test_main_display_yes_line(self):
        text = "Persistent screen id: A\nResolution: 800x600\nOrigin: (0,0)\nMain Display: Yes\n"
        assert parse_displayplacer(text)[0]["isPrimary"] is True

    def test_custom_menu_bar_height(self):
        records = parse_displayplacer(DISPLAYPLACER_REPORT, menu_bar_height=0)
        assert all(r["reservedTop"] == 0 for r in records)

    def test_feeds_topology(self):
        topo = build_topology(parse_displayplacer(DISPLAYPLACER_REPORT))
        assert topo.main.usable == Rect(0, 25, 1440, 875)
        assert topo.display_left_of(topo.main).bounds == Rect(-2560, -270, 2560, 1440)

    def test_empty_report(self):
        assert parse_displayplacer("") == []


class TestWin32:

    def test_enumerates_monitor_info(self, monkeypatch):
        infos = {
            1: {"Monitor": (0, 0, 1920, 1080), "Work": (0, 0, 1920, 1040),
                "Device": r"\\.\DISPLAY1", "Flags": 1},
            2: {"Monitor": (1920, 0, 3840, 1080), "Work": (1920, 40, 3840, 1080),
                "Device": r"\\.\DISPLAY2", "Flags": 0},
        }
        fake_api = SimpleNamespace(
            EnumDisplayMonitors=lambda *_: [(1, None, None), (2, None, None)],
            GetMonitorInfo=lambda h: infos[h],
        )
        monkeypatch.setitem(sys.modules, "win32api", fake_api)
        monkeypatch.setitem(sys.modules, "win32con", SimpleNamespace(MONITORINFOF_PRIMARY=1))

        primary, secondary = enumerate_win32_displays()

        assert primary["isPrimary"] is True
        assert primary["reservedTop"] == 0
        assert secondary["reservedTop"] == 40
        assert secondary["size"] == {"width": 1920, "height": 1080}
        assert build_topology([secondary, primary]).main.id == r"\\.\DISPLAY1"
