"""Shared display fixtures."""

import pytest

from zonewm.geometry.topology import build_topology


def display_record(display_id, x, y, width, height, primary=False, reserved_top=25):
    return {
        "id": display_id,
        "origin": {"x": x, "y": y},
        "size": {"width": width, "height": height},
        "isPrimary": primary,
        "reservedTop": reserved_top,
    }


MAIN = display_record("main", 0, 0, 1920, 1080, primary=True)
LEFT = display_record("left", -1440, 0, 1440, 900)
RIGHT = display_record("right", 1920, 0, 2560, 1440)


@pytest.fixture
def single_topology():
    return build_topology([MAIN])


@pytest.fixture
def triple_topology():
    # Deliberately out of order
    return build_topology([RIGHT, LEFT, MAIN])


@pytest.fixture
def main_display(single_topology):
    return single_topology.main


@pytest.fixture
def displays_by_id(single_topology):
    return {d.id: d for d in single_topology}
