"""
Shared fixtures for the layout engine tests.

Layouts are plain lists of LayoutMonitor; display fixtures are lists of
DisplayState as an orchestrator would receive them.
"""

import pytest

from monarrange.core.display import DisplayState
from monarrange.layout.rect import LayoutMonitor


@pytest.fixture
def three_side_by_side():
    """Three 1920x1080 monitors in a row: A, B, C."""
    return [
        LayoutMonitor("A", 0, 0, 1920, 1080),
        LayoutMonitor("B", 1920, 0, 1920, 1080),
        LayoutMonitor("C", 3840, 0, 1920, 1080),
    ]

@pytest.fixture
def two_stacked():
    """A above B, both 1920x1080."""
    return [
        LayoutMonitor("A", 0, 0, 1920, 1080),
        LayoutMonitor("B", 0, 1080, 1920, 1080),
    ]

@pytest.fixture
def different_heights():
    """A (1920x1080) left of B (2560x1440), top edges aligned."""
    return [
        LayoutMonitor("A", 0, 0, 1920, 1080),
        LayoutMonitor("B", 1920, 0, 2560, 1440),
    ]

@pytest.fixture
def displays():
    """Three enabled displays in a row plus one disabled display far away."""
    return [
        DisplayState("DP-1", 1920, 1080, x=0, y=0),
        DisplayState("DP-2", 1920, 1080, x=1920, y=0),
        DisplayState("HDMI-A-1", 1920, 1080, x=3840, y=0),
        DisplayState("DP-3", 2560, 1440, x=9999, y=9999, disabled=True),
    ]
