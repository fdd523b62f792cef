"""
monarrange - Monitor layout geometry engine.

Keeps an arrangement of displays physically sensible while it is being
edited: no overlaps, no disconnected islands, predictable swaps and
slides between monitors of different sizes.
"""

from monarrange.layout import Direction, LayoutEngine, LayoutMonitor
from monarrange.core import DisplayState
from monarrange.config import EngineConfig

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "LayoutEngine",
    "LayoutMonitor",
    "DisplayState",
    "EngineConfig",
]
