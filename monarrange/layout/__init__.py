"""
monarrange.layout - Motor geometrico del layout de monitores.

Este paquete contiene:
    - rect        : LayoutMonitor y los tests de solapamiento por eje
    - directional : Direction, find_neighbor, find_nearest
    - adjacency   : SharedEdge, shared_edge, is_layout_connected
    - moves       : move_monitor, swap_monitors, slide_monitor
    - snap        : snap_to_side, snap_to_far_side, auto_snap_all
    - repair      : resolve_overlaps, normalize, recalculate_horizontal
    - engine      : LayoutEngine - orquestador de ediciones
"""

from monarrange.layout.rect import LayoutError, LayoutMonitor, SelectionError
from monarrange.layout.directional import Direction, find_nearest, find_neighbor
from monarrange.layout.adjacency import (
    EdgeKind,
    SharedEdge,
    is_layout_connected,
    shared_edge,
    touches_any,
)
from monarrange.layout.moves import move_monitor, slide_monitor, swap_monitors
from monarrange.layout.snap import auto_snap_all, snap_to_far_side, snap_to_side
from monarrange.layout.repair import (
    bounding_box,
    normalize,
    recalculate_horizontal,
    resolve_overlaps,
)
from monarrange.layout.engine import LayoutEngine

__all__ = [
    "LayoutError",
    "LayoutMonitor",
    "SelectionError",
    "Direction",
    "find_nearest",
    "find_neighbor",
    "EdgeKind",
    "SharedEdge",
    "is_layout_connected",
    "shared_edge",
    "touches_any",
    "move_monitor",
    "slide_monitor",
    "swap_monitors",
    "auto_snap_all",
    "snap_to_far_side",
    "snap_to_side",
    "bounding_box",
    "normalize",
    "recalculate_horizontal",
    "resolve_overlaps",
    "LayoutEngine",
]
