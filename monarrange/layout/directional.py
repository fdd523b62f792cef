"""
monarrange.layout.directional - Busquedas direccionales entre monitores.

Implementa las dos busquedas sobre las que se apoyan move y snap:
    - find_neighbor: el monitor que quedaria adyacente si se extendiera
      el borde del seleccionado en una direccion (requiere solapamiento
      en el eje perpendicular).
    - find_nearest: busqueda mas laxa usada para snapping; si no hay nada
      mas alla del borde, compara centros.

Ambas recorren el layout completo (O(n)), direccionado por indice.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from typing import Optional

from monarrange.layout.rect import LayoutMonitor, check_index

log = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal directions for move/snap operations."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def is_horizontal(self) -> bool:
        """True for LEFT/RIGHT (moves along the x axis)."""
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def sign(self) -> int:
        """-1 for LEFT/UP, +1 for RIGHT/DOWN."""
        return -1 if self in (Direction.LEFT, Direction.UP) else 1


def _gap(sel: LayoutMonitor, other: LayoutMonitor, direction: Direction) -> int:
    """Distance from *sel*'s edge facing *direction* to *other*'s opposite edge."""
    if direction == Direction.LEFT:
        return sel.x - other.right
    if direction == Direction.RIGHT:
        return other.x - sel.right
    if direction == Direction.UP:
        return sel.y - other.bottom
    return other.y - sel.bottom


def find_neighbor(
    monitors: Sequence[LayoutMonitor],
    selected: int,
    direction: Direction,
) -> Optional[int]:
    """
    Find the index of the closest monitor on the *direction* side of
    *selected* that overlaps it on the perpendicular axis.

    Candidates must lie entirely past the selected edge (gap >= 0).
    Ties on the gap keep the first one in input order.

    Returns:
        The neighbor index, or None if no monitor qualifies.
    """
    check_index(monitors, selected)
    sel = monitors[selected]
    best: Optional[int] = None
    best_gap = 0

    for i, m in enumerate(monitors):
        if i == selected:
            continue

        if direction.is_horizontal:
            overlaps = sel.vertical_overlap(m) is not None
        else:
            overlaps = sel.horizontal_overlap(m) is not None
        if not overlaps:
            continue

        gap = _gap(sel, m, direction)
        if gap < 0:
            continue

        if best is None or gap < best_gap:
            best = i
            best_gap = gap

    return best


def find_nearest(
    monitors: Sequence[LayoutMonitor],
    selected: int,
    direction: Direction,
) -> Optional[int]:
    """
    Find the nearest monitor in *direction*, ignoring edge sharing.

    The algorithm:
        1. Among monitors whose facing edge is at or past the selected
           edge (non-negative gap), pick the smallest gap.
        2. If there is none, compare centers: keep monitors whose center
           is strictly on the *direction* side of the selected center and
           pick the smallest Manhattan distance between centers.

    Returns:
        The index of the nearest monitor, or None if nothing lies in
        that direction at all.
    """
    check_index(monitors, selected)
    sel = monitors[selected]
    best: Optional[int] = None
    best_gap = 0

    for i, m in enumerate(monitors):
        if i == selected:
            continue
        gap = _gap(sel, m, direction)
        if gap < 0:
            continue
        if best is None or gap < best_gap:
            best = i
            best_gap = gap

    if best is not None:
        return best

    # Nothing past the edge: fall back to center distance
    scx, scy = sel.center_x, sel.center_y
    closest: Optional[int] = None
    closest_dist = 0

    for i, m in enumerate(monitors):
        if i == selected:
            continue
        cx, cy = m.center_x, m.center_y

        if direction == Direction.LEFT:
            correct_side = cx < scx
        elif direction == Direction.RIGHT:
            correct_side = cx > scx
        elif direction == Direction.UP:
            correct_side = cy < scy
        else:
            correct_side = cy > scy
        if not correct_side:
            continue

        dist = abs(cx - scx) + abs(cy - scy)
        if closest is None or dist < closest_dist:
            closest = i
            closest_dist = dist

    if closest is None:
        log.debug("find_nearest_%s: nothing beyond %s", direction.value, sel)
    return closest
