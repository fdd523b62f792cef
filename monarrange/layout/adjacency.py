"""
monarrange.layout.adjacency - Bordes compartidos y conectividad.

Dos monitores son adyacentes solo si sus bordes enfrentados coinciden
exactamente (gap cero) y se solapan en el eje perpendicular. Tocarse
por una esquina no cuenta. El grafo de adyacencia nunca se guarda: se
recalcula por pares cuando hace falta.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from monarrange.layout.directional import Direction
from monarrange.layout.rect import LayoutMonitor

log = logging.getLogger(__name__)


class EdgeKind(enum.Enum):
    """Orientation of a shared edge."""
    VERTICAL = "vertical"      # side by side, edge is a vertical line x = coord
    HORIZONTAL = "horizontal"  # stacked, edge is a horizontal line y = coord


@dataclass(frozen=True, slots=True)
class SharedEdge:
    """An edge shared by two monitors: its orientation and coordinate."""

    kind: EdgeKind
    coord: int

    @classmethod
    def vertical(cls, x: int) -> SharedEdge:
        return cls(EdgeKind.VERTICAL, x)

    @classmethod
    def horizontal(cls, y: int) -> SharedEdge:
        return cls(EdgeKind.HORIZONTAL, y)

    def is_perpendicular_to(self, direction: Direction) -> bool:
        """True if moving in *direction* would push across this edge."""
        return (self.kind == EdgeKind.VERTICAL) == direction.is_horizontal


def shared_edge(a: LayoutMonitor, b: LayoutMonitor) -> Optional[SharedEdge]:
    """
    Find which edge *a* and *b* share, if any.

    Vertical edges (side by side) are tested before horizontal ones.
    The result is symmetric in its arguments up to which coordinate is
    reported when the roles are swapped.
    """
    if a.vertical_overlap(b) is not None:
        if a.right == b.x:
            return SharedEdge.vertical(a.right)
        if b.right == a.x:
            return SharedEdge.vertical(a.x)

    if a.horizontal_overlap(b) is not None:
        if a.bottom == b.y:
            return SharedEdge.horizontal(a.bottom)
        if b.bottom == a.y:
            return SharedEdge.horizontal(a.y)

    return None


def touches_any(monitors: Sequence[LayoutMonitor], index: int) -> bool:
    """True if the monitor at *index* shares an edge with any other."""
    m = monitors[index]
    return any(
        shared_edge(m, other) is not None
        for j, other in enumerate(monitors)
        if j != index
    )


def is_layout_connected(monitors: Sequence[LayoutMonitor]) -> bool:
    """
    Check that the adjacency graph is fully connected.

    Depth-first traversal from monitor 0; an empty layout or a single
    monitor is trivially connected.
    """
    if len(monitors) <= 1:
        return True

    visited = [False] * len(monitors)
    visited[0] = True
    stack = [0]

    while stack:
        current = stack.pop()
        for i, m in enumerate(monitors):
            if visited[i]:
                continue
            if shared_edge(monitors[current], m) is not None:
                visited[i] = True
                stack.append(i)

    connected = all(visited)
    if not connected:
        log.debug(
            "Layout disconnected: unreachable from %s: %s",
            monitors[0].id,
            [monitors[i].id for i, v in enumerate(visited) if not v],
        )
    return connected
