"""
monarrange.layout.moves - Move direccional, swap y slide.

Mover un monitor en una direccion hace una de tres cosas:
    - Si hay un vecino al otro lado de un borde perpendicular a la
      direccion, ambos intercambian posiciones (swap).
    - Si no, y comparte un borde paralelo, se desliza a lo largo de ese
      borde un paso fijo, reenganchandose si pierde el contacto (slide).
    - Si no, ya esta en el extremo del layout: no hace nada.

Todas las funciones modifican la lista del llamador en sitio.
"""

from __future__ import annotations

import logging
from typing import Optional

from monarrange.layout.adjacency import EdgeKind, SharedEdge, shared_edge
from monarrange.layout.directional import Direction
from monarrange.layout.rect import LayoutMonitor, check_index

log = logging.getLogger(__name__)


def _edge_faces(edge: SharedEdge, sel: LayoutMonitor, direction: Direction) -> bool:
    """True if a perpendicular *edge* sits on *sel*'s side facing *direction*."""
    if direction == Direction.LEFT:
        return edge.coord == sel.x
    if direction == Direction.RIGHT:
        return edge.coord == sel.right
    if direction == Direction.UP:
        return edge.coord == sel.y
    return edge.coord == sel.bottom


def move_monitor(
    monitors: list[LayoutMonitor],
    selected: int,
    direction: Direction,
    step: int,
) -> None:
    """
    Move the monitor at *selected* one step in *direction*.

    Args:
        monitors:  The layout (mutated in place).
        selected:  Index of the monitor to move.
        direction: Direction pressed by the user.
        step:      Slide distance when sliding along a parallel edge.
    """
    if len(monitors) <= 1:
        return
    check_index(monitors, selected)

    sel = monitors[selected]
    perp_neighbor: Optional[int] = None
    parallel_neighbor: Optional[int] = None

    for i, m in enumerate(monitors):
        if i == selected:
            continue
        edge = shared_edge(sel, m)
        if edge is None:
            continue

        if edge.is_perpendicular_to(direction):
            if perp_neighbor is None and _edge_faces(edge, sel, direction):
                perp_neighbor = i
        elif parallel_neighbor is None:
            parallel_neighbor = i

    if perp_neighbor is not None:
        log.debug(
            "move_%s: %s swaps with %s",
            direction.value, sel.id, monitors[perp_neighbor].id,
        )
        swap_monitors(monitors, selected, perp_neighbor)
    elif parallel_neighbor is not None:
        log.debug(
            "move_%s: %s slides along %s by %d",
            direction.value, sel.id, monitors[parallel_neighbor].id, step,
        )
        slide_monitor(monitors, selected, parallel_neighbor, direction, step)
    else:
        log.debug("move_%s: %s already at the edge", direction.value, sel.id)


def swap_monitors(monitors: list[LayoutMonitor], a: int, b: int) -> None:
    """
    Swap two adjacent monitors, keeping them touching.

    On a vertical edge the pair keeps its leftmost x and trades order;
    other monitors further along the row are shifted by the width
    difference so they stay attached, and those between the old and new
    spans move the opposite way. On a horizontal edge the same is done
    on the y axis with heights, shifting only monitors below the pair.

    Does nothing if *a* and *b* do not share an edge.
    """
    check_index(monitors, a, "a")
    check_index(monitors, b, "b")

    ma, mb = monitors[a], monitors[b]
    edge = shared_edge(ma, mb)
    if edge is None:
        log.debug("swap: %s and %s do not share an edge", ma.id, mb.id)
        return

    a_x, a_y, a_w, a_h = ma.x, ma.y, ma.w, ma.h
    b_x, b_y, b_w, b_h = mb.x, mb.y, mb.w, mb.h
    others = [m for i, m in enumerate(monitors) if i != a and i != b]

    if edge.kind == EdgeKind.VERTICAL:
        left = min(a_x, b_x)
        size_diff = b_w - a_w
        if a_x < b_x:
            mb.x = left
            ma.x = left + b_w
            old_b_right = b_x + b_w
            for m in others:
                if m.x >= old_b_right:
                    m.x -= size_diff
                elif a_x + a_w <= m.x < b_x:
                    m.x += size_diff
        else:
            ma.x = left
            mb.x = left + a_w
            old_a_right = a_x + a_w
            for m in others:
                if m.x >= old_a_right:
                    m.x += size_diff
                elif b_x + b_w <= m.x < a_x:
                    m.x -= size_diff
    else:
        top = min(a_y, b_y)
        size_diff = b_h - a_h
        if a_y < b_y:
            mb.y = top
            ma.y = top + b_h
            old_b_bottom = b_y + b_h
            for m in others:
                if m.y >= old_b_bottom:
                    m.y -= size_diff
        else:
            ma.y = top
            mb.y = top + a_h
            old_a_bottom = a_y + a_h
            for m in others:
                if m.y >= old_a_bottom:
                    m.y += size_diff

    log.debug("swap: %s <-> %s (%s edge)", ma, mb, edge.kind.value)


def slide_monitor(
    monitors: list[LayoutMonitor],
    selected: int,
    neighbor: int,
    direction: Direction,
    step: int,
) -> None:
    """
    Slide *selected* by *step* along *direction*.

    If the slide breaks contact with *neighbor*, the monitor is snapped
    flush against whichever side of the neighbor its center is now
    closer to, taking the neighbor's perpendicular coordinate.
    """
    check_index(monitors, selected)
    check_index(monitors, neighbor, "neighbor")

    sel = monitors[selected]
    nbr = monitors[neighbor]
    delta = direction.sign * step

    if direction.is_horizontal:
        sel.x += delta
    else:
        sel.y += delta

    if shared_edge(sel, nbr) is not None:
        return

    if direction.is_horizontal:
        if sel.center_x < nbr.center_x:
            sel.x = nbr.x - sel.w
        else:
            sel.x = nbr.right
        sel.y = nbr.y
    else:
        if sel.center_y < nbr.center_y:
            sel.y = nbr.y - sel.h
        else:
            sel.y = nbr.bottom
        sel.x = nbr.x

    log.debug("slide: %s lost contact, re-snapped to %s", sel, nbr.id)
