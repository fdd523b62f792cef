"""
monarrange.layout.snap - Operaciones de snap y reparacion de conectividad.

    - snap_to_side:     pega un monitor a un lado de otro.
    - snap_to_far_side: envia un monitor al extremo del layout completo.
    - auto_snap_all:    reengancha cada monitor flotante a su vecino mas
                        cercano (bucle de punto fijo acotado).

El snap no comprueba colisiones; el llamador ejecuta resolve_overlaps
despues.
"""

from __future__ import annotations

import logging

from monarrange.layout.adjacency import touches_any
from monarrange.layout.directional import Direction
from monarrange.layout.rect import LayoutMonitor, check_index

log = logging.getLogger(__name__)


def snap_to_side(
    monitors: list[LayoutMonitor],
    selected: int,
    target: int,
    direction: Direction,
) -> None:
    """
    Place *selected* flush against the *direction* side of *target*.

    Both coordinates are overwritten: the perpendicular one is copied
    from the target (top edges aligned for LEFT/RIGHT, left edges for
    UP/DOWN).
    """
    check_index(monitors, selected)
    check_index(monitors, target, "target")

    sel = monitors[selected]
    tgt = monitors[target]

    if direction == Direction.LEFT:
        sel.x, sel.y = tgt.x - sel.w, tgt.y
    elif direction == Direction.RIGHT:
        sel.x, sel.y = tgt.right, tgt.y
    elif direction == Direction.UP:
        sel.x, sel.y = tgt.x, tgt.y - sel.h
    else:
        sel.x, sel.y = tgt.x, tgt.bottom

    log.debug("snap_%s: %s next to %s", direction.value, sel, tgt.id)


def snap_to_far_side(
    monitors: list[LayoutMonitor],
    selected: int,
    direction: Direction,
) -> None:
    """
    Move *selected* past the far extremity of the rest of the layout.

    The extremity (min x, max right, min y or max bottom) is computed
    over every other monitor; *selected* is placed flush against it and
    aligned with the first monitor that defines that extremity.
    No-op with fewer than two monitors.
    """
    if len(monitors) <= 1:
        return
    check_index(monitors, selected)

    sel = monitors[selected]
    others = [m for i, m in enumerate(monitors) if i != selected]

    if direction == Direction.LEFT:
        ref = min(others, key=lambda m: m.x)
        sel.x, sel.y = ref.x - sel.w, ref.y
    elif direction == Direction.RIGHT:
        ref = max(others, key=lambda m: m.right)
        sel.x, sel.y = ref.right, ref.y
    elif direction == Direction.UP:
        ref = min(others, key=lambda m: m.y)
        sel.x, sel.y = ref.x, ref.y - sel.h
    else:
        ref = max(others, key=lambda m: m.bottom)
        sel.x, sel.y = ref.x, ref.bottom

    log.debug("snap_far_%s: %s aligned with %s", direction.value, sel, ref.id)


def _snap_to_nearest(monitors: list[LayoutMonitor], index: int) -> None:
    """Attach the monitor at *index* to the monitor whose center is closest."""
    m = monitors[index]
    cx, cy = m.center_x, m.center_y

    nearest = min(
        (j for j in range(len(monitors)) if j != index),
        key=lambda j: abs(cx - monitors[j].center_x) + abs(cy - monitors[j].center_y),
    )
    tgt = monitors[nearest]
    dx = cx - tgt.center_x
    dy = cy - tgt.center_y

    if abs(dx) > abs(dy):
        m.x = tgt.right if dx > 0 else tgt.x - m.w
        m.y = tgt.y
    else:
        m.y = tgt.bottom if dy > 0 else tgt.y - m.h
        m.x = tgt.x

    log.debug("auto_snap: %s reattached to %s", m, tgt.id)


def auto_snap_all(monitors: list[LayoutMonitor], max_passes: int | None = None) -> int:
    """
    Snap every monitor that touches no other to its nearest neighbor.

    Repeats until a full pass fixes nothing, for at most *max_passes*
    passes (default: the number of monitors). Disjoint clusters are not
    merged with each other.

    Returns:
        Number of snaps performed.
    """
    if len(monitors) <= 1:
        return 0

    passes = len(monitors) if max_passes is None else max_passes
    fixed = 0

    for _ in range(passes):
        any_fixed = False
        for i in range(len(monitors)):
            if touches_any(monitors, i):
                continue
            _snap_to_nearest(monitors, i)
            any_fixed = True
            fixed += 1
        if not any_fixed:
            break
    else:
        floating = [m.id for i, m in enumerate(monitors) if not touches_any(monitors, i)]
        if floating:
            log.warning(
                "auto_snap_all: %s still floating after %d passes", floating, passes
            )

    return fixed
