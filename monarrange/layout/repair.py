"""
monarrange.layout.repair - Resolucion de solapamientos y normalizacion.

Se ejecuta tras cada edicion que cambia posiciones, en este orden:
    auto_snap_all -> resolve_overlaps -> normalize
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from monarrange.layout.rect import LayoutMonitor, check_index

log = logging.getLogger(__name__)


def bounding_box(monitors: Sequence[LayoutMonitor]) -> Optional[tuple[int, int, int, int]]:
    """Return (min_x, min_y, max_right, max_bottom), or None for an empty layout."""
    if not monitors:
        return None
    return (
        min(m.x for m in monitors),
        min(m.y for m in monitors),
        max(m.right for m in monitors),
        max(m.bottom for m in monitors),
    )


def _overlapping(monitors: Sequence[LayoutMonitor], moved: int) -> list[int]:
    m = monitors[moved]
    return [j for j, other in enumerate(monitors) if j != moved and m.intersects(other)]


def resolve_overlaps(
    monitors: list[LayoutMonitor],
    moved: int,
    orig_x: int,
    orig_y: int,
    max_passes: int | None = None,
) -> bool:
    """
    Push *moved* out of every monitor it overlaps.

    Each pass considers, for every overlapping monitor, the four minimal
    single-axis pushes (left, right, up, down) that would separate the
    pair, and applies the one that leaves *moved* closest (squared
    euclidean distance) to (orig_x, orig_y). Ties keep the first
    candidate found.

    Args:
        monitors:   The layout (mutated in place).
        moved:      Index of the monitor that was edited.
        orig_x:     Reference x, normally its position before the edit.
        orig_y:     Reference y.
        max_passes: Iteration bound (default: the number of monitors).

    Returns:
        True if *moved* no longer overlaps anything.
    """
    check_index(monitors, moved, "moved")
    sel = monitors[moved]
    passes = len(monitors) if max_passes is None else max_passes

    for _ in range(passes):
        best: Optional[tuple[int, int, int]] = None  # (dx, dy, score)

        for j in _overlapping(monitors, moved):
            other = monitors[j]
            candidates = (
                (other.x - sel.right, 0),
                (other.right - sel.x, 0),
                (0, other.y - sel.bottom),
                (0, other.bottom - sel.y),
            )
            for dx, dy in candidates:
                rx = sel.x + dx - orig_x
                ry = sel.y + dy - orig_y
                score = rx * rx + ry * ry
                if best is None or score < best[2]:
                    best = (dx, dy, score)

        if best is None:
            return True

        sel.x += best[0]
        sel.y += best[1]
        log.debug("resolve_overlaps: pushed %s by (%d, %d)", sel, best[0], best[1])

    resolved = not _overlapping(monitors, moved)
    if not resolved:
        log.warning(
            "resolve_overlaps: %s still overlaps after %d passes, keeping best effort",
            sel.id,
            passes,
        )
    return resolved


def normalize(monitors: list[LayoutMonitor]) -> None:
    """Translate the layout so its bounding box starts at (0, 0)."""
    box = bounding_box(monitors)
    if box is None:
        return
    min_x, min_y = box[0], box[1]
    if min_x == 0 and min_y == 0:
        return
    for m in monitors:
        m.x -= min_x
        m.y -= min_y


def recalculate_horizontal(monitors: list[LayoutMonitor]) -> None:
    """
    Lay the monitors out left to right from x = 0 with no gaps.

    The list is re-ordered by current x (stable); y offsets are kept.
    """
    monitors.sort(key=lambda m: m.x)
    x = 0
    for m in monitors:
        m.x = x
        x += m.w
