"""
monarrange.layout.engine - Orquestador de ediciones de layout.

LayoutEngine es el punto de entrada para editar la disposicion de los
monitores. Construye el layout a partir de los registros de monitor,
ejecuta una edicion (move / snap / drag) y siempre aplica la secuencia
de reparacion antes de copiar las posiciones de vuelta:

    edicion -> auto_snap_all -> resolve_overlaps -> normalize

Responsabilidades:
    - Filtrar los monitores deshabilitados (nunca se reposicionan).
    - Traducir nombres de monitor a indices del layout.
    - Ejecutar la edicion y la reparacion en el orden correcto.
    - Reescribir (x, y) en los registros, preservando la identidad.

No guarda estado entre llamadas: cada operacion recibe la lista de
registros actual y la modifica en sitio.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Optional, TYPE_CHECKING

from monarrange.config.settings import EngineConfig
from monarrange.layout.adjacency import is_layout_connected
from monarrange.layout.directional import Direction
from monarrange.layout.moves import move_monitor
from monarrange.layout.rect import LayoutMonitor, SelectionError
from monarrange.layout.repair import normalize, recalculate_horizontal, resolve_overlaps
from monarrange.layout.snap import auto_snap_all, snap_to_far_side, snap_to_side

if TYPE_CHECKING:
    from monarrange.core.display import DisplayState

log = logging.getLogger(__name__)


# Tipo para una edicion: edit(layout, selected_index)
LayoutEdit = Callable[[list[LayoutMonitor], int], None]


# ============================================================================
# LayoutEngine
# ============================================================================
class LayoutEngine:
    """
    Aplica ediciones geometricas a una lista de registros de monitor.

    Uso tipico:
        engine = LayoutEngine()
        engine.move(displays, "DP-2", Direction.LEFT)    # swap o slide
        engine.snap_far(displays, "HDMI-A-1", Direction.RIGHT)
        sink.commit(displays)

    Cada edicion retorna True si alguna posicion cambio.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config if config is not None else EngineConfig()

    # ------------------------------------------------------------------
    # Propiedades
    # ------------------------------------------------------------------
    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def slide_step(self) -> int:
        return self._config.slide_step

    # ------------------------------------------------------------------
    # Conversion registros <-> layout
    # ------------------------------------------------------------------
    @staticmethod
    def build_layout(displays: Sequence[DisplayState]) -> list[LayoutMonitor]:
        """Construye el layout con los monitores habilitados, en orden."""
        return [d.to_layout() for d in displays if not d.disabled]

    @staticmethod
    def layout_index(displays: Sequence[DisplayState], name: str) -> int:
        """
        Indice del monitor *name* dentro del layout (solo habilitados).

        Raises:
            SelectionError: Si el monitor no existe o esta deshabilitado.
        """
        index = 0
        for d in displays:
            if d.disabled:
                if d.name == name:
                    raise SelectionError(f"Display {name!r} is disabled")
                continue
            if d.name == name:
                return index
            index += 1
        raise SelectionError(f"Display {name!r} not found")

    @staticmethod
    def commit_layout(displays: Sequence[DisplayState], layout: Sequence[LayoutMonitor]) -> None:
        """Copia (x, y) del layout a los registros con el mismo nombre."""
        by_name = {m.id: m for m in layout}
        for d in displays:
            if d.disabled:
                continue
            m = by_name.get(d.name)
            if m is None:
                continue
            d.x, d.y = m.x, m.y

    # ------------------------------------------------------------------
    # Reparacion
    # ------------------------------------------------------------------
    def repair(
        self,
        layout: list[LayoutMonitor],
        selected: int,
        orig_x: int,
        orig_y: int,
    ) -> None:
        """Secuencia obligatoria tras una edicion: snap -> overlaps -> normalize."""
        passes = self._config.max_repair_passes
        auto_snap_all(layout, passes)
        resolve_overlaps(layout, selected, orig_x, orig_y, passes)
        normalize(layout)

    def _edit(
        self,
        displays: Sequence[DisplayState],
        name: str,
        label: str,
        edit: LayoutEdit,
        origin: Optional[tuple[int, int]] = None,
    ) -> bool:
        layout = self.build_layout(displays)
        if not layout:
            log.debug("%s: no enabled displays", label)
            return False

        index = self.layout_index(displays, name)
        orig_x, orig_y = origin if origin is not None else layout[index].position
        before = [(d.x, d.y) for d in displays]

        edit(layout, index)
        self.repair(layout, index, orig_x, orig_y)
        self.commit_layout(displays, layout)

        changed = before != [(d.x, d.y) for d in displays]
        log.info(
            "%s %s: %s",
            label,
            name,
            "layout updated" if changed else "no change",
        )
        return changed

    # ------------------------------------------------------------------
    # Ediciones
    # ------------------------------------------------------------------
    def move(self, displays: Sequence[DisplayState], name: str, direction: Direction) -> bool:
        """Swap con el vecino perpendicular o slide a lo largo del borde."""
        step = self.slide_step

        def _move(layout: list[LayoutMonitor], index: int) -> None:
            move_monitor(layout, index, direction, step)

        return self._edit(displays, name, f"move_{direction.value}", _move)

    def snap_far(self, displays: Sequence[DisplayState], name: str, direction: Direction) -> bool:
        """Envia el monitor al extremo del layout en *direction*."""

        def _snap(layout: list[LayoutMonitor], index: int) -> None:
            snap_to_far_side(layout, index, direction)

        return self._edit(displays, name, f"snap_far_{direction.value}", _snap)

    def snap_next_to(
        self,
        displays: Sequence[DisplayState],
        name: str,
        target_name: str,
        direction: Direction,
    ) -> bool:
        """Pega el monitor al lado *direction* de *target_name*."""

        def _snap(layout: list[LayoutMonitor], index: int) -> None:
            target = self.layout_index(displays, target_name)
            snap_to_side(layout, index, target, direction)

        return self._edit(displays, name, f"snap_{direction.value}_of_{target_name}", _snap)

    def drag(
        self,
        displays: Sequence[DisplayState],
        name: str,
        x: int,
        y: int,
        origin: Optional[tuple[int, int]] = None,
    ) -> bool:
        """
        Suelta el monitor arrastrado en (x, y).

        Args:
            origin: Posicion antes de empezar el arrastre. Si es None se
                    usa la posicion actual del registro.
        """

        def _drop(layout: list[LayoutMonitor], index: int) -> None:
            layout[index].x = x
            layout[index].y = y

        return self._edit(displays, name, "drag", _drop, origin)

    def readjust(self, displays: Sequence[DisplayState], name: str) -> bool:
        """Solo reparacion, tras cambiar escala o resolucion de *name*."""

        def _noop(layout: list[LayoutMonitor], index: int) -> None:
            pass

        return self._edit(displays, name, "readjust", _noop)

    def snap_all(self, displays: Sequence[DisplayState]) -> bool:
        """Reengancha los monitores flotantes y normaliza, sin resolver overlaps."""
        layout = self.build_layout(displays)
        if not layout:
            return False

        before = [(d.x, d.y) for d in displays]
        auto_snap_all(layout, self._config.max_repair_passes)
        normalize(layout)
        self.commit_layout(displays, layout)
        return before != [(d.x, d.y) for d in displays]

    def arrange_horizontal(self, displays: Sequence[DisplayState]) -> bool:
        """Coloca los monitores en una fila de izquierda a derecha, sin huecos."""
        layout = self.build_layout(displays)
        if not layout:
            return False

        before = [(d.x, d.y) for d in displays]
        recalculate_horizontal(layout)
        normalize(layout)
        self.commit_layout(displays, layout)
        return before != [(d.x, d.y) for d in displays]

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    def is_connected(self, displays: Sequence[DisplayState]) -> bool:
        """True si los monitores habilitados forman un grafo conexo."""
        return is_layout_connected(self.build_layout(displays))

    def dump_state(self, displays: Sequence[DisplayState]) -> str:
        """Retorna un resumen del layout actual."""
        layout = self.build_layout(displays)
        lines = [
            "=== LayoutEngine ===",
            f"    Slide step: {self.slide_step}",
            f"    Monitores: {len(layout)} habilitados / {len(displays)} totales",
            f"    Conexo: {is_layout_connected(layout)}",
            "",
        ]
        for m in layout:
            lines.append(f"    {m}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LayoutEngine(slide_step={self.slide_step})"
