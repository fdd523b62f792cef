"""
monarrange.layout.rect - Rectangulo de layout para un monitor.

Define el rectangulo mutable que representa la huella logica de un
monitor en el plano del layout. Todas las operaciones del engine
trabajan sobre listas de LayoutMonitor direccionadas por indice.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Sequence


# ============================================================================
# Errores
# ============================================================================

class LayoutError(Exception):
    """Base class for layout engine errors."""
    pass


class SelectionError(LayoutError, IndexError):
    """Raised when an operation is given an index or name that is not in the layout."""
    pass


def check_index(monitors: Sequence[LayoutMonitor], index: int, what: str = "selected") -> None:
    """
    Valida que *index* apunte a un monitor del layout.

    Raises:
        SelectionError: Si el indice esta fuera de rango.
    """
    if not 0 <= index < len(monitors):
        raise SelectionError(
            f"{what} index {index} out of range for layout of {len(monitors)} monitors"
        )


# ============================================================================
# LayoutMonitor
# ============================================================================
@dataclass(slots=True)
class LayoutMonitor:
    """
    Rectangulo de un monitor en el espacio del layout.

    Las coordenadas son enteros con signo sin origen fijo; el tamano
    ya viene dividido por la escala del monitor (tamano logico).

    Atributos:
        id: Token de identidad (nombre del monitor, ej. "DP-1").
        x:  Coordenada horizontal de la esquina superior-izquierda.
        y:  Coordenada vertical de la esquina superior-izquierda.
        w:  Ancho logico, siempre > 0.
        h:  Alto logico, siempre > 0.
    """

    id: str
    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"LayoutMonitor {self.id!r} needs a positive size, got {self.w}x{self.h}")

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def center_x(self) -> int:
        return self.x + self.w // 2

    @property
    def center_y(self) -> int:
        return self.y + self.h // 2

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    # ------------------------------------------------------------------
    # Solapamiento por eje
    # ------------------------------------------------------------------
    def vertical_overlap(self, other: LayoutMonitor) -> tuple[int, int] | None:
        """
        Rango vertical (start, end) que comparten ambos rectangulos.

        Retorna None si no hay solapamiento; tocarse en un solo punto
        no cuenta.
        """
        start = max(self.y, other.y)
        end = min(self.bottom, other.bottom)
        if end > start:
            return (start, end)
        return None

    def horizontal_overlap(self, other: LayoutMonitor) -> tuple[int, int] | None:
        """Rango horizontal (start, end) compartido, o None."""
        start = max(self.x, other.x)
        end = min(self.right, other.right)
        if end > start:
            return (start, end)
        return None

    def intersects(self, other: LayoutMonitor) -> bool:
        """True si ambos rectangulos comparten un area positiva."""
        return (
            self.horizontal_overlap(other) is not None
            and self.vertical_overlap(other) is not None
        )

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{self.id}({self.w}x{self.h}+{self.x}+{self.y})"
