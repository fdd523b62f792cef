"""
monarrange.core.display - Registro de estado de un monitor fisico.

DisplayState es el registro "rico" que el orquestador lee y reescribe:
contiene la resolucion fisica, la escala y el estado habilitado. El
engine de layout solo ve su huella logica (LayoutMonitor) y devuelve
posiciones; el resto de campos nunca se modifica aqui.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from monarrange.layout.rect import LayoutMonitor


@dataclass(slots=True)
class DisplayState:
    """
    Estado de un monitor tal como lo reporta el compositor.

    Atributos:
        name:         Nombre del conector (ej. "DP-1"), token de identidad.
        width:        Ancho fisico en pixeles.
        height:       Alto fisico en pixeles.
        x:            Posicion horizontal en el layout.
        y:            Posicion vertical en el layout.
        scale:        Factor de escala (> 0).
        disabled:     True si el monitor esta apagado.
        refresh_rate: Frecuencia en Hz.
    """

    name: str
    width: int
    height: int
    x: int = 0
    y: int = 0
    scale: float = 1.0
    disabled: bool = False
    refresh_rate: float = 60.0

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ValueError(f"Display {self.name!r} has invalid scale {self.scale}")

    @property
    def logical_width(self) -> int:
        """Ancho logico (fisico / escala, redondeado hacia arriba)."""
        return math.ceil(self.width / self.scale)

    @property
    def logical_height(self) -> int:
        """Alto logico (fisico / escala, redondeado hacia arriba)."""
        return math.ceil(self.height / self.scale)

    def to_layout(self) -> LayoutMonitor:
        """Construye el rectangulo de layout con el tamano logico."""
        return LayoutMonitor(
            id=self.name,
            x=self.x,
            y=self.y,
            w=self.logical_width,
            h=self.logical_height,
        )

    def __str__(self) -> str:
        state = "disabled" if self.disabled else f"{self.width}x{self.height}@{self.refresh_rate:.0f}Hz"
        return f"Display({self.name} {state} +{self.x}+{self.y} x{self.scale:g})"
