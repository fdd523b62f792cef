"""
monarrange.config.settings - Engine configuration.

Valores por defecto del orquestador:
    slide_step        -> Distancia de cada slide (50 unidades logicas).
    max_repair_passes -> Limite de iteraciones de auto_snap_all y
                         resolve_overlaps (None = numero de monitores).
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_SLIDE_STEP = 50


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Tunables for LayoutEngine."""

    slide_step: int = DEFAULT_SLIDE_STEP
    max_repair_passes: int | None = None

    def __post_init__(self) -> None:
        if self.slide_step <= 0:
            raise ValueError(f"slide_step must be positive, got {self.slide_step}")
        if self.max_repair_passes is not None and self.max_repair_passes <= 0:
            raise ValueError(
                f"max_repair_passes must be positive or None, got {self.max_repair_passes}"
            )
