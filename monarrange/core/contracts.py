"""
monarrange.core.contracts - Collaborator interfaces around the engine.

The layout engine never talks to a display server. Whatever discovers
monitors and whatever activates or persists an arrangement plug in
through these two protocols.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from monarrange.core.display import DisplayState


@runtime_checkable
class MonitorStateSource(Protocol):
    """Supplies the current displays, enabled and disabled."""

    def fetch(self) -> list[DisplayState]:
        """Return the current display records in a stable order."""
        ...


@runtime_checkable
class CommitSink(Protocol):
    """Activates and/or persists an arrangement."""

    def commit(self, displays: Sequence[DisplayState]) -> None:
        """
        Apply the given display records.

        Raises whatever the sink considers a failure; the engine does not
        catch it.
        """
        ...
