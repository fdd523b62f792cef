"""
monarrange.core - Display records and collaborator contracts.

This package contains:
    - display   : DisplayState, the per-monitor record the orchestrator edits
    - contracts : MonitorStateSource / CommitSink protocols
"""

from monarrange.core.display import DisplayState
from monarrange.core.contracts import CommitSink, MonitorStateSource

__all__ = [
    "DisplayState",
    "MonitorStateSource",
    "CommitSink",
]
