"""Browser UI: per-session controller, session registry and routes."""

from cad_notes.ui.controller import ActionStatus, ControllerState, NotesController
from cad_notes.ui.sessions import SessionRegistry

__all__ = [
    "ActionStatus",
    "ControllerState",
    "NotesController",
    "SessionRegistry",
]
