"""CAD notes generation: prompts, normalization and the notes service."""

from cad_notes.notes.classifier import is_generic_treatment_request
from cad_notes.notes.schemas import CadNotes, CadNotesSchema
from cad_notes.notes.service import NotesService

__all__ = [
    "CadNotes",
    "CadNotesSchema",
    "NotesService",
    "is_generic_treatment_request",
]
