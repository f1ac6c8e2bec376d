"""Turn the model's structured JSON into numbered drawing notes."""

import json
import re

from pydantic import ValidationError

from cad_notes.exceptions import MalformedResponseError
from cad_notes.notes.schemas import CadNotes, CadNotesSchema
from cad_notes.utils.logger import logger

NOTE_PREFIX_PATTERN = re.compile(r"^\s*NOTE\s+\d+\s*:\s*", re.IGNORECASE)


def strip_note_prefix(value: str) -> str:
    """Remove a leading "NOTE <n>:" label the model may have copied from the schema."""
    return NOTE_PREFIX_PATTERN.sub("", value, count=1)


def number_note(index: int, value: str) -> str:
    return f"{index}. {strip_note_prefix(value)}"


def parse_raw_notes(text: str) -> CadNotesSchema:
    """Parse and validate the structured response text.

    Args:
        text: JSON text returned by the structured model call

    Returns:
        CadNotesSchema: The validated raw notes

    Raises:
        MalformedResponseError: If the text is not a JSON object with all
            four string fields
    """
    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as e:
        logger.error("Structured response is not valid JSON", error=str(e))
        raise MalformedResponseError(
            f"Failed to parse structured response: {e}", response_text=text
        ) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(data).__name__}", response_text=text
        )

    try:
        return CadNotesSchema.model_validate(data)
    except ValidationError as e:
        logger.error(
            "Structured response does not match the notes schema",
            errors=[".".join(str(p) for p in err["loc"]) for err in e.errors()],
        )
        raise MalformedResponseError(
            f"Structured response is missing required fields: {e}",
            response_text=text,
        ) from e


def normalize_notes(raw: CadNotesSchema) -> CadNotes:
    """Apply the canonical "1. " .. "4. " prefixes in drawing order."""
    return CadNotes(
        material_description=number_note(1, raw.material_description),
        grade=number_note(2, raw.grade),
        general_notes=number_note(3, raw.general_notes),
        finish_notes=number_note(4, raw.finish_notes),
    )
