"""Pydantic schemas for CAD drawing notes."""

from pydantic import BaseModel, ConfigDict, Field


class CadNotesSchema(BaseModel):
    """Structured output contract sent to the model.

    All four fields are required; the descriptions tell the model what each
    note should contain.
    """

    model_config = ConfigDict(title="CadNotes", populate_by_name=True)

    material_description: str = Field(
        alias="materialDescription",
        description="NOTE 1: Full material name, temper, and form. E.g., ALUMINUM ALLOY 6061-T6 PLATE",
    )
    grade: str = Field(
        description="NOTE 2: Applicable standard or grade specification. E.g., PER AMS 4027",
    )
    general_notes: str = Field(
        alias="generalNotes",
        description="NOTE 3: Standard general notes for fabrication. E.g., REMOVE ALL BURRS AND BREAK SHARP EDGES 0.005-0.015 INCH.",
    )
    finish_notes: str = Field(
        alias="finishNotes",
        description="NOTE 4: Detailed finish specification or a list of possible treatments if requested. E.g., ANODIZE PER MIL-A-8625, TYPE II, CLASS 2, BLACK.",
    )


class CadNotes(BaseModel):
    """Four numbered drawing notes, ready for display."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    material_description: str = Field(alias="materialDescription")
    grade: str
    general_notes: str = Field(alias="generalNotes")
    finish_notes: str = Field(alias="finishNotes")

    def lines(self) -> list[str]:
        """Return the notes in drawing order."""
        return [
            self.material_description,
            self.grade,
            self.general_notes,
            self.finish_notes,
        ]

    def as_text(self) -> str:
        return "\n".join(self.lines())


class GenerateNotesRequest(BaseModel):
    """Body of a notes generation request. Omitted inputs keep the session's."""

    material: str | None = None
    finish: str | None = None


class AskRequest(BaseModel):
    """Body of an ask-AI request. Material falls back to the session's."""

    question: str = ""
    material: str | None = None
