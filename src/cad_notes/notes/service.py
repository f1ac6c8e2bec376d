"""
Notes service.

Builds prompts from the material and finish, calls the model client and
normalizes the structured result into numbered drawing notes.
"""

from cad_notes.ai.base import ModelClient
from cad_notes.exceptions import MissingInputError
from cad_notes.notes.classifier import is_generic_treatment_request
from cad_notes.notes.normalizer import normalize_notes, parse_raw_notes
from cad_notes.notes.prompts import build_ask_prompt, build_notes_prompt
from cad_notes.notes.schemas import CadNotes, CadNotesSchema
from cad_notes.utils.logger import logger


class NotesService:
    """Service generating CAD notes and answering questions about materials."""

    def __init__(self, model_client: ModelClient):
        """
        Initialize the notes service.

        Args:
            model_client: Client for the hosted text-generation model
        """
        self.model_client = model_client

    async def generate_notes(self, material: str, finish: str) -> CadNotes:
        """
        Generate the four drawing notes for a material and finish.

        Args:
            material: Material name, e.g. "Aluminum 6061-T6"
            finish: Finish or treatment, e.g. "Anodize Black, MIL-A-8625 Type II"
                    or a vague request such as "treatment"

        Returns:
            CadNotes: Notes prefixed "1. " through "4. "

        Raises:
            MissingInputError: If material is blank
            ModelInvocationError: If the model call fails
            MalformedResponseError: If the response is not valid notes JSON
        """
        if not material.strip():
            raise MissingInputError("Please enter a material.")

        generic = is_generic_treatment_request(finish)
        logger.info(
            "Generating CAD notes",
            material=material,
            finish=finish,
            generic_treatment=generic,
        )

        prompt = build_notes_prompt(material, finish)
        result = await self.model_client.generate_structured(
            prompt=prompt, response_schema=CadNotesSchema
        )
        notes = normalize_notes(parse_raw_notes(result.text))

        logger.info("Generated CAD notes", material=material, model=result.model)
        return notes

    async def ask_about_material(self, material: str, question: str) -> str:
        """
        Answer a free-text question about a material.

        Args:
            material: Material the question is about
            question: The user's question

        Returns:
            str: The model's answer, trimmed

        Raises:
            MissingInputError: If material or question is blank
            ModelInvocationError: If the model call fails
        """
        if not material.strip() or not question.strip():
            raise MissingInputError("Please enter a material and a question.")

        logger.info("Asking about material", material=material, question=question)
        result = await self.model_client.generate_text(
            prompt=build_ask_prompt(material, question)
        )
        return result.text.strip()
