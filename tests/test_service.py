"""Tests for NotesService and its prompts."""

import json

import pytest

from cad_notes.exceptions import (
    MalformedResponseError,
    MissingInputError,
    ModelInvocationError,
)
from cad_notes.notes.prompts import (
    build_ask_prompt,
    build_generic_treatment_prompt,
    build_notes_prompt,
    build_specific_finish_prompt,
)
from cad_notes.notes.schemas import CadNotes, CadNotesSchema
from cad_notes.notes.service import NotesService

from tests.fakes import EXPECTED_LINES, SAMPLE_NOTES, FakeModelClient


class TestPrompts:
    """Test suite for prompt templates."""

    def test_specific_prompt_embeds_inputs_and_asks_for_caps(self):
        prompt = build_specific_finish_prompt(
            "Aluminum 6061-T6", "Anodize Black, MIL-A-8625 Type II"
        )

        assert 'Material: "Aluminum 6061-T6"' in prompt
        assert 'Finish: "Anodize Black, MIL-A-8625 Type II"' in prompt
        assert "ALL CAPS" in prompt

    def test_generic_prompt_asks_for_options(self):
        prompt = build_generic_treatment_prompt("Titanium")

        assert 'Material: "Titanium"' in prompt
        assert "possible treatments" in prompt
        assert "list the possible options" in prompt
        assert "Finish:" not in prompt

    def test_notes_prompt_picks_path_from_finish(self):
        assert build_notes_prompt("Titanium", "treatment") == (
            build_generic_treatment_prompt("Titanium")
        )
        assert build_notes_prompt("Titanium", "Passivate per AMS 2700") == (
            build_specific_finish_prompt("Titanium", "Passivate per AMS 2700")
        )

    def test_prompts_have_no_leading_indentation(self):
        for line in build_specific_finish_prompt("Steel", "Zinc plate").splitlines():
            assert not line.startswith(" ")

    def test_ask_prompt_embeds_material_and_question(self):
        prompt = build_ask_prompt("Titanium", "What is its density?")

        assert '"Titanium"' in prompt
        assert 'Question: "What is its density?"' in prompt
        assert "AMS, ASTM, MIL-SPEC" in prompt


class TestGenerateNotes:
    """Test suite for NotesService.generate_notes."""

    @pytest.mark.asyncio
    async def test_specific_finish_scenario(self, notes_service, fake_client):
        """A fully specified finish takes the specific prompt path."""
        notes = await notes_service.generate_notes(
            "Aluminum 6061-T6", "Anodize Black, MIL-A-8625 Type II"
        )

        assert isinstance(notes, CadNotes)
        assert notes.lines() == EXPECTED_LINES

        call = fake_client.structured_calls[0]
        assert call["response_schema"] is CadNotesSchema
        assert call["prompt"] == build_specific_finish_prompt(
            "Aluminum 6061-T6", "Anodize Black, MIL-A-8625 Type II"
        )

    @pytest.mark.asyncio
    async def test_generic_treatment_scenario(self):
        """A vague finish takes the options path; finish note lists options."""
        client = FakeModelClient(
            structured_text=json.dumps(
                {
                    **SAMPLE_NOTES,
                    "materialDescription": "TITANIUM 6AL-4V BAR",
                    "finishNotes": "FINISH OPTIONS: PASSIVATE PER AMS 2700; ANODIZE PER AMS 2488 TYPE 2; BEAD BLAST",
                }
            )
        )
        service = NotesService(model_client=client)

        notes = await service.generate_notes("Titanium", "treatment")

        assert client.structured_calls[0]["prompt"] == build_generic_treatment_prompt(
            "Titanium"
        )
        assert notes.finish_notes.startswith("4. FINISH OPTIONS:")
        assert notes.finish_notes.count(";") >= 2
        assert [line[:3] for line in notes.lines()] == ["1. ", "2. ", "3. ", "4. "]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("material", ["", "   "])
    async def test_blank_material_never_calls_model(self, notes_service, fake_client, material):
        with pytest.raises(MissingInputError):
            await notes_service.generate_notes(material, "Passivate")

        assert fake_client.structured_calls == []

    @pytest.mark.asyncio
    async def test_model_failure_propagates(self):
        client = FakeModelClient(error=ModelInvocationError("connection reset"))
        service = NotesService(model_client=client)

        with pytest.raises(ModelInvocationError):
            await service.generate_notes("Aluminum 6061-T6", "Passivate")

    @pytest.mark.asyncio
    async def test_invalid_json_is_malformed(self):
        service = NotesService(model_client=FakeModelClient(structured_text="Sure! Here are your notes"))

        with pytest.raises(MalformedResponseError):
            await service.generate_notes("Aluminum 6061-T6", "Passivate")

    @pytest.mark.asyncio
    async def test_missing_field_is_malformed(self):
        data = {k: v for k, v in SAMPLE_NOTES.items() if k != "finishNotes"}
        service = NotesService(model_client=FakeModelClient(structured_text=json.dumps(data)))

        with pytest.raises(MalformedResponseError):
            await service.generate_notes("Aluminum 6061-T6", "Passivate")


class TestAskAboutMaterial:
    """Test suite for NotesService.ask_about_material."""

    @pytest.mark.asyncio
    async def test_returns_trimmed_answer(self, notes_service, fake_client):
        answer = await notes_service.ask_about_material(
            "Aluminum 6061-T6", "What is its tensile strength?"
        )

        assert answer == "6061-T6 has a tensile strength of 45 ksi per ASTM B209."
        assert fake_client.text_calls[0]["prompt"] == build_ask_prompt(
            "Aluminum 6061-T6", "What is its tensile strength?"
        )
        assert fake_client.structured_calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "material,question", [("", "Density?"), ("Titanium", ""), ("  ", "  ")]
    )
    async def test_blank_inputs_never_call_model(
        self, notes_service, fake_client, material, question
    ):
        with pytest.raises(MissingInputError):
            await notes_service.ask_about_material(material, question)

        assert fake_client.text_calls == []

    @pytest.mark.asyncio
    async def test_model_failure_propagates(self):
        client = FakeModelClient(error=ModelInvocationError("503 unavailable", status_code=503))
        service = NotesService(model_client=client)

        with pytest.raises(ModelInvocationError) as exc_info:
            await service.ask_about_material("Titanium", "Density?")
        assert exc_info.value.status_code == 503
