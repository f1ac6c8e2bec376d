"""Shared fixtures for the test suite."""

import pytest

from cad_notes.config import AppSettings
from cad_notes.notes.service import NotesService

from tests.fakes import FakeModelClient


@pytest.fixture
def fake_client():
    return FakeModelClient()


@pytest.fixture
def notes_service(fake_client):
    return NotesService(model_client=fake_client)


@pytest.fixture
def app_settings():
    return AppSettings(
        ai_provider="gemini",
        default_material="Aluminum 6061-T6",
        default_finish="Anodize Black, MIL-A-8625 Type II",
        copied_indicator_seconds=2.0,
        max_sessions=10,
    )
