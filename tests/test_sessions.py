"""Tests for the in-memory session registry."""

import pytest

from cad_notes.config import AppSettings
from cad_notes.ui.sessions import SessionRegistry


@pytest.fixture
def registry(notes_service, app_settings):
    return SessionRegistry(service=notes_service, settings=app_settings)


class TestSessionRegistry:
    """Test suite for SessionRegistry."""

    def test_new_session_gets_default_inputs(self, registry):
        controller = registry.get("abc")

        assert controller.material == "Aluminum 6061-T6"
        assert controller.finish == "Anodize Black, MIL-A-8625 Type II"
        assert controller.copied_indicator_seconds == 2.0

    def test_same_id_returns_same_controller(self, registry):
        assert registry.get("abc") is registry.get("abc")
        assert len(registry) == 1

    def test_sessions_are_independent(self, registry):
        registry.get("a").update_inputs(material="Titanium")

        assert registry.get("b").material == "Aluminum 6061-T6"

    def test_discard_closes_controller(self, registry):
        controller = registry.get("abc")

        assert registry.discard("abc") is True
        assert controller.closed is True
        assert "abc" not in registry
        assert registry.discard("abc") is False

    def test_evicts_least_recently_used(self, notes_service):
        registry = SessionRegistry(
            service=notes_service, settings=AppSettings(max_sessions=2)
        )
        first = registry.get("first")
        second = registry.get("second")
        registry.get("first")

        registry.get("third")

        assert "second" not in registry
        assert second.closed is True
        assert first.closed is False
        assert len(registry) == 2

    def test_close_all(self, registry):
        controllers = [registry.get(name) for name in ("a", "b")]

        registry.close_all()

        assert len(registry) == 0
        assert all(controller.closed for controller in controllers)

    def test_new_session_ids_are_unique(self):
        assert SessionRegistry.new_session_id() != SessionRegistry.new_session_id()
