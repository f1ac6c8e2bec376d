"""In-memory registry of per-browser-session controllers."""

import uuid
from collections import OrderedDict

from cad_notes.config import AppSettings
from cad_notes.notes.service import NotesService
from cad_notes.ui.controller import NotesController
from cad_notes.utils.logger import logger


class SessionRegistry:
    """Least-recently-used map from session id to NotesController."""

    def __init__(self, service: NotesService, settings: AppSettings):
        self.service = service
        self.settings = settings
        self._controllers: OrderedDict[str, NotesController] = OrderedDict()

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._controllers

    @staticmethod
    def new_session_id() -> str:
        return uuid.uuid4().hex

    def get(self, session_id: str) -> NotesController:
        """Return the session's controller, creating it with the default inputs."""
        controller = self._controllers.get(session_id)
        if controller is not None:
            self._controllers.move_to_end(session_id)
            return controller

        controller = NotesController(
            service=self.service,
            material=self.settings.default_material,
            finish=self.settings.default_finish,
            copied_indicator_seconds=self.settings.copied_indicator_seconds,
        )
        self._controllers[session_id] = controller
        logger.debug("Created session", session_count=len(self._controllers))

        while len(self._controllers) > self.settings.max_sessions:
            evicted_id, evicted = self._controllers.popitem(last=False)
            evicted.close()
            logger.info("Evicted least recently used session", session_id=evicted_id)

        return controller

    def discard(self, session_id: str) -> bool:
        """Close and forget a session.

        Returns:
            bool: True if the session existed
        """
        controller = self._controllers.pop(session_id, None)
        if controller is None:
            return False
        controller.close()
        return True

    def close_all(self) -> None:
        for controller in self._controllers.values():
            controller.close()
        self._controllers.clear()
