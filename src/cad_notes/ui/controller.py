"""
UI controller for one browser session.

Holds the form inputs and the two independent action slots (notes
generation and ask-AI), and applies request results to them. Results that
arrive after their slot was restarted, invalidated or the controller closed
are discarded.
"""

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel

from cad_notes.notes.schemas import CadNotes
from cad_notes.notes.service import NotesService
from cad_notes.utils.logger import logger

MISSING_MATERIAL_MESSAGE = "Please enter a material."
NOTES_ERROR_MESSAGE = "Failed to generate notes. Please check your input and try again."
ASK_ERROR_MESSAGE = "Failed to get an answer from the AI. Please try again."


class ActionStatus(str, Enum):
    """Lifecycle of a single action slot."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class ActionSlot:
    """Status of one action plus a token identifying its latest request."""

    status: ActionStatus = ActionStatus.IDLE
    token: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status is ActionStatus.LOADING

    def start(self) -> int:
        self.token += 1
        self.status = ActionStatus.LOADING
        return self.token

    def invalidate(self) -> None:
        self.token += 1
        self.status = ActionStatus.IDLE


class ControllerState(BaseModel):
    """Serializable snapshot of a session's UI state."""

    material: str
    finish: str
    ask_query: str
    notes: list[str] | None
    notes_text: str | None
    ask_response: str
    error: str
    is_copied: bool
    notes_status: ActionStatus
    ask_status: ActionStatus


class NotesController:
    """State machine behind the notes form and the ask-AI box."""

    def __init__(
        self,
        service: NotesService,
        material: str = "",
        finish: str = "",
        copied_indicator_seconds: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the controller.

        Args:
            service: Notes service used by both actions
            material: Initial material input
            finish: Initial finish input
            copied_indicator_seconds: How long is_copied stays True after a copy
            clock: Monotonic time source
        """
        self.service = service
        self.material = material
        self.finish = finish
        self.ask_query = ""

        self.notes: CadNotes | None = None
        self.ask_response = ""
        self.error = ""

        self.notes_slot = ActionSlot()
        self.ask_slot = ActionSlot()

        self.copied_indicator_seconds = copied_indicator_seconds
        self._clock = clock
        self._copied_until: float | None = None
        self.closed = False

    @property
    def is_copied(self) -> bool:
        return self._copied_until is not None and self._clock() < self._copied_until

    def update_inputs(
        self,
        material: str | None = None,
        finish: str | None = None,
        ask_query: str | None = None,
    ) -> None:
        if material is not None:
            self.material = material
        if finish is not None:
            self.finish = finish
        if ask_query is not None:
            self.ask_query = ask_query

    def _accepts(self, slot: ActionSlot, token: int) -> bool:
        return not self.closed and token == slot.token

    async def generate_notes(self) -> None:
        """Run the notes generation action with the current inputs."""
        if not self.material.strip():
            self.error = MISSING_MATERIAL_MESSAGE
            return
        if self.notes_slot.is_loading:
            logger.debug("Notes generation already in flight, ignoring trigger")
            return

        token = self.notes_slot.start()
        self.error = ""
        self.notes = None
        self._copied_until = None
        # Any answer about the previous notes is stale now.
        self.ask_response = ""
        if self.ask_slot.is_loading:
            self.ask_slot.invalidate()
        material, finish = self.material, self.finish

        try:
            notes = await self.service.generate_notes(material, finish)
        except asyncio.CancelledError:
            if self._accepts(self.notes_slot, token):
                self.notes_slot.invalidate()
            raise
        except Exception as e:
            if not self._accepts(self.notes_slot, token):
                logger.info("Discarding stale notes failure", error=str(e))
                return
            logger.error(
                "Failed to generate notes",
                material=material,
                error=str(e),
                error_type=type(e).__name__,
            )
            self.notes = None
            self.error = NOTES_ERROR_MESSAGE
            self.notes_slot.status = ActionStatus.FAILED
            return

        if not self._accepts(self.notes_slot, token):
            logger.info("Discarding stale notes result", material=material)
            return
        self.notes = notes
        self.error = ""
        self.notes_slot.status = ActionStatus.SUCCEEDED

    async def ask_ai(self) -> None:
        """Run the ask-AI action with the current material and question."""
        if not self.ask_query.strip() or not self.material.strip():
            return
        if self.ask_slot.is_loading:
            logger.debug("Ask-AI request already in flight, ignoring trigger")
            return

        token = self.ask_slot.start()
        self.ask_response = ""
        self.error = ""
        material, question = self.material, self.ask_query

        try:
            answer = await self.service.ask_about_material(material, question)
        except asyncio.CancelledError:
            if self._accepts(self.ask_slot, token):
                self.ask_slot.invalidate()
            raise
        except Exception as e:
            if not self._accepts(self.ask_slot, token):
                logger.info("Discarding stale ask-AI failure", error=str(e))
                return
            logger.error(
                "Failed to get an answer",
                material=material,
                error=str(e),
                error_type=type(e).__name__,
            )
            self.ask_response = ""
            self.error = ASK_ERROR_MESSAGE
            self.ask_slot.status = ActionStatus.FAILED
            return

        if not self._accepts(self.ask_slot, token):
            logger.info("Discarding stale ask-AI result", material=material)
            return
        self.ask_response = answer
        self.error = ""
        self.ask_slot.status = ActionStatus.SUCCEEDED

    def copy_notes(self, writer: Callable[[str], None] | None = None) -> str | None:
        """Copy the notes as four newline-separated lines.

        Args:
            writer: Receives the text, e.g. a clipboard write

        Returns:
            The copied text, or None when there are no notes to copy
        """
        if self.notes is None or self.notes_slot.status is not ActionStatus.SUCCEEDED:
            return None

        text = self.notes.as_text()
        if writer is not None:
            writer(text)
        self._copied_until = self._clock() + self.copied_indicator_seconds
        return text

    def close(self) -> None:
        """Detach the controller; in-flight results will be dropped."""
        self.closed = True
        self._copied_until = None

    def snapshot(self) -> ControllerState:
        return ControllerState(
            material=self.material,
            finish=self.finish,
            ask_query=self.ask_query,
            notes=self.notes.lines() if self.notes else None,
            notes_text=self.notes.as_text() if self.notes else None,
            ask_response=self.ask_response,
            error=self.error,
            is_copied=self.is_copied,
            notes_status=self.notes_slot.status,
            ask_status=self.ask_slot.status,
        )
