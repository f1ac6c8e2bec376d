"""
Routes for the notes page and its JSON actions.

Every action returns the session's ControllerState; the page script only
renders what it receives.
"""

from http import HTTPStatus
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from cad_notes.config import AppSettings
from cad_notes.notes.schemas import AskRequest, GenerateNotesRequest
from cad_notes.ui.controller import ControllerState, NotesController
from cad_notes.ui.dependencies import (
    get_controller,
    get_session_id,
    get_session_registry,
    get_settings,
)
from cad_notes.ui.sessions import SessionRegistry
from cad_notes.utils.logger import logger

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

page_router = APIRouter(tags=["Page"])
router = APIRouter(prefix="/notes", tags=["Notes"])


class CopyResponse(BaseModel):
    """Text to place on the clipboard plus the updated state."""

    text: str
    state: ControllerState


@page_router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    settings: AppSettings = Depends(get_settings),
    sessions: SessionRegistry = Depends(get_session_registry),
) -> HTMLResponse:
    """Render the notes page for the caller's session."""
    session_id = request.cookies.get(settings.session_cookie_name)
    is_new_session = not session_id
    if is_new_session:
        session_id = SessionRegistry.new_session_id()

    controller = sessions.get(session_id)
    response = templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": controller.snapshot(),
            "copied_indicator_ms": int(settings.copied_indicator_seconds * 1000),
        },
    )
    if is_new_session:
        response.set_cookie(
            settings.session_cookie_name, session_id, httponly=True, samesite="lax"
        )
    return response


@router.get("/state", response_model=ControllerState)
async def get_state(
    controller: NotesController = Depends(get_controller),
) -> ControllerState:
    return controller.snapshot()


@router.post("/generate", response_model=ControllerState)
async def generate_notes(
    body: GenerateNotesRequest,
    controller: NotesController = Depends(get_controller),
) -> ControllerState:
    """
    Generate notes for the submitted material and finish.

    Failures are reported through the state's error field, not the HTTP
    status.
    """
    controller.update_inputs(material=body.material, finish=body.finish)
    await controller.generate_notes()
    return controller.snapshot()


@router.post("/ask", response_model=ControllerState)
async def ask_ai(
    body: AskRequest,
    controller: NotesController = Depends(get_controller),
) -> ControllerState:
    """Answer a follow-up question about the session's material."""
    controller.update_inputs(material=body.material, ask_query=body.question)
    await controller.ask_ai()
    return controller.snapshot()


@router.post("/copy", response_model=CopyResponse)
async def copy_notes(
    controller: NotesController = Depends(get_controller),
) -> CopyResponse:
    """Return the notes text for the browser to place on the clipboard."""
    text = controller.copy_notes()
    if text is None:
        raise HTTPException(
            status_code=HTTPStatus.CONFLICT, detail="No notes to copy"
        )
    return CopyResponse(text=text, state=controller.snapshot())


@router.delete("/session", status_code=HTTPStatus.NO_CONTENT)
async def end_session(
    session_id: str = Depends(get_session_id),
    sessions: SessionRegistry = Depends(get_session_registry),
) -> None:
    if sessions.discard(session_id):
        logger.info("Session ended", session_id=session_id)
