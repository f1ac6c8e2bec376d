"""
FastAPI dependencies for the notes UI.

Settings and the session registry are built once in create_app() and kept on
app.state; these functions expose them to routes.
"""

from fastapi import Depends, Request, Response

from cad_notes.config import AppSettings
from cad_notes.ui.controller import NotesController
from cad_notes.ui.sessions import SessionRegistry


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_session_id(
    request: Request,
    response: Response,
    settings: AppSettings = Depends(get_settings),
) -> str:
    """
    Read the session cookie, issuing a new session id when it is absent.

    Args:
        request: Incoming request
        response: Response the cookie is set on
        settings: Application settings naming the cookie

    Returns:
        str: The session id
    """
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        session_id = SessionRegistry.new_session_id()
        response.set_cookie(
            settings.session_cookie_name,
            session_id,
            httponly=True,
            samesite="lax",
        )
    return session_id


def get_controller(
    session_id: str = Depends(get_session_id),
    sessions: SessionRegistry = Depends(get_session_registry),
) -> NotesController:
    return sessions.get(session_id)
