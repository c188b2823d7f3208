from fastapi import Depends, Header, Request

from services.archive.SessionRegistry import SessionRegistry
from services.archive.SessionStateHolder import SessionStateHolder


async def get_session_id(x_session_id: str = Header(default="default")) -> str:
    """Session identifier chosen by the front-end; "default" if absent or blank."""
    return x_session_id.strip() or "default"


async def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.session_registry


async def get_session(
    session_id: str = Depends(get_session_id),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStateHolder:
    """Resolve the caller's session from the X-Session-Id header.

    Args:
        session_id (str): The resolved session identifier.
        registry (SessionRegistry): The app-wide session registry (from app.state).

    Returns:
        SessionStateHolder: The existing or newly created session.
    """
    return registry.get_session(session_id)
