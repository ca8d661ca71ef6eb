"""REST API route handlers for session control."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snake_sim.server.models import (
    CreateSessionRequest,
    DirectionRequest,
    DirectionResponse,
    SessionSummary,
)
from snake_sim.server.session_manager import (
    RateLimitError,
    SessionInstance,
    SessionManager,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def _get_instance(request: Request, session_id: str) -> SessionInstance:
    instance = _get_manager(request).get_session(session_id)
    if instance is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return instance


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new idle session."""
    manager = _get_manager(request)
    client_ip = request.client.host if request.client else "unknown"
    try:
        instance = manager.create_session(
            grid_size=body.grid_size,
            turn_mode=body.turn_mode,
            seed=body.seed,
            client_ip=client_ip,
        )
    except RateLimitError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    return instance.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List registered sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get the session's current state snapshot."""
    instance = _get_instance(request, session_id)
    return {
        "session_id": session_id,
        "high_score": instance.session.high_score,
        "state": instance.session.state.to_dict(),
    }


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request) -> None:
    """Stop and remove a session."""
    if not _get_manager(request).close_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found.")


@router.post("/{session_id}/start")
async def start(session_id: str, request: Request) -> dict:
    session = _get_instance(request, session_id).session
    session.start()
    return session.state.to_dict()


@router.post("/{session_id}/pause")
async def pause(session_id: str, request: Request) -> dict:
    session = _get_instance(request, session_id).session
    session.pause()
    return session.state.to_dict()


@router.post("/{session_id}/toggle")
async def toggle(session_id: str, request: Request) -> dict:
    session = _get_instance(request, session_id).session
    session.toggle()
    return session.state.to_dict()


@router.post("/{session_id}/reset")
async def reset(session_id: str, request: Request) -> dict:
    session = _get_instance(request, session_id).session
    return session.reset().to_dict()


@router.post("/{session_id}/direction")
async def submit_direction(
    session_id: str, body: DirectionRequest, request: Request,
) -> DirectionResponse:
    """Offer a heading for the next tick. Illegal turns are not errors."""
    session = _get_instance(request, session_id).session
    return DirectionResponse(accepted=session.submit_direction(body.direction))
