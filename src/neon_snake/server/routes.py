"""REST API route handlers for session lifecycle management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from neon_snake.server.models import (
    BestScoreResponse,
    CreateSessionRequest,
    SessionSummary,
    ViewportRequest,
)
from neon_snake.server.session_manager import SessionManager

router = APIRouter(prefix="/sessions", tags=["sessions"])
scores_router = APIRouter(prefix="/scores", tags=["scores"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new idle game session."""
    manager = _get_manager(request)
    try:
        session = manager.create_session(
            width=body.width,
            height=body.height,
            viewport_width=body.viewport_width,
            viewport_height=body.viewport_height,
            tick_rate_ms=body.tick_rate_ms,
            seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List all sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata together with a full state snapshot."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    result = session.summary().model_dump(mode="json")
    result["frame"] = session.controller.snapshot()
    return result


@router.post("/{session_id}/start", status_code=200)
async def start_session(session_id: str, request: Request) -> dict:
    """Start a new run (from idle or after game over)."""
    manager = _get_manager(request)
    try:
        session = await manager.start_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return {"status": "started", "session_id": session.session_id}


@router.post("/{session_id}/viewport", status_code=200)
async def resize_session(
    session_id: str, body: ViewportRequest, request: Request,
) -> dict:
    """Record a new grid size; it applies from the next run."""
    manager = _get_manager(request)
    try:
        session = manager.resize_session(
            session_id,
            width=body.width,
            height=body.height,
            viewport_width=body.viewport_width,
            viewport_height=body.viewport_height,
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    dims = session.controller.engine.dimensions
    return {"session_id": session_id, "width": dims.width, "height": dims.height}


@scores_router.get("/best")
async def best_score(request: Request) -> BestScoreResponse:
    return BestScoreResponse(best_score=_get_manager(request).best_score)
