"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from neon_snake.controller import GameController
from neon_snake.server.session_manager import SessionManager
from neon_snake.snake import Direction

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _encode(frame: dict) -> str:
    return json.dumps(frame, separators=(",", ":"))


async def _dispatch(controller: GameController, msg: dict) -> None:
    """Apply one client message to the controller."""
    key = msg.get("key")
    if isinstance(key, str):
        await controller.handle_key(key)
        return

    direction_str = msg.get("direction")
    if isinstance(direction_str, str):
        direction = Direction.from_name(direction_str)
        if direction is not None:
            controller.submit(direction)
        return

    swipe = msg.get("swipe")
    if isinstance(swipe, dict):
        dx, dy = swipe.get("dx"), swipe.get("dy")
        if isinstance(dx, int | float) and isinstance(dy, int | float):
            controller.handle_swipe(float(dx), float(dy))
        return

    if msg.get("action") == "start":
        await controller.confirm()


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Player WebSocket: send input, receive a state frame every tick."""
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    controller = session.controller

    async def send_frame(frame: dict) -> None:
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.send_text(_encode(frame))

    # The snapshot goes out before any tick frame can reach this client.
    await websocket.send_text(_encode(controller.snapshot()))
    controller.add_listener(send_frame)
    session.connections += 1
    logger.info("Client connected to session %s.", session_id)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue
            await _dispatch(controller, msg)
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    finally:
        controller.remove_listener(send_frame)
        session.connections -= 1
