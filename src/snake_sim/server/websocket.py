"""WebSocket handler streaming session state and accepting player input."""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from snake_sim.engine import GameState
from snake_sim.server.session_manager import SessionManager
from snake_sim.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _encode(state: GameState) -> str:
    return json.dumps(state.to_dict(), separators=(",", ":"))


def _dispatch(session: GameSession, msg: dict) -> None:
    """Apply one client message. Unknown or malformed fields are ignored."""
    if "direction" in msg:
        session.submit_direction(msg["direction"])
    elif "key" in msg:
        session.submit_key(msg["key"])
    elif "swipe" in msg:
        swipe = msg["swipe"]
        if isinstance(swipe, list) and len(swipe) == 2:
            session.submit_swipe(swipe[0], swipe[1])
    elif "action" in msg:
        action = msg["action"]
        if action == "start":
            session.start()
        elif action == "pause":
            session.pause()
        elif action == "toggle":
            session.toggle()
        elif action == "reset":
            session.reset()


async def _pump(
    websocket: WebSocket, queue: asyncio.Queue[GameState | None],
) -> None:
    """Forward queued snapshots to the client until cancelled.

    A ``None`` in the queue means the session was closed; the socket is
    closed with code 4004 so the client stops waiting for snapshots.
    """
    while True:
        state = await queue.get()
        if websocket.client_state != WebSocketState.CONNECTED:
            return
        if state is None:
            try:
                await websocket.close(code=4004, reason="Session closed.")
            except Exception:
                logger.debug("Socket already closed.")
            return
        try:
            await websocket.send_text(_encode(state))
        except Exception:
            logger.debug("Dropping snapshot for a closed socket.")
            return


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Player WebSocket: send input, receive a snapshot on every change."""
    instance = _get_manager(websocket).get_session(session_id)
    if instance is None:
        await websocket.close(code=4004, reason="Session not found.")
        return
    session = instance.session

    await websocket.accept()
    logger.info("Client connected to session %s.", session_id)

    # Sinks run on the event loop thread, so put_nowait is safe here.
    queue: asyncio.Queue[GameState | None] = asyncio.Queue()
    unsubscribe = session.subscribe(queue.put_nowait)
    remove_close_listener = session.on_close(lambda: queue.put_nowait(None))
    if session.closed:
        queue.put_nowait(None)
    await websocket.send_text(_encode(session.state))
    sender = asyncio.create_task(_pump(websocket, queue))

    try:
        while websocket.application_state == WebSocketState.CONNECTED:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue
            _dispatch(session, msg)
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    finally:
        unsubscribe()
        remove_close_listener()
        sender.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sender
