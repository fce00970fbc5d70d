from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError
import logging

from app.modules.chat.schemas import ChatEvent, SendMessagePayload
from app.modules.chat.services import ConnectionManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


async def handle_event(manager: ConnectionManager, sid: str, event: ChatEvent) -> None:
    """Dispatch one client frame; unknown or malformed frames are ignored"""
    if event.event == "joinRoom":
        if not isinstance(event.data, str) or not event.data:
            logger.warning(f"Ignoring joinRoom without a room id from {sid}")
            return
        manager.join(sid, event.data)
        logger.info(f"{sid} joined room: {event.data}")

    elif event.event == "sendMessage":
        try:
            payload = SendMessagePayload.model_validate(event.data)
        except ValidationError:
            logger.warning(f"Ignoring malformed sendMessage payload from {sid}")
            return
        await manager.send_message(payload.room_id, payload.message, payload.sender)

    else:
        logger.debug(f"Ignoring unknown chat event {event.event!r} from {sid}")


@router.websocket("/ws")
async def chat_socket(websocket: WebSocket):
    """
    Room-scoped chat relay.

    Client frames: {"event": "joinRoom", "data": "<roomId>"} and
    {"event": "sendMessage", "data": {"roomId", "message", "sender"}}.
    Members of the room receive {"event": "receiveMessage", "data":
    {"message", "sender", "timestamp"}}.
    """
    manager: ConnectionManager = websocket.app.state.chat_manager
    sid = await manager.connect(websocket)
    logger.info(f"User connected: {sid}")
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                logger.warning(f"Ignoring binary chat frame from {sid}")
                continue
            try:
                event = ChatEvent.model_validate_json(raw)
            except ValidationError:
                logger.warning(f"Ignoring unparseable chat frame from {sid}")
                continue
            await handle_event(manager, sid, event)
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(sid)
        logger.info(f"User disconnected: {sid}")
