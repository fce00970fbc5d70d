from fastapi import WebSocket
from datetime import datetime, timezone
from typing import Dict, List, Set
import logging
import uuid

from app.modules.chat.schemas import ChatEvent, ReceivedMessage

logger = logging.getLogger(__name__)

RECEIVE_MESSAGE = "receiveMessage"


class ConnectionManager:
    """
    In-process registry of chat sockets and the rooms they joined.

    Membership lives only as long as the connection; nothing is persisted
    and nothing is shared between server processes.
    """

    def __init__(self):
        self.connections: Dict[str, WebSocket] = {}
        self.rooms: Dict[str, Set[str]] = {}
        self.memberships: Dict[str, Set[str]] = {}

    async def connect(self, websocket: WebSocket) -> str:
        """Accept the socket and return its connection id"""
        await websocket.accept()
        sid = uuid.uuid4().hex
        self.connections[sid] = websocket
        self.memberships[sid] = set()
        return sid

    def join(self, sid: str, room_id: str) -> None:
        """Add the connection to a room; joining twice is a no-op"""
        if sid not in self.connections:
            return
        self.rooms.setdefault(room_id, set()).add(sid)
        self.memberships[sid].add(room_id)

    def disconnect(self, sid: str) -> None:
        """Forget the connection and drop it from every room it joined"""
        self.connections.pop(sid, None)
        for room_id in self.memberships.pop(sid, set()):
            members = self.rooms.get(room_id)
            if members is None:
                continue
            members.discard(sid)
            if not members:
                del self.rooms[room_id]

    def members(self, room_id: str) -> List[str]:
        return list(self.rooms.get(room_id, ()))

    async def send_message(self, room_id: str, message: str, sender: str) -> ReceivedMessage:
        """Relay a message to everyone currently in the room, sender included"""
        payload = ReceivedMessage(
            message=message,
            sender=sender,
            timestamp=datetime.now(timezone.utc)
        )
        await self.broadcast(room_id, ChatEvent(event=RECEIVE_MESSAGE, data=payload.model_dump(mode="json")))
        return payload

    async def broadcast(self, room_id: str, event: ChatEvent) -> None:
        frame = event.model_dump(mode="json")
        # Snapshot: members may disconnect while sends are pending
        for sid in self.members(room_id):
            websocket = self.connections.get(sid)
            if websocket is None:
                continue
            try:
                await websocket.send_json(frame)
            except Exception as e:
                logger.warning(f"Dropping chat socket {sid} after failed send to room {room_id}: {str(e)}")
                self.disconnect(sid)
