from pydantic import BaseModel, Field
from datetime import datetime
from typing import Any

from app.core.schemas import CamelModel


class ChatEvent(BaseModel):
    """Envelope for every frame exchanged on the chat socket"""
    event: str
    data: Any = None


class SendMessagePayload(CamelModel):
    room_id: str = Field(..., min_length=1)
    message: str
    sender: str


class ReceivedMessage(BaseModel):
    message: str
    sender: str
    timestamp: datetime
