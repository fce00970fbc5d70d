# Chat module
from app.modules.chat.services import ConnectionManager
from app.modules.chat.router import router

__all__ = ["ConnectionManager", "router"]
