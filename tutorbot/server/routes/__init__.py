"""Route handlers for the tutor API."""
from tutorbot.server.routes.chat import create_chat_router
from tutorbot.server.routes.health import create_health_router
from tutorbot.server.routes.modes import create_modes_router
from tutorbot.server.routes.sessions import create_sessions_router

__all__ = [
    "create_chat_router",
    "create_health_router",
    "create_modes_router",
    "create_sessions_router",
]
