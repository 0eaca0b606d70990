"""Server middleware."""
from tutorbot.server.middleware.logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
