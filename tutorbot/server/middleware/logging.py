"""Request logging middleware."""
import logging
import re
import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger("tutorbot.server")

QUIET_PATHS = frozenset({"/health"})
_SESSION_PATH = re.compile(r"^/sessions/(?P<session_id>[^/]+)")


def session_id_from_path(path: str) -> Optional[str]:
    """Extract the session id from ``/sessions/{id}/...`` paths."""
    match = _SESSION_PATH.match(path)
    return match.group("session_id") if match else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its status, duration and session id.

    Health probes are logged at DEBUG; server errors at WARNING. Request
    bodies are never logged since they carry student messages.
    """

    def __init__(self, app: ASGIApp, quiet_paths: frozenset[str] = QUIET_PATHS) -> None:
        super().__init__(app)
        self._quiet_paths = quiet_paths

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:
        start_time = time.perf_counter()
        path = request.url.path
        session_id = session_id_from_path(path) or "-"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        if path in self._quiet_paths:
            level = logging.DEBUG
        elif response.status_code >= 500:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level, "%s %s session=%s status=%d duration=%.2fms",
            request.method, path, session_id, response.status_code, duration_ms,
        )
        return response
