"""FastAPI application factory."""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tutorbot import __version__
from tutorbot.completion.client import CompletionClient
from tutorbot.server.chat_service import ChatService, CompletionBackend
from tutorbot.server.config import ServerConfig, load_config_from_env
from tutorbot.server.errors import TutorBotError
from tutorbot.server.middleware.logging import RequestLoggingMiddleware
from tutorbot.server.models.responses import ErrorDetail, ErrorResponse
from tutorbot.server.routes.chat import create_chat_router
from tutorbot.server.routes.health import create_health_router
from tutorbot.server.routes.modes import create_modes_router
from tutorbot.server.routes.sessions import create_sessions_router
from tutorbot.sessions.store import SessionStore
from tutorbot.sessions.sweeper import ExpirySweeper

logger = logging.getLogger(__name__)


def _build_completion_client(config: ServerConfig) -> CompletionClient:
    cfg = config.completion
    return CompletionClient(
        api_key=cfg.api_key,
        base_url=cfg.base_url,
        model=cfg.model,
        max_tokens=cfg.max_tokens,
        temperature=cfg.temperature,
        timeout=cfg.timeout,
    )


def create_app(
    config: Optional[ServerConfig] = None,
    completion: Optional[CompletionBackend] = None,
    store: Optional[SessionStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    When called without arguments (e.g. via uvicorn --factory), loads
    configuration from environment variables. ``completion`` and ``store``
    may be injected, which tests use to stub the model.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if config is None:
        config = load_config_from_env()

    if store is None:
        store = SessionStore(
            max_history=config.sessions.max_history,
            expiry_minutes=config.sessions.expiry_minutes,
        )
    if completion is None:
        completion = _build_completion_client(config)
    service = ChatService(store, completion)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        sweeper: Optional[ExpirySweeper] = None
        if config.sweep.enabled:
            sweeper = ExpirySweeper(
                store,
                interval_seconds=config.sweep.interval_minutes * 60,
                threshold_minutes=config.sessions.expiry_minutes,
            )
            sweeper.start()
        else:
            logger.info("Session sweep disabled")
        app.state.sweeper = sweeper

        if not completion.is_ready():
            logger.warning("Completion API key not configured, /chat will answer 503")
        yield
        if sweeper is not None:
            await sweeper.stop()

    app = FastAPI(
        title="TP Tutor Bot",
        description="Conversation sessions for a lab-assistant chat bot",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_exception_handler(TutorBotError, _tutorbot_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    app.include_router(create_health_router(store, completion))
    app.include_router(create_sessions_router(store, service))
    app.include_router(create_chat_router(service))
    app.include_router(create_modes_router())
    return app


def _error_response(status_code: int, code: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    response = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=response.model_dump(by_alias=True))


async def _tutorbot_error_handler(request: Request, exc: TutorBotError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.error_code, exc.message, exc.details)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")} for e in exc.errors()]
    return _error_response(400, "INVALID_FORMAT", "Request validation failed", {"validationErrors": errors})


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _error_response(404, "NOT_FOUND", f"Route not found: {request.method} {request.url.path}")
    code = "INVALID_REQUEST" if exc.status_code < 500 else "INTERNAL_ERROR"
    return _error_response(exc.status_code, code, str(exc.detail))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "INTERNAL_ERROR", "Internal server error")
