"""Run the HTTP API."""
from typing import Optional

import uvicorn

from tutorbot.server.config import load_config_from_env

APP_FACTORY = "tutorbot.server.app:create_app"


def serve_command(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Serve the API with uvicorn; unset host/port come from the environment."""
    config = load_config_from_env()
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host or config.host,
        port=port or config.port,
        reload=reload,
        log_level="info",
    )
