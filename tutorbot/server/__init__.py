"""HTTP server for the tutor bot."""
from tutorbot.server.app import create_app
from tutorbot.server.config import ServerConfig, load_config_from_env

__all__ = ["ServerConfig", "create_app", "load_config_from_env"]
