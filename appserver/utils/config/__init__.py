from .app_config import AppConfig
from .server_config import ServerConfig

__all__ = (
    "AppConfig",
    "ServerConfig",
)
