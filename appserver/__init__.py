from .app_server import Server
from .exceptions import BindError, InvalidAddressError, ServeError
from .router import create_router
from .state import AppState
from .utils.config import AppConfig, ServerConfig

__version__ = "1.0.0"

__all__ = (
    "Server",
    "ServerConfig",
    "AppConfig",
    "AppState",
    "create_router",
    "InvalidAddressError",
    "BindError",
    "ServeError",
)
