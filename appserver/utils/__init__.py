from .address import SocketAddress, format_address, resolve_socket_addresses
from .listener import bind_listener
from .log import get_logger, setup_logging

__all__ = (
    "SocketAddress",
    "format_address",
    "resolve_socket_addresses",
    "bind_listener",
    "get_logger",
    "setup_logging",
)
