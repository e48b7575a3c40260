from .bind_error import BindError
from .invalid_address import InvalidAddressError
from .serve_error import ServeError

__all__ = (
    "InvalidAddressError",
    "BindError",
    "ServeError",
)
