from .endpoint_base import APIEndpoint

__all__ = (
    "APIEndpoint",
)
