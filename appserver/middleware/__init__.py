from .cors import CORSMiddleware, PERMISSIVE_CORS_OPTIONS
from .pipeline import MiddlewareLayer, attach_layers, pipeline_layers
from .request_id import REQUEST_ID_HEADER, request_id_middleware
from .request_logging import logging_middleware
from .tracing import TracingMiddleware

__all__ = (
    "CORSMiddleware",
    "PERMISSIVE_CORS_OPTIONS",
    "MiddlewareLayer",
    "attach_layers",
    "pipeline_layers",
    "REQUEST_ID_HEADER",
    "request_id_middleware",
    "logging_middleware",
    "TracingMiddleware",
)
