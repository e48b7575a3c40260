from typing import Any

from fastapi.middleware.cors import CORSMiddleware

# Any origin, any method, any header; credentials are not allowed with wildcards
PERMISSIVE_CORS_OPTIONS: dict[str, Any] = {
    "allow_origins": ["*"],
    "allow_methods": ["*"],
    "allow_headers": ["*"],
}

__all__ = (
    "CORSMiddleware",
    "PERMISSIVE_CORS_OPTIONS",
)
