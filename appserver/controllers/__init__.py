from .health_endpoint import HealthEndpoint

__all__ = (
    "HealthEndpoint",
)
