from .health_status import HealthStatus

__all__ = (
    "HealthStatus",
)
