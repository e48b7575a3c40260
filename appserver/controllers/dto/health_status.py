from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """
    Описывает ответ проверки работоспособности сервера.
    """
    ok: bool
    service: str
    uptime_seconds: float = Field(ge=0)
