import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from appserver.utils.config.server_config import ServerConfig


class AppConfig(BaseModel):
    """
    Хранит конфигурацию запуска приложения.
    """
    log_level: str = "INFO"
    server_settings: ServerConfig = Field(default_factory=ServerConfig.default)

    @field_validator('log_level', mode='before')
    @classmethod
    def check_is_known_log_level(cls, v: Any) -> str:
        if isinstance(v, str) and isinstance(logging.getLevelName(v.upper()), int):
            return v.upper()

        else:
            raise PydanticCustomError(
                'log_level_error',
                '{level} is not a known logging level!',
                {'level': v},
            )
