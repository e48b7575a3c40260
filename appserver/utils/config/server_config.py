from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ServerConfig(BaseModel):
    """
    Конфигурация серверной части приложения для вывода в сеть.

    :param host: Имя хоста или IP адрес для привязки, не проверяется при создании.
    :param port: Порт для привязки.
    :param cors_enabled: Разрешены ли запросы с других источников.
    """
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=0, le=65535)
    cors_enabled: bool = True

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True
    )

    @classmethod
    def default(cls) -> "ServerConfig":
        """
        Создает конфигурацию по умолчанию.

        :return: Конфигурация для 127.0.0.1:8080 с включенным CORS.
        """
        return cls()
