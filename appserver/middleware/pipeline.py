from dataclasses import dataclass, field
from typing import Any, Iterable

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from appserver.middleware.cors import CORSMiddleware, PERMISSIVE_CORS_OPTIONS
from appserver.middleware.request_id import request_id_middleware
from appserver.middleware.request_logging import logging_middleware
from appserver.middleware.tracing import TracingMiddleware
from appserver.utils.config import ServerConfig


@dataclass(frozen=True)
class MiddlewareLayer:
    """
    Описывает один промежуточный слой конвейера обработки запросов.

    :param name: Имя слоя.
    :param middleware_class: ASGI класс промежуточного слоя.
    :param options: Аргументы для создания слоя.
    """
    name: str
    middleware_class: type
    options: dict[str, Any] = field(default_factory=dict)


# Innermost first: every layer wraps all layers listed before it
BASE_LAYERS: tuple[MiddlewareLayer, ...] = (
    MiddlewareLayer("logging", BaseHTTPMiddleware, {"dispatch": logging_middleware}),
    MiddlewareLayer("request_id", BaseHTTPMiddleware, {"dispatch": request_id_middleware}),
    MiddlewareLayer("tracing", TracingMiddleware),
)
CORS_LAYER: MiddlewareLayer = MiddlewareLayer("cors", CORSMiddleware, PERMISSIVE_CORS_OPTIONS)


def pipeline_layers(config: ServerConfig) -> list[MiddlewareLayer]:
    """
    Получает упорядоченный список слоев для конфигурации сервера.

    :param config: Конфигурация сервера.
    :return: Слои от внутреннего к внешнему.
    """
    layers: list[MiddlewareLayer] = list(BASE_LAYERS)

    if config.cors_enabled:
        layers.append(CORS_LAYER)

    return layers


def attach_layers(app: FastAPI, layers: Iterable[MiddlewareLayer]) -> FastAPI:
    """
    Подключает слои к приложению, каждый следующий слой становится внешним по отношению к предыдущим.

    :param app: Приложение для оборачивания.
    :param layers: Слои от внутреннего к внешнему.
    :return: То же приложение с подключенными слоями.
    """
    for layer in layers:
        app.add_middleware(layer.middleware_class, **layer.options)

    return app
