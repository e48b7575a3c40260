import asyncio
import socket
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI

from appserver.exceptions import ServeError
from appserver.middleware import attach_layers, pipeline_layers
from appserver.router import create_router
from appserver.state import AppState
from appserver.utils.address import format_address, resolve_socket_addresses
from appserver.utils.config import ServerConfig
from appserver.utils.listener import bind_listener
from appserver.utils.log import get_logger

logger = get_logger("server")


class Server:
    """
    HTTP сервер: собирает конвейер обработки запросов и обслуживает соединения.

    :param state: Общее состояние приложения, передается маршрутизатору без изменений.
    :param config: Сетевая конфигурация сервера.
    :param router_factory: Создает приложение с маршрутами для общего состояния.
    """

    def __init__(
        self,
        state: AppState,
        config: ServerConfig,
        router_factory: Callable[[AppState], FastAPI] = create_router
    ) -> None:
        self._config: ServerConfig = config
        self._state: AppState = state
        self._router_factory: Callable[[AppState], FastAPI] = router_factory
        self._consumed: bool = False

    @classmethod
    def with_defaults(cls, state: AppState) -> "Server":
        """
        Создает сервер с конфигурацией по умолчанию.

        :param state: Общее состояние приложения.
        :return: Новый сервер.
        """
        return cls(state, ServerConfig.default())

    @property
    def config(self) -> ServerConfig:
        return self._config

    @property
    def state(self) -> AppState:
        return self._state

    def build_app(self) -> FastAPI:
        """
        Собирает приложение из маршрутизатора и промежуточных слоев.

        Не выполняет ввод-вывод и не изменяет сервер, каждый вызов возвращает новое приложение.
        К результату можно подключать дополнительные слои до запуска.

        :return: Готовое к обслуживанию приложение.
        """
        app: FastAPI = self._router_factory(self._state)
        return attach_layers(app, pipeline_layers(self._config))

    async def run(self) -> None:
        """
        Привязывает сокет и обслуживает соединения до ошибки ввода-вывода.

        Сервер может быть запущен только один раз.

        :return: Ничего.
        :raise InvalidAddressError: Когда хост и порт не приводятся к адресу сокета.
        :raise BindError: Когда не удалось привязать слушающий сокет.
        :raise ServeError: Когда цикл обслуживания завершился, так и не начав работу.
        """
        if self._consumed:
            raise RuntimeError("Server has already been run")

        self._consumed = True
        addresses = await resolve_socket_addresses(self._config.host, self._config.port)

        app: FastAPI = self.build_app()
        listener: socket.socket = bind_listener(addresses)

        logger.info(
            "Starting server on %s", self.address(),
            extra={"host": self._config.host, "port": self._config.port}
        )

        uvicorn_server: Optional[uvicorn.Server] = None
        try:
            uvicorn_server = uvicorn.Server(
                uvicorn.Config(
                    app,
                    host=self._config.host,
                    port=self._config.port,
                    log_config=None,
                )
            )
            await uvicorn_server.serve(sockets=[listener])

            if not uvicorn_server.started:
                raise ServeError(f"Server on {self.address()} stopped before accepting connections")

        except asyncio.CancelledError:
            # serve() shuts down by itself only when its loop exits normally
            if uvicorn_server is not None and uvicorn_server.started:
                await uvicorn_server.shutdown(sockets=[listener])

            raise

        finally:
            if uvicorn_server is not None:
                # Listening servers are left open when serve() is interrupted
                for listening_server in getattr(uvicorn_server, "servers", []):
                    listening_server.close()

            listener.close()

    def address(self) -> str:
        """
        Получает адрес сервера в виде host:port.

        :return: Адрес сервера.
        """
        return format_address(self._config.host, self._config.port)
