import asyncio
import socket

import pytest

from appserver import AppState, Server


@pytest.fixture()
def app_state() -> AppState:
    return AppState(service_name="test-service")


@pytest.fixture()
def server(app_state: AppState) -> Server:
    return Server.with_defaults(app_state)


@pytest.fixture()
def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def wait_for_listener(host: str, port: int, timeout: float = 5.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout

    while True:
        try:
            _, writer = await asyncio.open_connection(host, port)

        except OSError:
            if loop.time() > deadline:
                raise

            await asyncio.sleep(0.05)

        else:
            writer.close()
            await writer.wait_closed()
            return
