import asyncio
import contextlib
import errno

import httpx
import pytest

import appserver.app_server
from appserver import BindError, InvalidAddressError, Server, ServerConfig, create_router
from .fixtures import *


@pytest.fixture()
def forbid_binding(monkeypatch):
    def bind_listener(*args, **kwargs):
        raise AssertionError("Socket must not be bound for an invalid address")

    monkeypatch.setattr(appserver.app_server, "bind_listener", bind_listener)


@pytest.mark.asyncio
@pytest.mark.parametrize("host", ["", "999.1.1.1", "::zz", "bad host", "-leading-dash"])
async def test_run_rejects_invalid_host_before_binding(app_state, forbid_binding, host):
    server = Server(app_state, ServerConfig(host=host, port=8080, cors_enabled=False))

    with pytest.raises(InvalidAddressError) as exc_info:
        await server.run()

    assert exc_info.value.host == host


@pytest.mark.asyncio
async def test_run_consumes_server(app_state, forbid_binding):
    server = Server(app_state, ServerConfig(host="", port=8080, cors_enabled=False))

    with pytest.raises(InvalidAddressError):
        await server.run()

    with pytest.raises(RuntimeError):
        await server.run()


@pytest.mark.asyncio
async def test_run_serves_requests(app_state, free_port):
    server = Server(app_state, ServerConfig(host="127.0.0.1", port=free_port, cors_enabled=True))
    running = asyncio.create_task(server.run())

    try:
        await wait_for_listener("127.0.0.1", free_port)
        async with httpx.AsyncClient(trust_env=False) as client:
            response = await client.get(
                f"http://127.0.0.1:{free_port}/health",
                headers={"X-Request-ID": "e2e-request", "Origin": "http://example.com"}
            )

        assert response.status_code == 200
        assert response.json()["service"] == app_state.service_name
        assert response.headers["x-request-id"] == "e2e-request"
        assert response.headers["access-control-allow-origin"] == "*"
        assert not running.done(), "Server must keep serving after a request"

    finally:
        running.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await running


@pytest.mark.asyncio
async def test_second_server_on_same_address_fails_to_bind(app_state, free_port):
    config = ServerConfig(host="127.0.0.1", port=free_port, cors_enabled=False)
    running = asyncio.create_task(Server(app_state, config).run())

    try:
        await wait_for_listener("127.0.0.1", free_port)

        with pytest.raises(BindError) as exc_info:
            await Server(app_state, config).run()

        assert exc_info.value.errno == errno.EADDRINUSE
        assert not running.done(), "First server must keep listening"

    finally:
        running.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await running


@pytest.mark.asyncio
async def test_port_is_released_after_run_is_cancelled(app_state, free_port):
    config = ServerConfig(host="127.0.0.1", port=free_port, cors_enabled=False)
    running = asyncio.create_task(Server(app_state, config).run())
    await wait_for_listener("127.0.0.1", free_port)

    running.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await running

    running = asyncio.create_task(Server(app_state, config).run())
    try:
        await wait_for_listener("127.0.0.1", free_port)
        assert not running.done()

    finally:
        running.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await running


@pytest.mark.asyncio
async def test_cancelled_run_finishes_lifespan(app_state, free_port):
    lifespan_finished: list[bool] = []

    def router_factory(state):
        app = create_router(state)
        lifespan_context = app.router.lifespan_context

        @contextlib.asynccontextmanager
        async def recording_lifespan(lifespan_app):
            async with lifespan_context(lifespan_app):
                yield

            lifespan_finished.append(True)

        app.router.lifespan_context = recording_lifespan
        return app

    config = ServerConfig(host="127.0.0.1", port=free_port, cors_enabled=False)
    running = asyncio.create_task(Server(app_state, config, router_factory=router_factory).run())
    await wait_for_listener("127.0.0.1", free_port)

    running.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await running

    await asyncio.sleep(0.1)
    pending = [
        task.get_coro().__qualname__
        for task in asyncio.all_tasks()
        if task is not asyncio.current_task() and not task.done()
    ]

    assert "LifespanOn.main" not in pending, "Lifespan task must not outlive the server"
    assert lifespan_finished == [True], "Lifespan shutdown must close the dishka container"
