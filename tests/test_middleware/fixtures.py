import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from appserver import AppState, Server, ServerConfig


@pytest.fixture()
def app() -> FastAPI:
    app = Server(AppState(), ServerConfig(cors_enabled=False)).build_app()

    @app.get("/boom")
    async def boom():
        raise ValueError("boom")

    return app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
