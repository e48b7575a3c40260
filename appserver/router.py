from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import DishkaRoute, FastapiProvider, setup_dishka
from fastapi import APIRouter, FastAPI

from appserver.controllers import HealthEndpoint
from appserver.state import AppState
from appserver.utils.providers import AppStateProvider


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
    yield
    await app.state.dishka_container.close()


def create_router(state: AppState) -> FastAPI:
    """
    Создает приложение с маршрутами, которым доступно общее состояние.

    :param state: Общее состояние приложения.
    :return: Приложение без промежуточных слоев сервера.
    """
    app = FastAPI(lifespan=lifespan)

    container: AsyncContainer = make_async_container(
        AppStateProvider(state),
        FastapiProvider(),
    )
    setup_dishka(container=container, app=app)

    router = APIRouter(route_class=DishkaRoute)
    HealthEndpoint(router)
    app.include_router(router)

    return app
