from dishka.integrations.fastapi import FromDishka

from appserver.controllers.dto import HealthStatus
from appserver.controllers.endpoints_base import APIEndpoint
from appserver.state import AppState


class HealthEndpoint(APIEndpoint):
    """
    Описывает эндпоинт проверки работоспособности сервера.
    """

    def register_routes(self) -> None:
        for path in ("/health", "/api/health"):
            self.router.add_api_route(
                path,
                self.health,
                description="Сообщает, что сервер принимает запросы",
                methods=["GET"],
                response_model=HealthStatus,
                responses={
                    200: {"description": "Сервер работает"}
                },
                tags=["health"]
            )

    async def health(self, app_state: FromDishka[AppState]) -> HealthStatus:
        """
        Возвращает состояние сервера.

        :param app_state: Общее состояние приложения.
        :return: Состояние сервера.
        """
        return HealthStatus(
            ok=True,
            service=app_state.service_name,
            uptime_seconds=app_state.uptime.total_seconds()
        )
