from abc import ABC, abstractmethod

from fastapi import APIRouter


class APIEndpoint(ABC):
    """
    Описывает базовый класс для конечной точки HTTP API.

    :param router: Роутер, в котором регистрируются маршруты конечной точки.
    """

    def __init__(self, router: APIRouter):
        self.router: APIRouter = router
        self.register_routes()

    @abstractmethod
    def register_routes(self) -> None:
        """
        Добавляет маршруты конечной точки в роутер.

        :return: Ничего.
        """
