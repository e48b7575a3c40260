import datetime


class AppState:
    """
    Общее состояние приложения, разделяемое всеми обработчиками запросов.

    Сервер передает один и тот же объект маршрутизатору и не изменяет его.
    """

    def __init__(self, service_name: str = "appserver"):
        self.service_name: str = service_name
        self.started_at: datetime.datetime = datetime.datetime.now(tz=datetime.UTC)

    @property
    def uptime(self) -> datetime.timedelta:
        return datetime.datetime.now(tz=datetime.UTC) - self.started_at
