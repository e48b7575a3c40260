from dishka import Provider, Scope, provide

from appserver.state import AppState


class AppStateProvider(Provider):
    """
    Предоставляет доступ к общему состоянию приложения с помощью инжекции зависимостей.
    """

    def __init__(self, app_state: AppState):
        super().__init__()
        self.app_state: AppState = app_state

    @provide(scope=Scope.REQUEST)
    def get_app_state(self) -> AppState:
        return self.app_state
