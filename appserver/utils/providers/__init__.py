from .app_state_provider import AppStateProvider

__all__ = (
    "AppStateProvider",
)
