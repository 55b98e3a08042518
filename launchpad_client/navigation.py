"""Navigation targets for session loss."""

from collections.abc import Callable
from typing import Protocol

from loguru import logger


class Navigator(Protocol):
    """Performs a full navigation, discarding in-flight application state."""

    def redirect(self, path: str) -> None: ...


class CallbackNavigator:
    """Navigator that hands the path to a callback (UI shell, CLI, ...)."""

    def __init__(self, callback: Callable[[str], None]):
        self._callback = callback

    def redirect(self, path: str) -> None:
        logger.info("Redirecting to {}", path)
        self._callback(path)


class RecordingNavigator:
    """Navigator that only remembers where it was sent. Default for headless use."""

    def __init__(self):
        self.history: list[str] = []

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None

    def redirect(self, path: str) -> None:
        logger.info("Redirecting to {}", path)
        self.history.append(path)
