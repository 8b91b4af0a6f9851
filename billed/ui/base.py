from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

Navigator = Callable[[str], Awaitable[None]]


class Modal(ABC):
    @abstractmethod
    def show(self, content: str) -> None:
        """Replace the modal body with ``content`` and display it."""
        ...


class Alerter(ABC):
    @abstractmethod
    def alert(self, message: str) -> None: ...
