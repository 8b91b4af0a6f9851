from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from billed.models.user import SessionUser

logger = logging.getLogger(__name__)

USER_KEY = "user"


class SessionStore(ABC):
    """Key/value store for the logged-in session, values serialized as text."""

    @abstractmethod
    def get_item(self, key: str) -> str | None: ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> None: ...


class MemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileSessionStore(SessionStore):
    """Session kept in a JSON file so it survives between CLI runs."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text(encoding="utf-8"))

    def _write(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items), encoding="utf-8")
        logger.debug("Session written to %s", self.path)

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = str(value)
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)


def load_user(session: SessionStore) -> SessionUser | None:
    raw = session.get_item(USER_KEY)
    if not raw:
        return None
    try:
        return SessionUser.model_validate_json(raw)
    except ValidationError:
        logger.warning("Ignoring malformed session user: %s", raw)
        return None


def login_as(session: SessionStore, user: SessionUser) -> None:
    session.set_item(USER_KEY, user.model_dump_json())
    logger.info("Session opened for %s (%s)", user.email or "<no email>", user.type)
