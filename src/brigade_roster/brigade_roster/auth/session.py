from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Protocol

from .model import User

_TOKEN = "token"
_USER = "user"
_BIOMETRIC = "biometric_enabled"


class SessionStore(Protocol):
    """Key-value persistence for the signed-in session."""

    def save_token(self, token: str) -> None:
        raise NotImplementedError

    def save_user(self, user: User) -> None:
        raise NotImplementedError

    def get_user(self) -> Optional[User]:
        raise NotImplementedError

    def is_logged_in(self) -> bool:
        raise NotImplementedError

    def set_biometric_enabled(self, enabled: bool) -> None:
        raise NotImplementedError

    def is_biometric_enabled(self) -> bool:
        raise NotImplementedError

    def clear_all(self) -> None:
        raise NotImplementedError


class InMemorySessionStore:
    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def _set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def _get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def save_token(self, token: str) -> None:
        self._set(_TOKEN, token)

    def get_token(self) -> Optional[str]:
        return self._get(_TOKEN)

    def save_user(self, user: User) -> None:
        self._set(_USER, user)

    def get_user(self) -> Optional[User]:
        return self._get(_USER)

    def is_logged_in(self) -> bool:
        return self._get(_TOKEN) is not None

    def set_biometric_enabled(self, enabled: bool) -> None:
        self._set(_BIOMETRIC, bool(enabled))

    def is_biometric_enabled(self) -> bool:
        return bool(self._get(_BIOMETRIC, False))

    def clear_all(self) -> None:
        with self._lock:
            self._values.clear()
