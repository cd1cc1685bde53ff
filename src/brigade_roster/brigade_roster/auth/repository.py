from __future__ import annotations

import logging
import secrets
from typing import AsyncIterator, Optional

from ..common.flow import Latency, resource_flow
from ..common.resource import Resource
from .directory import CredentialDirectory
from .model import User
from .session import SessionStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciales inválidas"


class AuthRepository:
    """Login/logout over an opaque credential directory and session store."""

    def __init__(self, directory: CredentialDirectory, session: SessionStore, *, latency: Optional[Latency] = None):
        self._directory = directory
        self._session = session
        self._latency = latency or Latency()

    def login(self, identifier: str, secret: str) -> AsyncIterator[Resource[User]]:
        def action() -> Optional[User]:
            user = self._directory.validate_credentials(identifier, secret)
            if user is None:
                logger.info("login rejected for %r", identifier)
                return None
            self._session.save_token(f"session-{user.user_id}-{secrets.token_hex(8)}")
            self._session.save_user(user)
            return user

        return resource_flow(
            action,
            delay=self._latency.login,
            failure="Error inesperado",
            not_found=INVALID_CREDENTIALS,
        )

    def logout(self) -> None:
        self._session.clear_all()

    def is_logged_in(self) -> bool:
        return self._session.is_logged_in()

    def current_user(self) -> Optional[User]:
        return self._session.get_user()

    def set_biometric_enabled(self, enabled: bool) -> None:
        self._session.set_biometric_enabled(enabled)

    def is_biometric_enabled(self) -> bool:
        return self._session.is_biometric_enabled()
