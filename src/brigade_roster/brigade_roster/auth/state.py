"""Login screen state holder."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

from ..common.resource import Error, Loading, Resource, Success
from ..common.state_holder import StateHolder
from ..common.validators import is_blank, is_valid_password
from ..core.constants import PASSWORD_MIN_LENGTH
from .directory import DEFAULT_ADMIN, DEFAULT_FIREFIGHTER, DEMO_CREDENTIALS
from .model import User
from .repository import AuthRepository

BIOMETRIC_UNAVAILABLE = "Biometría no disponible aún"


@dataclass(frozen=True)
class LoginState:
    email: str = ""
    password: str = ""
    is_password_visible: bool = False
    email_error: Optional[str] = None
    password_error: Optional[str] = None
    result: Optional[Resource[User]] = None
    is_biometric_enabled: bool = False

    @property
    def is_loading(self) -> bool:
        return isinstance(self.result, Loading)

    @property
    def logged_in_user(self) -> Optional[User]:
        return self.result.data if isinstance(self.result, Success) else None


class LoginHolder(StateHolder[LoginState]):
    def __init__(self, repository: AuthRepository):
        super().__init__(LoginState(is_biometric_enabled=repository.is_biometric_enabled()))
        self._repository = repository

    def on_email_change(self, email: str) -> None:
        self._update(email=email, email_error=None)

    def on_password_change(self, password: str) -> None:
        self._update(password=password, password_error=None)

    def toggle_password_visibility(self) -> None:
        self._update(is_password_visible=not self.state.is_password_visible)

    def _validate(self) -> bool:
        s = self.state
        email_error = "El email es requerido" if is_blank(s.email) else None

        password_error = None
        if is_blank(s.password):
            password_error = "La contraseña es requerida"
        elif not is_valid_password(s.password):
            password_error = f"La contraseña debe tener al menos {PASSWORD_MIN_LENGTH} caracteres"

        self._update(email_error=email_error, password_error=password_error)
        return email_error is None and password_error is None

    def login(self) -> Optional[asyncio.Task]:
        self._update(email_error=None, password_error=None)
        if not self._validate():
            return None

        s = self.state
        return self._launch(
            "login",
            self._repository.login(s.email, s.password),
            lambda resource: self._update(result=resource),
        )

    def login_with_biometric(self) -> None:
        self._update(result=Error(BIOMETRIC_UNAVAILABLE))

    def fill_admin_credentials(self) -> None:
        self._update(email=DEFAULT_ADMIN.email, password=DEMO_CREDENTIALS[DEFAULT_ADMIN.email])

    def fill_user_credentials(self) -> None:
        self._update(email=DEFAULT_FIREFIGHTER.email, password=DEMO_CREDENTIALS[DEFAULT_FIREFIGHTER.email])

    def clear_login_state(self) -> None:
        self._update(result=None)
