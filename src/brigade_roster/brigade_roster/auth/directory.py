from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from .model import User


class CredentialDirectory(Protocol):
    """Interfaz: validate ``(identifier, secret)`` and return the user or ``None``."""

    def validate_credentials(self, identifier: str, secret: str) -> Optional[User]:
        raise NotImplementedError


@dataclass(frozen=True)
class _Account:
    user: User
    password_hash: str


class InMemoryCredentialDirectory:
    def __init__(self, accounts: Iterable[tuple[User, str]] = ()):
        self._accounts: Dict[str, _Account] = {}
        for user, password in accounts:
            self.add(user, password)

    def add(self, user: User, password: str) -> None:
        self._accounts[user.email] = _Account(user=user, password_hash=generate_password_hash(password))

    def validate_credentials(self, identifier: str, secret: str) -> Optional[User]:
        account = self._accounts.get(identifier)
        if not account or not account.user.is_active:
            return None

        try:
            ok = check_password_hash(account.password_hash, secret)
        except Exception:
            # e.g. placeholder or corrupted hashes
            ok = False
        return account.user if ok else None


DEFAULT_ADMIN = User(
    user_id=1,
    email="admin",
    full_name="Administrador del Sistema",
    rank="Comandante",
    role=Role.ADMIN,
)

DEFAULT_FIREFIGHTER = User(
    user_id=2,
    email="bombero@bomberos.cl",
    full_name="Usuario Bombero",
    rank="Bombero",
    role=Role.USER,
)

DEMO_CREDENTIALS = {
    DEFAULT_ADMIN.email: "1234",
    DEFAULT_FIREFIGHTER.email: "bomb345",
}


def demo_directory() -> InMemoryCredentialDirectory:
    return InMemoryCredentialDirectory(
        [
            (DEFAULT_ADMIN, DEMO_CREDENTIALS[DEFAULT_ADMIN.email]),
            (DEFAULT_FIREFIGHTER, DEMO_CREDENTIALS[DEFAULT_FIREFIGHTER.email]),
        ]
    )
