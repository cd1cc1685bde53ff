from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Cuenta autenticada (no es un bombero del roster)."""

    user_id: int
    email: str
    full_name: str
    rank: str
    role: Role
    is_active: bool = True


def user_to_dict(user: User) -> dict:
    return {
        "id": user.user_id,
        "email": user.email,
        "full_name": user.full_name,
        "rank": user.rank,
        "role": user.role.value,
        "is_active": user.is_active,
    }
