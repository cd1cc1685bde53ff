from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import PersonnelStatus


@dataclass(frozen=True)
class PersonnelDraft:
    """Datos de un bombero antes de ser guardado (sin id ni timestamps)."""

    given_names: str
    surnames: str
    rank: str
    status: str
    specialty: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    join_date: Optional[date] = None
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class Personnel:
    """Entidad de dominio: ficha de un bombero.

    ``status`` is a plain string; the store does not check it against
    :class:`PersonnelStatus`.
    """

    personnel_id: int
    given_names: str
    surnames: str
    rank: str
    status: str
    created_at: datetime
    updated_at: datetime
    specialty: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    join_date: Optional[date] = None
    photo_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.given_names} {self.surnames}"

    @property
    def is_active(self) -> bool:
        return self.status == PersonnelStatus.ACTIVE.value

    @classmethod
    def from_draft(cls, draft: PersonnelDraft, *, personnel_id: int, now: datetime) -> "Personnel":
        return cls(
            personnel_id=personnel_id,
            given_names=draft.given_names,
            surnames=draft.surnames,
            rank=draft.rank,
            status=draft.status,
            created_at=now,
            updated_at=now,
            specialty=draft.specialty,
            phone=draft.phone,
            email=draft.email,
            address=draft.address,
            join_date=draft.join_date,
            photo_url=draft.photo_url,
        )


def personnel_to_dict(p: Personnel) -> dict:
    return {
        "id": p.personnel_id,
        "given_names": p.given_names,
        "surnames": p.surnames,
        "full_name": p.full_name,
        "rank": p.rank,
        "specialty": p.specialty,
        "status": p.status,
        "phone": p.phone,
        "email": p.email,
        "address": p.address,
        "join_date": isoformat_or_none(p.join_date),
        "photo_url": p.photo_url,
        "created_at": p.created_at.isoformat(),
        "updated_at": p.updated_at.isoformat(),
    }
