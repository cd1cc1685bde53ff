from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence, Tuple

from ..core.enums import ActivityType, CitationStatus


@dataclass(frozen=True)
class Citation:
    """Entidad de dominio: citación (convocatoria) de la compañía.

    ``confirmed_attendees`` may exceed ``required_attendees``; nothing clamps it.
    """

    citation_id: int
    title: str
    description: str
    scheduled_at: datetime
    location: str
    activity_type: ActivityType
    status: CitationStatus
    required_attendees: int
    confirmed_attendees: int
    created_by: str
    created_at: datetime
    cited_personnel_ids: Tuple[int, ...] = ()
    remarks: Optional[str] = None


@dataclass(frozen=True)
class CitationCreateRequest:
    title: str
    description: str
    scheduled_at: str
    location: str
    activity_type: str
    required_attendees: int
    cited_personnel_ids: Sequence[int] = ()
    remarks: Optional[str] = None


@dataclass(frozen=True)
class CitationUpdateRequest:
    """Partial update: ``None`` means "leave unchanged"."""

    title: Optional[str] = None
    description: Optional[str] = None
    scheduled_at: Optional[str] = None
    location: Optional[str] = None
    activity_type: Optional[str] = None
    status: Optional[str] = None
    required_attendees: Optional[int] = None
    cited_personnel_ids: Optional[Sequence[int]] = None
    remarks: Optional[str] = None


def citation_to_dict(c: Citation) -> dict:
    return {
        "id": c.citation_id,
        "title": c.title,
        "description": c.description,
        "scheduled_at": c.scheduled_at.isoformat(),
        "location": c.location,
        "activity_type": c.activity_type.value,
        "activity_label": c.activity_type.label,
        "status": c.status.value,
        "status_label": c.status.label,
        "required_attendees": c.required_attendees,
        "confirmed_attendees": c.confirmed_attendees,
        "cited_personnel_ids": list(c.cited_personnel_ids),
        "created_by": c.created_by,
        "created_at": c.created_at.isoformat(),
        "remarks": c.remarks,
    }
