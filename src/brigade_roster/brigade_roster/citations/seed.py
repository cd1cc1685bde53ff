"""Demo citations; dates are relative to ``now`` so the list always looks current."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import List

from ..core.enums import ActivityType, CitationStatus
from .model import Citation


def demo_citations(now: datetime) -> List[Citation]:
    return [
        Citation(
            citation_id=1,
            title="Entrenamiento de Rescate",
            description="Práctica de técnicas de rescate en altura y espacios confinados",
            scheduled_at=now + timedelta(days=3),
            location="Cuartel Central - Segunda Compañía",
            activity_type=ActivityType.TRAINING,
            status=CitationStatus.PENDING,
            required_attendees=15,
            confirmed_attendees=8,
            created_by="Cap. Juan Pérez",
            created_at=now - timedelta(days=2),
            cited_personnel_ids=tuple(range(1, 16)),
            remarks="Traer equipo completo y uniforme de trabajo",
        ),
        Citation(
            citation_id=2,
            title="Guardia Nocturna",
            description="Turno de guardia nocturna en el cuartel",
            scheduled_at=now + timedelta(days=1),
            location="Cuartel Central",
            activity_type=ActivityType.DUTY,
            status=CitationStatus.CONFIRMED,
            required_attendees=8,
            confirmed_attendees=8,
            created_by="Tte. Carlos Ramírez",
            created_at=now - timedelta(days=5),
            cited_personnel_ids=(2, 3, 5, 7, 9, 10, 12, 14),
        ),
        Citation(
            citation_id=3,
            title="Reunión Mensual",
            description="Reunión administrativa mensual de la compañía",
            scheduled_at=now + timedelta(days=7),
            location="Sala de Juntas",
            activity_type=ActivityType.MEETING,
            status=CitationStatus.PENDING,
            required_attendees=10,
            confirmed_attendees=3,
            created_by="Cmd. Roberto Silva",
            created_at=now - timedelta(days=1),
            cited_personnel_ids=tuple(range(1, 11)),
            remarks="Traer informes del mes",
        ),
        Citation(
            citation_id=4,
            title="Ceremonia del Día del Bombero",
            description="Ceremonia oficial en conmemoración del Día del Bombero Chileno",
            scheduled_at=now + timedelta(days=10),
            location="Plaza de Armas",
            activity_type=ActivityType.CEREMONY,
            status=CitationStatus.PENDING,
            required_attendees=30,
            confirmed_attendees=12,
            created_by="Cmd. Roberto Silva",
            created_at=now - timedelta(days=7),
            cited_personnel_ids=tuple(range(1, 11)),
            remarks="Uniforme de gala. Formación a las 09:00 hrs.",
        ),
        Citation(
            citation_id=5,
            title="Ejercicio de Evacuación",
            description="Simulacro de evacuación en edificio de gran altura",
            scheduled_at=now - timedelta(days=2),
            location="Edificio Torre Norte",
            activity_type=ActivityType.DRILL,
            status=CitationStatus.COMPLETED,
            required_attendees=12,
            confirmed_attendees=12,
            created_by="Cap. Juan Pérez",
            created_at=now - timedelta(days=10),
            cited_personnel_ids=(1, 3, 5, 7, 9, 11, 13, 15, 2, 4, 6, 8),
            remarks="Coordinación con Carabineros y SAMU",
        ),
    ]
