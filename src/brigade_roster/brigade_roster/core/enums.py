from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Tipo de cuenta usado para permisos."""

    ADMIN = "admin"
    USER = "usuario"


class PersonnelStatus(str, Enum):
    """Estado de un bombero en la compañía.

    Values are the strings stored on the record, so a plain ``str`` compares
    equal to the member.
    """

    ACTIVE = "Activo"
    ON_LEAVE = "Licencia"
    INACTIVE = "Inactivo"


class ActivityType(str, Enum):
    """Tipo de actividad de una citación."""

    TRAINING = "ENTRENAMIENTO"
    DUTY = "GUARDIA"
    MEETING = "REUNION"
    CEREMONY = "CEREMONIA"
    DRILL = "EJERCICIO"
    OTHER = "OTRO"

    @property
    def label(self) -> str:
        return _ACTIVITY_LABELS[self]


class CitationStatus(str, Enum):
    """Ciclo de vida de una citación."""

    PENDING = "PENDIENTE"
    CONFIRMED = "CONFIRMADA"
    IN_PROGRESS = "EN_CURSO"
    COMPLETED = "COMPLETADA"
    CANCELLED = "CANCELADA"

    @property
    def label(self) -> str:
        return _CITATION_STATUS_LABELS[self]


class RejectPolicy(str, Enum):
    """What rejecting attendance does to a citation."""

    NOOP = "noop"
    DECREMENT = "decrement"


_ACTIVITY_LABELS = {
    ActivityType.TRAINING: "Entrenamiento",
    ActivityType.DUTY: "Guardia",
    ActivityType.MEETING: "Reunión",
    ActivityType.CEREMONY: "Ceremonia",
    ActivityType.DRILL: "Ejercicio",
    ActivityType.OTHER: "Otro",
}

_CITATION_STATUS_LABELS = {
    CitationStatus.PENDING: "Pendiente",
    CitationStatus.CONFIRMED: "Confirmada",
    CitationStatus.IN_PROGRESS: "En Curso",
    CitationStatus.COMPLETED: "Completada",
    CitationStatus.CANCELLED: "Cancelada",
}
