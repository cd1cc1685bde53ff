"""Create/edit form for a personnel record."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Callable, Dict, Optional, Union

from ..common.resource import Error, Loading, Resource, Success
from ..common.state_holder import StateHolder
from ..common.validators import filter_phone_input, is_blank, is_valid_email, phone_error, positive_id
from ..core.constants import DEFAULT_PERSONNEL_FILTER, DEFAULT_RANK
from .model import Personnel, PersonnelDraft
from .repository import PersonnelRepository

logger = logging.getLogger(__name__)


class FormField(str, Enum):
    GIVEN_NAMES = "given_names"
    SURNAMES = "surnames"
    RANK = "rank"
    SPECIALTY = "specialty"
    STATUS = "status"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"


@dataclass(frozen=True)
class PersonnelFormState:
    is_edit_mode: bool = False
    given_names: str = ""
    surnames: str = ""
    rank: str = DEFAULT_RANK
    specialty: str = ""
    status: str = DEFAULT_PERSONNEL_FILTER
    phone: str = ""
    email: str = ""
    address: str = ""
    photo_url: Optional[str] = None
    errors: Dict[FormField, str] = field(default_factory=dict)
    load_result: Optional[Resource[Personnel]] = None
    save_result: Optional[Resource[Personnel]] = None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.load_result, Loading) or isinstance(self.save_result, Loading)

    @property
    def error(self) -> Optional[str]:
        for resource in (self.save_result, self.load_result):
            if isinstance(resource, Error):
                return resource.message
        return None

    @property
    def saved(self) -> bool:
        return isinstance(self.save_result, Success)


def validate_form(state: PersonnelFormState) -> Dict[FormField, str]:
    errors: Dict[FormField, str] = {}

    if is_blank(state.given_names):
        errors[FormField.GIVEN_NAMES] = "Los nombres son requeridos"
    if is_blank(state.surnames):
        errors[FormField.SURNAMES] = "Los apellidos son requeridos"
    if is_blank(state.rank):
        errors[FormField.RANK] = "El rango es requerido"
    if is_blank(state.status):
        errors[FormField.STATUS] = "El estado es requerido"

    if not is_blank(state.email) and not is_valid_email(state.email):
        errors[FormField.EMAIL] = "Email inválido"

    if not is_blank(state.phone):
        message = phone_error(state.phone)
        if message:
            errors[FormField.PHONE] = message

    return errors


def _optional(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def _parse_id(value: Union[int, str, None]) -> Optional[int]:
    if isinstance(value, str) and value.strip().isdigit():
        return positive_id(int(value.strip()))
    return positive_id(value)


class PersonnelFormHolder(StateHolder[PersonnelFormState]):
    """Edit mode when a positive ``personnel_id`` is given, create mode otherwise."""

    def __init__(
        self,
        repository: PersonnelRepository,
        personnel_id: Union[int, str, None] = None,
        *,
        today: Optional[Callable[[], date]] = None,
    ):
        self._repository = repository
        self._personnel_id = _parse_id(personnel_id)
        self._today = today or date.today
        self._loaded: Optional[Personnel] = None
        super().__init__(PersonnelFormState(is_edit_mode=self._personnel_id is not None))

    @property
    def personnel_id(self) -> Optional[int]:
        return self._personnel_id

    def start(self) -> Optional[asyncio.Task]:
        if self._personnel_id is None:
            return None
        return self._launch("load", self._repository.get_personnel(self._personnel_id), self._on_loaded)

    def _on_loaded(self, resource: Resource[Personnel]) -> None:
        if not isinstance(resource, Success):
            self._update(load_result=resource)
            return

        p = resource.data
        self._loaded = p
        self._update(
            load_result=resource,
            given_names=p.given_names,
            surnames=p.surnames,
            rank=p.rank,
            specialty=p.specialty or "",
            status=p.status,
            phone=p.phone or "",
            email=p.email or "",
            address=p.address or "",
            photo_url=p.photo_url,
        )

    def update_field(self, form_field: FormField, value: str) -> None:
        if form_field == FormField.PHONE:
            value = filter_phone_input(value)
        self._update(**{form_field.value: value})

    def update_photo(self, photo_url: Optional[str]) -> None:
        self._update(photo_url=photo_url)

    def validate(self) -> bool:
        errors = validate_form(self.state)
        self._update(errors=errors)
        return not errors

    def _draft(self) -> PersonnelDraft:
        s = self.state
        return PersonnelDraft(
            given_names=s.given_names.strip(),
            surnames=s.surnames.strip(),
            rank=s.rank,
            status=s.status,
            specialty=_optional(s.specialty),
            phone=_optional(s.phone),
            email=_optional(s.email),
            address=_optional(s.address),
            join_date=self._loaded.join_date if self._loaded and self._loaded.join_date else self._today(),
            photo_url=s.photo_url,
        )

    def submit(self, on_success: Optional[Callable[[Personnel], None]] = None) -> Optional[asyncio.Task]:
        """Validate, then dispatch create or update; ``None`` when validation fails."""
        if not self.validate():
            logger.debug("personnel form rejected: %s", sorted(f.value for f in self.state.errors))
            return None

        draft = self._draft()
        if self._personnel_id is not None:
            # The store keeps the stored created_at on update.
            created_at = self._loaded.created_at if self._loaded else datetime.combine(self._today(), time())
            record = Personnel.from_draft(draft, personnel_id=self._personnel_id, now=created_at)
            stream = self._repository.update_personnel(record)
        else:
            stream = self._repository.create_personnel(draft)

        def on_emit(resource: Resource[Personnel]) -> None:
            self._update(save_result=resource)
            if isinstance(resource, Success) and on_success is not None:
                on_success(resource.data)

        return self._launch("save", stream, on_emit)

    def clear_error(self) -> None:
        s = self.state
        if isinstance(s.save_result, Error):
            self._update(save_result=None)
        if isinstance(s.load_result, Error):
            self._update(load_result=None)
