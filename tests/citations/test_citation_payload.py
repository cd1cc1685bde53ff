import pytest

from src.brigade_roster.brigade_roster.citations.controller import create_request_from, update_request_from
from src.brigade_roster.brigade_roster.core.exceptions import ValidationError


def _payload(**overrides):
    payload = {
        "title": "  Guardia ",
        "description": "Turno nocturno",
        "scheduled_at": "2025-12-01T21:00:00",
        "location": "Cuartel",
        "activity_type": "GUARDIA",
        "required_attendees": "5",
    }
    payload.update(overrides)
    return payload


def test_create_payload_is_trimmed_and_typed():
    request = create_request_from(_payload(cited_personnel_ids=[1, "2"]))

    assert request.title == "Guardia"
    assert request.required_attendees == 5
    assert request.cited_personnel_ids == [1, 2]


def test_missing_fields_are_listed():
    with pytest.raises(ValidationError) as exc:
        create_request_from({"title": "Guardia"})

    assert str(exc.value).startswith("Campos requeridos: description, scheduled_at")


def test_whitespace_only_text_is_rejected():
    with pytest.raises(ValidationError) as exc:
        create_request_from(_payload(title="   "))

    assert str(exc.value) == "title es requerido"


def test_bad_numbers_and_id_lists_are_rejected():
    with pytest.raises(ValidationError):
        create_request_from(_payload(required_attendees="cinco"))
    with pytest.raises(ValidationError):
        update_request_from({"cited_personnel_ids": "1,2"})


def test_update_payload_leaves_absent_fields_unset():
    request = update_request_from({"location": "Plaza"})

    assert request.location == "Plaza"
    assert request.title is None and request.required_attendees is None
