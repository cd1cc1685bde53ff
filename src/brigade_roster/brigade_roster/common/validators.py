from __future__ import annotations

import re

from ..core.constants import PASSWORD_MIN_LENGTH, PHONE_MAX_DIGITS, PHONE_MIN_DIGITS
from ..core.exceptions import ValidationError

# Same shape as Android's Patterns.EMAIL_ADDRESS.
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

_PHONE_INPUT_CHARS = set("+-() ")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} es requerido")
    return value.strip()


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(value: str) -> bool:
    return not is_blank(value) and EMAIL_PATTERN.fullmatch(value) is not None


def phone_digits(value: str) -> str:
    return "".join(ch for ch in value if ch.isdigit())


def filter_phone_input(value: str) -> str:
    """Drop everything except digits and the usual phone punctuation."""
    return "".join(ch for ch in value if ch.isdigit() or ch in _PHONE_INPUT_CHARS)


def phone_error(value: str) -> str | None:
    """Return a message when ``value`` has too few or too many digits."""
    digits = phone_digits(value)
    if len(digits) < PHONE_MIN_DIGITS:
        return f"El teléfono debe tener al menos {PHONE_MIN_DIGITS} dígitos"
    if len(digits) > PHONE_MAX_DIGITS:
        return f"El teléfono no puede tener más de {PHONE_MAX_DIGITS} dígitos"
    return None


def is_valid_password(value: str) -> bool:
    return len(value) >= PASSWORD_MIN_LENGTH


def positive_id(value) -> int | None:
    """Return ``value`` when it is a positive ``int``; ``bool`` is not an id."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None
