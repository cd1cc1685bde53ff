"""Helpers shared by the Flask controllers."""
from __future__ import annotations

import asyncio
from functools import wraps
from typing import AsyncIterator, Callable, Optional, TypeVar

from flask import Flask, jsonify, session

from ..core.exceptions import AuthenticationError, DomainError, NotFoundError, ValidationError
from .flow import last_emission
from .resource import Error, Resource, Success

T = TypeVar("T")


def run_stream(stream: AsyncIterator[Resource[T]]) -> Resource[T]:
    """Drive a repository stream to its terminal state from sync code."""
    return asyncio.run(last_emission(stream))


def envelope(success: bool, message: str = "", data=None, **extra):
    body = {"success": success, "message": message, "data": data}
    body.update(extra)
    return jsonify(body)


def resource_response(
    resource: Resource[T],
    serialize: Callable[[T], object],
    *,
    not_found: Optional[str] = None,
    error_status: int = 500,
    success_status: int = 200,
):
    if isinstance(resource, Success):
        return envelope(True, data=serialize(resource.data)), success_status
    if isinstance(resource, Error):
        status = 404 if not_found and resource.message == not_found else error_status
        return envelope(False, resource.message), status
    # Only terminal states reach a controller.
    return envelope(False, "Operación en curso"), 409


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Debe iniciar sesión para continuar")
        return view(*args, **kwargs)

    return wrapper


def register_error_handlers(app: Flask) -> None:
    """Render domain exceptions raised by controllers with the JSON envelope."""

    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        if isinstance(error, ValidationError):
            extra = {"errors": error.errors} if error.errors else {}
            return envelope(False, str(error), **extra), 400
        if isinstance(error, NotFoundError):
            return envelope(False, str(error)), 404
        if isinstance(error, AuthenticationError):
            return envelope(False, str(error)), 401
        return envelope(False, str(error)), 400
