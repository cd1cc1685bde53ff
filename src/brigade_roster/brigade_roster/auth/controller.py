from __future__ import annotations

import asyncio
import logging

from flask import Flask, request, session

from ..common.http import envelope
from ..common.resource import Error, Success
from ..container import Container
from .model import user_to_dict
from .state import LoginHolder, LoginState

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    async def _login(email: str, password: str) -> LoginState:
        holder = LoginHolder(container.auth_repo)
        holder.on_email_change(email)
        holder.on_password_change(password)
        task = holder.login()
        if task is not None:
            await task
        return holder.state

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        payload = request.get_json(silent=True) or {}
        state = asyncio.run(_login(str(payload.get("email", "")), str(payload.get("password", ""))))

        if state.email_error or state.password_error:
            errors = {k: v for k, v in (("email", state.email_error), ("password", state.password_error)) if v}
            return envelope(False, "Datos de acceso incompletos", errors=errors), 422

        if isinstance(state.result, Success):
            user = state.result.data
            session["user_id"] = user.user_id
            session["email"] = user.email
            session["name"] = user.full_name
            session["role"] = user.role.value
            return envelope(True, "Inicio de sesión exitoso", user_to_dict(user)), 200

        message = state.result.message if isinstance(state.result, Error) else "Error inesperado"
        return envelope(False, message), 401

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        # Only this client's cookie session; other clients stay signed in.
        session.clear()
        return envelope(True, "Sesión cerrada"), 200

    @app.route("/api/session", methods=["GET"], endpoint="current_session")
    def current_session():
        if "user_id" not in session:
            return envelope(True, data={"logged_in": False, "user": None}), 200

        user = {
            "id": session["user_id"],
            "email": session.get("email"),
            "full_name": session.get("name"),
            "role": session.get("role"),
        }
        return envelope(True, data={"logged_in": True, "user": user}), 200
