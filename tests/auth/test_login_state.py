import pytest

from src.brigade_roster.brigade_roster.auth.directory import demo_directory
from src.brigade_roster.brigade_roster.auth.repository import AuthRepository
from src.brigade_roster.brigade_roster.auth.session import InMemorySessionStore
from src.brigade_roster.brigade_roster.auth.state import BIOMETRIC_UNAVAILABLE, LoginHolder
from src.brigade_roster.brigade_roster.common.flow import Latency
from src.brigade_roster.brigade_roster.common.resource import Error


class SpyAuthRepo(AuthRepository):
    def __init__(self):
        super().__init__(demo_directory(), InMemorySessionStore(), latency=Latency.none())
        self.attempts = []

    def login(self, identifier, secret):
        self.attempts.append(identifier)
        return super().login(identifier, secret)


def test_blank_fields_block_login():
    repo = SpyAuthRepo()
    holder = LoginHolder(repo)

    assert holder.login() is None

    assert holder.state.email_error == "El email es requerido"
    assert holder.state.password_error == "La contraseña es requerida"
    assert repo.attempts == []


def test_short_password_is_rejected_and_typing_clears_errors():
    holder = LoginHolder(SpyAuthRepo())
    holder.on_email_change("admin")
    holder.on_password_change("123")

    assert holder.login() is None
    assert holder.state.password_error == "La contraseña debe tener al menos 4 caracteres"

    holder.on_password_change("1234")
    assert holder.state.password_error is None


def test_password_visibility_toggles():
    holder = LoginHolder(SpyAuthRepo())

    holder.toggle_password_visibility()
    assert holder.state.is_password_visible
    holder.toggle_password_visibility()
    assert not holder.state.is_password_visible


@pytest.mark.asyncio
async def test_demo_admin_credentials_sign_in():
    repo = SpyAuthRepo()
    holder = LoginHolder(repo)
    holder.fill_admin_credentials()

    await holder.login()

    assert repo.attempts == ["admin"]
    assert holder.state.logged_in_user.full_name == "Administrador del Sistema"


@pytest.mark.asyncio
async def test_wrong_password_reports_invalid_credentials():
    holder = LoginHolder(SpyAuthRepo())
    holder.fill_user_credentials()
    holder.on_password_change("bomb999")

    await holder.login()

    assert holder.state.result == Error("Credenciales inválidas")
    holder.clear_login_state()
    assert holder.state.result is None


def test_biometric_login_is_unavailable():
    holder = LoginHolder(SpyAuthRepo())

    holder.login_with_biometric()

    assert holder.state.result == Error(BIOMETRIC_UNAVAILABLE)
