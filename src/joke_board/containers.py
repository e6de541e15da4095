"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from joke_board.adapters.supabase_joke_repository import SupabaseJokeRepository
from joke_board.adapters.supabase_user_repository import SupabaseUserRepository
from joke_board.config import Settings
from joke_board.services.credentials import BcryptPasswordHasher, CredentialVerifier
from joke_board.services.jokes import JokeService
from joke_board.services.login import LoginService
from joke_board.services.session_codec import SessionCodec
from joke_board.services.sessions import AuthGate, SessionAccessor


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_codec: SessionCodec
    session_accessor: SessionAccessor
    auth_gate: AuthGate
    login_service: LoginService
    joke_service: JokeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises a settings validation error when the session secret is missing,
    so the process refuses to start.
    """
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    joke_repository = SupabaseJokeRepository(supabase_client)
    session_codec = SessionCodec(resolved_settings.session_config())
    session_accessor = SessionAccessor(
        codec=session_codec, user_repository=user_repository
    )
    auth_gate = AuthGate(session_accessor)
    verifier = CredentialVerifier(
        repository=user_repository,
        hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
    )
    login_service = LoginService(verifier=verifier, accessor=session_accessor)
    joke_service = JokeService(repository=joke_repository, auth_gate=auth_gate)

    return AppContainer(
        settings=resolved_settings,
        session_codec=session_codec,
        session_accessor=session_accessor,
        auth_gate=auth_gate,
        login_service=login_service,
        joke_service=joke_service,
    )
