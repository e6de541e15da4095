"""Cookie session access and the login gate for protected routes."""

import logging
from dataclasses import dataclass
from urllib.parse import urlencode
from uuid import UUID

from starlette.requests import cookie_parser

from joke_board.domain.auth import InboundRequest, Redirect
from joke_board.domain.models import UserRecord
from joke_board.services.credentials import UserRepository
from joke_board.services.session_codec import SessionCodec

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
DEFAULT_REDIRECT = "/jokes"
_USER_ID_KEY = "userId"


@dataclass
class SessionAccessor:
    """Resolves the current user from the signed session cookie."""

    codec: SessionCodec
    user_repository: UserRepository

    def get_session(self, request: InboundRequest) -> dict[str, object] | None:
        """Return the verified session payload carried by the request."""
        raw_cookie = request.header("cookie")
        if not raw_cookie:
            return None
        cookies = cookie_parser(raw_cookie)
        return self.codec.decode(cookies.get(self.codec.config.cookie_name))

    def current_user_id(self, request: InboundRequest) -> UUID | None:
        """Return the user id stored in the session, if it is well formed."""
        session = self.get_session(request)
        if session is None:
            return None
        raw_user_id = session.get(_USER_ID_KEY)
        if not raw_user_id or not isinstance(raw_user_id, str):
            return None
        try:
            return UUID(raw_user_id)
        except ValueError:
            return None

    def current_user(self, request: InboundRequest) -> UserRecord | Redirect | None:
        """Return the logged-in user.

        Returns None without a session. A session pointing at a user that no
        longer exists yields a logout redirect so the stale cookie is cleared.
        """
        user_id = self.current_user_id(request)
        if user_id is None:
            return None
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            logger.info("Session references missing user %s; logging out", user_id)
            return self.logout(request)
        return user

    def create_user_session(self, user_id: UUID, redirect_to: str) -> Redirect:
        """Sign a new session for the user and redirect to the given path."""
        session_value = self.codec.encode({_USER_ID_KEY: str(user_id)})
        return Redirect(location=redirect_to, session_value=session_value)

    def logout(self, request: InboundRequest) -> Redirect:
        """Clear the session cookie and send the user to the login page."""
        user_id = self.current_user_id(request)
        if user_id is not None:
            logger.info("Logging out user %s", user_id)
        return Redirect(location=LOGIN_PATH, clear_session=True)


@dataclass
class AuthGate:
    """Enforces that a request carries a valid session."""

    accessor: SessionAccessor

    def require_user_id(
        self, request: InboundRequest, redirect_to: str | None = None
    ) -> UUID | Redirect:
        """Return the session's user id or a redirect to the login page."""
        user_id = self.accessor.current_user_id(request)
        if user_id is None:
            return login_redirect(redirect_to or request.path)
        return user_id

    def require_user(
        self, request: InboundRequest, redirect_to: str | None = None
    ) -> UserRecord | Redirect:
        """Return the session's user, or the redirect that recovers from its absence."""
        user_id = self.require_user_id(request, redirect_to)
        if isinstance(user_id, Redirect):
            return user_id
        user = self.accessor.current_user(request)
        if user is None:
            return login_redirect(redirect_to or request.path)
        return user


def login_redirect(redirect_to: str) -> Redirect:
    """Build the redirect to the login page that remembers the destination."""
    return Redirect(location=f"{LOGIN_PATH}?{urlencode({'redirect': redirect_to})}")


def safe_redirect_target(target: str | None, default: str = DEFAULT_REDIRECT) -> str:
    """Return the target when it is a site-relative path, otherwise the default."""
    if not target or not target.startswith("/") or target.startswith("//"):
        return default
    if "\\" in target:
        return default
    return target
