"""Domain models for cookie sessions and request-level auth results."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SessionConfig:
    """Signing secrets and cookie attributes for the session cookie.

    The first secret signs new cookies; every secret is accepted when
    verifying, so an old secret can stay listed while it is rotated out.
    """

    secrets: tuple[str, ...]
    cookie_name: str = "RJ_session"
    max_age_seconds: int = 60 * 60 * 24 * 30
    secure: bool = False
    http_only: bool = True
    same_site: str = "lax"
    path: str = "/"


@dataclass(frozen=True)
class Redirect:
    """A redirect outcome bubbled up to the HTTP layer.

    ``session_value`` is a freshly signed cookie to attach; ``clear_session``
    asks the HTTP layer to expire the session cookie.
    """

    location: str
    session_value: str | None = None
    clear_session: bool = False


class InboundRequest(Protocol):
    """The narrow slice of an HTTP request the auth and submission code reads."""

    @property
    def path(self) -> str:
        """Return the request path, without the query string."""

    def header(self, name: str) -> str | None:
        """Return a request header value, if present."""

    async def form(self) -> Mapping[str, object]:
        """Return the submitted form fields."""
