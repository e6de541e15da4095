"""Adapters between Starlette requests/responses and the auth core."""

from collections.abc import Mapping
from dataclasses import dataclass

from fastapi import Request, status
from fastapi.responses import RedirectResponse

from joke_board.domain.auth import InboundRequest, Redirect, SessionConfig


@dataclass
class StarletteRequest(InboundRequest):
    """Exposes a Starlette request through the narrow request interface."""

    request: Request

    @property
    def path(self) -> str:
        """Return the request path."""
        return self.request.url.path

    def header(self, name: str) -> str | None:
        """Return a request header value, if present."""
        return self.request.headers.get(name)

    async def form(self) -> Mapping[str, object]:
        """Parse and return the submitted form."""
        return await self.request.form()


def wants_json(request: Request) -> bool:
    """Return True when the client asked for a JSON response."""
    return "application/json" in request.headers.get("accept", "")


def redirect_response(redirect: Redirect, config: SessionConfig) -> RedirectResponse:
    """Turn a redirect outcome into a 303 response, setting or clearing the cookie."""
    response = RedirectResponse(
        redirect.location, status_code=status.HTTP_303_SEE_OTHER
    )
    if redirect.session_value is not None:
        response.set_cookie(
            config.cookie_name,
            redirect.session_value,
            max_age=config.max_age_seconds,
            path=config.path,
            secure=config.secure,
            httponly=config.http_only,
            samesite=config.same_site,
        )
    elif redirect.clear_session:
        response.delete_cookie(
            config.cookie_name,
            path=config.path,
            secure=config.secure,
            httponly=config.http_only,
            samesite=config.same_site,
        )
    return response
