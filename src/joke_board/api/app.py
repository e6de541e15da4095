"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from joke_board.api.pages import (
    render_error,
    render_index,
    render_joke,
    render_joke_list,
    render_login,
    render_new_joke,
    render_not_found,
)
from joke_board.api.requests import StarletteRequest, redirect_response, wants_json
from joke_board.app_logging import configure_logging
from joke_board.containers import AppContainer
from joke_board.domain.auth import Redirect
from joke_board.domain.models import UserRecord
from joke_board.domain.submissions import SubmissionRejected


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    session_config = container.session_codec.config

    app = FastAPI()
    app.state.container = container

    def optional_user(request: Request) -> UserRecord | Redirect | None:
        return container.session_accessor.current_user(StarletteRequest(request))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> HTMLResponse:
        logger.exception("Unhandled error for %s %s", request.method, request.url.path)
        return HTMLResponse(
            render_error(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> Response:
        """Board landing page with the latest jokes."""
        user = optional_user(request)
        if isinstance(user, Redirect):
            return redirect_response(user, session_config)
        jokes = container.joke_service.list_recent_jokes(limit=5)
        return HTMLResponse(render_index(user, jokes))

    @app.get("/jokes", response_class=HTMLResponse)
    async def list_jokes(request: Request) -> Response:
        """List recent jokes."""
        user = optional_user(request)
        if isinstance(user, Redirect):
            return redirect_response(user, session_config)
        jokes = container.joke_service.list_recent_jokes()
        return HTMLResponse(render_joke_list(user, jokes))

    @app.get("/jokes/new", response_class=HTMLResponse)
    async def new_joke_form(request: Request) -> Response:
        """Show the new-joke form to logged-in users."""
        user = container.auth_gate.require_user(StarletteRequest(request))
        if isinstance(user, Redirect):
            return redirect_response(user, session_config)
        return HTMLResponse(render_new_joke(user))

    @app.post("/jokes/new")
    async def create_joke(request: Request) -> Response:
        """Validate and persist a submitted joke."""
        outcome = await container.joke_service.create_joke(StarletteRequest(request))
        if isinstance(outcome, Redirect):
            return redirect_response(outcome, session_config)
        if wants_json(request):
            return _rejection_json(outcome)
        user = optional_user(request)
        page_user = user if isinstance(user, UserRecord) else None
        return HTMLResponse(
            render_new_joke(page_user, outcome.data), status_code=outcome.status_code
        )

    @app.get("/jokes/{joke_id}", response_class=HTMLResponse)
    async def joke_detail(joke_id: str, request: Request) -> Response:
        """Show a single joke."""
        user = optional_user(request)
        if isinstance(user, Redirect):
            return redirect_response(user, session_config)
        joke = None
        parsed_id = _parse_uuid(joke_id)
        if parsed_id is not None:
            joke = container.joke_service.get_joke(parsed_id)
        if joke is None:
            return HTMLResponse(
                render_not_found(user), status_code=status.HTTP_404_NOT_FOUND
            )
        return HTMLResponse(render_joke(user, joke))

    @app.get("/login", response_class=HTMLResponse)
    async def login_form(redirect: str = "") -> HTMLResponse:
        """Show the login form."""
        return HTMLResponse(render_login(redirect_to=redirect))

    @app.post("/login")
    async def login(request: Request) -> Response:
        """Verify credentials and start a session."""
        outcome = await container.login_service.login(StarletteRequest(request))
        if isinstance(outcome, Redirect):
            return redirect_response(outcome, session_config)
        if wants_json(request):
            return _rejection_json(outcome)
        return HTMLResponse(render_login(outcome.data), status_code=outcome.status_code)

    @app.post("/logout")
    async def logout(request: Request) -> Response:
        """Clear the session cookie."""
        outcome = container.session_accessor.logout(StarletteRequest(request))
        return redirect_response(outcome, session_config)

    @app.get("/logout")
    async def logout_page() -> RedirectResponse:
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    return app


def _rejection_json(outcome: SubmissionRejected) -> JSONResponse:
    return JSONResponse(outcome.data.to_payload(), status_code=outcome.status_code)


def _parse_uuid(raw_id: str) -> UUID | None:
    try:
        return UUID(raw_id)
    except ValueError:
        return None
