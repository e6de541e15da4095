"""Joke creation pipeline and read helpers."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from joke_board.domain.auth import InboundRequest, Redirect
from joke_board.domain.models import JokeRecord
from joke_board.domain.submissions import ActionData, JokeFields, SubmissionRejected
from joke_board.services.sessions import AuthGate
from joke_board.services.validation import validate_joke_fields

logger = logging.getLogger(__name__)

FORM_NOT_SUBMITTED = "Form not submitted correctly."


class JokeRepository(Protocol):
    """Persistence interface for jokes."""

    def create_joke(
        self, name: str, content: str, jokester_id: UUID | None
    ) -> JokeRecord:
        """Create a joke and return it."""

    def get_joke(self, joke_id: UUID) -> JokeRecord | None:
        """Return a joke by id, if present."""

    def list_recent_jokes(self, limit: int) -> list[JokeRecord]:
        """Return the most recently created jokes."""


@dataclass
class JokeService:
    """Accepts new jokes from authenticated users and reads them back."""

    repository: JokeRepository
    auth_gate: AuthGate

    async def create_joke(
        self, request: InboundRequest
    ) -> Redirect | SubmissionRejected:
        """Run one submission through auth, parsing, validation and persistence."""
        user = self.auth_gate.require_user(request)
        if isinstance(user, Redirect):
            return user

        form = await request.form()
        name = form.get("name")
        content = form.get("content")
        if not isinstance(name, str) or not isinstance(content, str):
            return SubmissionRejected(ActionData(form_error=FORM_NOT_SUBMITTED))

        fields = JokeFields(name=name, content=content)
        field_errors = validate_joke_fields(fields)
        if field_errors.has_errors:
            return SubmissionRejected(
                ActionData(
                    field_errors=field_errors,
                    fields={"name": name, "content": content},
                )
            )

        joke = self.repository.create_joke(
            name=fields.name, content=fields.content, jokester_id=user.id
        )
        logger.info("User %s created joke %s", user.id, joke.id)
        return Redirect(location=f"/jokes/{joke.id}")

    def get_joke(self, joke_id: UUID) -> JokeRecord | None:
        """Return a joke by id, if present."""
        return self.repository.get_joke(joke_id)

    def list_recent_jokes(self, limit: int = 20) -> list[JokeRecord]:
        """Return the most recent jokes for the board."""
        return self.repository.list_recent_jokes(limit)
