"""Login form handling."""

import asyncio
import logging
from dataclasses import dataclass

from joke_board.domain.auth import InboundRequest, Redirect
from joke_board.domain.submissions import ActionData, SubmissionRejected
from joke_board.services.credentials import CredentialVerifier
from joke_board.services.jokes import FORM_NOT_SUBMITTED
from joke_board.services.sessions import SessionAccessor, safe_redirect_target
from joke_board.services.validation import validate_login_fields

logger = logging.getLogger(__name__)

BAD_CREDENTIALS = "Username/Password combination is incorrect"


@dataclass
class LoginService:
    """Verifies a login form and starts a session for the user."""

    verifier: CredentialVerifier
    accessor: SessionAccessor

    async def login(self, request: InboundRequest) -> Redirect | SubmissionRejected:
        """Return a redirect carrying a new session, or the form errors."""
        form = await request.form()
        username = form.get("username")
        password = form.get("password")
        redirect_to = form.get("redirectTo", "")
        if (
            not isinstance(username, str)
            or not isinstance(password, str)
            or not isinstance(redirect_to, str)
        ):
            return SubmissionRejected(ActionData(form_error=FORM_NOT_SUBMITTED))

        # The password is never echoed back into the form.
        fields = {"username": username, "redirectTo": redirect_to}
        field_errors = validate_login_fields(username, password)
        if field_errors.has_errors:
            return SubmissionRejected(
                ActionData(field_errors=field_errors, fields=fields)
            )

        # bcrypt is CPU bound; keep it off the event loop.
        user = await asyncio.to_thread(self.verifier.verify, username, password)
        if user is None:
            return SubmissionRejected(
                ActionData(form_error=BAD_CREDENTIALS, fields=fields)
            )
        logger.info("User %s logged in", user.id)
        return self.accessor.create_user_session(
            user.id, safe_redirect_target(redirect_to)
        )
