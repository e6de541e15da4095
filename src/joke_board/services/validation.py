"""Field validation rules for jokes and login forms."""

from joke_board.domain.submissions import FieldErrors, JokeFields, LoginFieldErrors

MIN_JOKE_NAME_LENGTH = 2
MIN_JOKE_CONTENT_LENGTH = 10
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def validate_joke_name(name: str) -> str | None:
    """Return an error message when the joke name is too short."""
    if len(name) < MIN_JOKE_NAME_LENGTH:
        return "That joke's name is too short"
    return None


def validate_joke_content(content: str) -> str | None:
    """Return an error message when the joke body is too short."""
    if len(content) < MIN_JOKE_CONTENT_LENGTH:
        return "That joke is too short"
    return None


def validate_joke_fields(fields: JokeFields) -> FieldErrors:
    """Run every joke rule and report all failures together."""
    return FieldErrors(
        name=validate_joke_name(fields.name),
        content=validate_joke_content(fields.content),
    )


def validate_username(username: str) -> str | None:
    if len(username) < MIN_USERNAME_LENGTH:
        return "Usernames must be at least 3 characters long"
    return None


def validate_password(password: str) -> str | None:
    if len(password) < MIN_PASSWORD_LENGTH:
        return "Passwords must be at least 6 characters long"
    return None


def validate_login_fields(username: str, password: str) -> LoginFieldErrors:
    """Run the login form rules and report all failures together."""
    return LoginFieldErrors(
        username=validate_username(username),
        password=validate_password(password),
    )
