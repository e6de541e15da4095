"""Domain models for form submissions and their outcomes."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class JokeFields:
    """Raw, unvalidated fields of a new joke submission."""

    name: str
    content: str


@dataclass(frozen=True)
class FieldErrors:
    """Per-field messages for a joke submission; ``None`` means it passed."""

    name: str | None = None
    content: str | None = None

    @property
    def has_errors(self) -> bool:
        """Return True when any field failed validation."""
        return self.name is not None or self.content is not None


@dataclass(frozen=True)
class LoginFieldErrors:
    """Per-field messages for a login attempt."""

    username: str | None = None
    password: str | None = None

    @property
    def has_errors(self) -> bool:
        """Return True when any field failed validation."""
        return self.username is not None or self.password is not None


@dataclass(frozen=True)
class ActionData:
    """Payload used to re-render a form after a rejected submission."""

    form_error: str | None = None
    field_errors: FieldErrors | LoginFieldErrors | None = None
    fields: dict[str, str] | None = None

    def to_payload(self) -> dict[str, object]:
        """Serialize using the camelCase keys the form script reads."""
        payload: dict[str, object] = {}
        if self.form_error is not None:
            payload["formError"] = self.form_error
        if self.field_errors is not None:
            payload["fieldErrors"] = asdict(self.field_errors)
        if self.fields is not None:
            payload["fields"] = dict(self.fields)
        return payload


@dataclass(frozen=True)
class SubmissionRejected:
    """A submission that was not accepted and must be shown again."""

    data: ActionData
    status_code: int = 400
