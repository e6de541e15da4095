"""Domain models for the joke board."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    password_hash: str


@dataclass(frozen=True)
class JokeRecord:
    """Represents a persisted joke."""

    id: UUID
    name: str
    content: str
    jokester_id: UUID | None
