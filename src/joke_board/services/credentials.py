"""Password hashing and credential verification."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import bcrypt

from joke_board.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user lookups."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""


class PasswordHasher(Protocol):
    """One-way salted password hashing."""

    def hash(self, password: str) -> str:
        """Return a salted digest for the password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the digest."""


@dataclass(frozen=True)
class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation of the password hasher."""

    rounds: int = 12

    def hash(self, password: str) -> str:
        """Hash a password with a fresh bcrypt salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a bcrypt digest in constant time."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            # Malformed stored hash.
            return False


@dataclass
class CredentialVerifier:
    """Checks a username/password pair against stored credentials."""

    repository: UserRepository
    hasher: PasswordHasher

    def verify(self, username: str, password: str) -> UserRecord | None:
        """Return the matching user, or None for any kind of mismatch.

        Unknown usernames and wrong passwords are indistinguishable to the
        caller.
        """
        user = self.repository.get_by_username(username)
        if user is None:
            logger.info("Login failed for username %r", username)
            return None
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed for username %r", username)
            return None
        return user
