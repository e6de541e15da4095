"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from joke_board.domain.models import UserRecord
from joke_board.services.credentials import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""
        response = (
            self.client.table("users")
            .select("id, username, password_hash")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_user(response.data[0])

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select("id, username, password_hash")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_user(response.data[0])


def _to_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        password_hash=str(row["password_hash"]),
    )
