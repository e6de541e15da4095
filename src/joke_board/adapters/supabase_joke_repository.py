"""Supabase-backed joke repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from joke_board.domain.models import JokeRecord
from joke_board.services.jokes import JokeRepository


@dataclass
class SupabaseJokeRepository(JokeRepository):
    """Supabase implementation for joke persistence."""

    client: Client

    def create_joke(
        self, name: str, content: str, jokester_id: UUID | None
    ) -> JokeRecord:
        """Insert a joke row and return it."""
        response = (
            self.client.table("jokes")
            .insert(
                {
                    "name": name,
                    "content": content,
                    "jokester_id": str(jokester_id) if jokester_id else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create joke in Supabase")
        return _to_joke(response.data[0])

    def get_joke(self, joke_id: UUID) -> JokeRecord | None:
        """Return a joke by id, if present."""
        response = (
            self.client.table("jokes")
            .select("id, name, content, jokester_id")
            .eq("id", str(joke_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_joke(response.data[0])

    def list_recent_jokes(self, limit: int) -> list[JokeRecord]:
        """Return the newest jokes first."""
        response = (
            self.client.table("jokes")
            .select("id, name, content, jokester_id")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_to_joke(row) for row in response.data or []]


def _to_joke(row: dict[str, object]) -> JokeRecord:
    jokester_id = row.get("jokester_id")
    return JokeRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        content=str(row["content"]),
        jokester_id=UUID(str(jokester_id)) if jokester_id else None,
    )
