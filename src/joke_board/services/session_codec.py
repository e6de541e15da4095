"""Signed, stateless session cookie codec."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from itsdangerous import BadData, URLSafeTimedSerializer

from joke_board.domain.auth import SessionConfig

_SIGNING_SALT = "joke-board-session"


@dataclass
class SessionCodec:
    """Encode and decode the signed session payload stored in the cookie."""

    config: SessionConfig
    _serializer: URLSafeTimedSerializer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.config.secrets or not all(self.config.secrets):
            raise ValueError("At least one non-empty session secret is required")
        # itsdangerous signs with the last key and verifies against all of them.
        self._serializer = URLSafeTimedSerializer(
            list(reversed(self.config.secrets)), salt=_SIGNING_SALT
        )

    def encode(self, payload: Mapping[str, object]) -> str:
        """Sign a payload and return the cookie value."""
        return self._serializer.dumps(dict(payload))

    def decode(self, cookie_value: str | None) -> dict[str, object] | None:
        """Return the verified payload, or None for a missing or bad cookie."""
        if not cookie_value:
            return None
        try:
            payload = self._serializer.loads(
                cookie_value, max_age=self.config.max_age_seconds
            )
        except BadData:
            return None
        if not isinstance(payload, dict):
            return None
        return payload
