"""DTOs for the realtime streaming API."""
from datetime import datetime, timezone

from lemon_markets.schemas import Record


class AuthenticationToken(Record):
    """Short-lived token for the realtime quote stream.

    ``expires_at`` is a Unix timestamp in milliseconds.
    """

    token: str
    user_id: str | None = None
    expires_at: int | None = None

    @property
    def expires(self) -> datetime | None:
        if self.expires_at is None:
            return None
        return datetime.fromtimestamp(self.expires_at / 1000, tz=timezone.utc)
