"""lemon.markets realtime client: issues tokens for the live quote stream."""
import logging

from lemon_markets.clients.core import LemonClientABC
from lemon_markets.clients.core.transport import DEFAULT_TIMEOUT, Transport
from lemon_markets.clients.streaming.dto import AuthenticationToken
from lemon_markets.config import Environment, Settings

logger = logging.getLogger(__name__)


class StreamingClient(LemonClientABC):
    """Client for https://realtime.lemon.markets.

    The auth endpoint answers with a bare JSON object instead of an envelope.
    """

    api_name = "lemon.markets realtime"

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = Environment.REALTIME.value,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
    ) -> None:
        super().__init__(api_key, base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StreamingClient":
        return cls(settings.api_key, timeout=settings.timeout)

    async def get_token(self) -> AuthenticationToken:
        """Request a new authentication token.

        Raises:
            TransportError: Request failed or the status was not 2xx.
            DomainError: Server rejected the request.
            DecodeError: Body is not a token object.
        """
        payload = await self.transport.request_json("POST", "auth")
        token = self._decoder(AuthenticationToken).decode_value(payload)
        logger.debug("Issued realtime token for user %s", token.user_id)
        return token
