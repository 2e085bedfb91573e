"""Realtime streaming client."""
from lemon_markets.clients.streaming.dto import AuthenticationToken
from lemon_markets.clients.streaming.streaming_client import StreamingClient

__all__ = ["StreamingClient", "AuthenticationToken"]
