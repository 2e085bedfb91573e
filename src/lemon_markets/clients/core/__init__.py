"""Core client abstractions: transport, envelope decoding and the pagination engine."""
from lemon_markets.clients.core.client_abc import LemonClientABC
from lemon_markets.clients.core.decoder import PageDecoder
from lemon_markets.clients.core.envelope import Envelope, ErrorBody
from lemon_markets.clients.core.error_mapper import (DOMAIN_ERROR_STATUS,
                                                     ResponseErrorMapper)
from lemon_markets.clients.core.exceptions import (ConfigError, DecodeError,
                                                   DomainError,
                                                   LemonMarketsError,
                                                   TransportError)
from lemon_markets.clients.core.fetch import fetch_one, send
from lemon_markets.clients.core.items import Err, Ok, StreamItem
from lemon_markets.clients.core.query import encode_query
from lemon_markets.clients.core.stream_helpers import collect, iter_records, paginate
from lemon_markets.clients.core.transport import Transport

__all__ = [
    "DOMAIN_ERROR_STATUS",
    "ConfigError",
    "DecodeError",
    "DomainError",
    "Envelope",
    "Err",
    "ErrorBody",
    "LemonClientABC",
    "LemonMarketsError",
    "Ok",
    "PageDecoder",
    "ResponseErrorMapper",
    "StreamItem",
    "Transport",
    "TransportError",
    "collect",
    "encode_query",
    "fetch_one",
    "iter_records",
    "paginate",
    "send",
]
