"""Client configuration: base URLs and settings read from the environment."""
import os
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, Field, ValidationError

from lemon_markets.clients.core.client_abc import API_KEY_ENV
from lemon_markets.clients.core.exceptions import ConfigError

ENVIRONMENT_ENV = "LEMON_ENVIRONMENT"
TIMEOUT_ENV = "LEMON_TIMEOUT"


class Environment(str, Enum):
    """Base URL of each lemon.markets API."""

    PAPER = "https://paper-trading.lemon.markets/v1"
    LIVE = "https://trading.lemon.markets/v1"
    DATA = "https://data.lemon.markets/v1"
    REALTIME = "https://realtime.lemon.markets/v1"

    @classmethod
    def from_name(cls, name: str) -> "Environment":
        """Look up an environment by name ("paper", "live", ...), case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(e.name.lower() for e in cls)
            raise ConfigError(f"Unknown environment '{name}'. Available: {choices}") from None


TRADING_ENVIRONMENTS = (Environment.PAPER, Environment.LIVE)


class Settings(BaseModel):
    """Settings shared by the trading, market data and streaming clients."""

    api_key: str = Field(min_length=1)
    environment: Environment = Environment.PAPER
    timeout: float = Field(default=30.0, gt=0)
    buffer_size: int = Field(default=1, ge=1)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from LEMON_API_KEY, LEMON_ENVIRONMENT and LEMON_TIMEOUT.

        Raises ConfigError if the API key is missing or a value is invalid.
        """
        env = os.environ if env is None else env
        api_key = env.get(API_KEY_ENV)
        if not api_key:
            raise ConfigError(f"Missing API key. Set {API_KEY_ENV} in the environment")

        values: dict[str, object] = {"api_key": api_key}
        if env.get(ENVIRONMENT_ENV):
            environment = Environment.from_name(env[ENVIRONMENT_ENV])
            if environment not in TRADING_ENVIRONMENTS:
                raise ConfigError(
                    f"{ENVIRONMENT_ENV} must be 'paper' or 'live', got '{env[ENVIRONMENT_ENV]}'"
                )
            values["environment"] = environment
        if env.get(TIMEOUT_ENV):
            values["timeout"] = env[TIMEOUT_ENV]
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
