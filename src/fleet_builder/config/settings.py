"""
Centralized settings for the fleet builder.

Defaults match the published pricing policy; each field can be overridden
with a FLEET_BUILDER_* environment variable.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional, Mapping

logger = logging.getLogger(__name__)

ENV_PREFIX = "FLEET_BUILDER_"


def _env_int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    """Read an integer override, keeping the default on bad input."""
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s%s=%r (not an integer)", ENV_PREFIX, name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s%s=%r (below %d)", ENV_PREFIX, name, raw, minimum)
        return default
    return value


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Rental duration used when either date is missing
    default_rental_days: int = 30

    # Upper bound for a single line quantity
    max_quantity: int = 999_999_999

    # Display currency (single currency only)
    currency: str = "EUR"

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    log_level: str = "INFO"

    @classmethod
    def load(cls, env: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Load settings from environment overrides."""
        env = os.environ if env is None else env
        defaults = cls()

        log_level = env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning("Ignoring %sLOG_LEVEL=%r", ENV_PREFIX, log_level)
            log_level = defaults.log_level

        return cls(
            default_rental_days=_env_int(env, "DEFAULT_RENTAL_DAYS", defaults.default_rental_days),
            max_quantity=_env_int(env, "MAX_QUANTITY", defaults.max_quantity),
            currency=defaults.currency,
            api_host=env.get(ENV_PREFIX + "API_HOST", defaults.api_host),
            api_port=_env_int(env, "API_PORT", defaults.api_port, minimum=1),
            log_level=log_level,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
