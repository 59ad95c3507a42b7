"""Server configuration from defaults and environment variables."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

ENV_PREFIX = "MORSE_TRANSLATOR_"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_PREFIX = "/api/morse"
DEFAULT_LOG_LEVEL = "INFO"

# Names understood by both logging and uvicorn
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_prefix(prefix: str) -> str:
    """Return prefix with one leading slash and no trailing slash ('' for root)."""
    stripped = prefix.strip().strip('/')
    return f"/{stripped}" if stripped else ""


def parse_port(value: str | int) -> int:
    """Parse a TCP port number, raising ValueError when out of range."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Port must be an integer, got {value!r}") from None
    if not 1 <= port <= 65535:
        raise ValueError(f"Port must be 1-65535, got {port}")
    return port


def parse_log_level(value: str) -> str:
    """Return an upper-cased logging level name, raising ValueError if unknown."""
    name = value.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return name


@dataclass(frozen=True)
class ServerConfig:
    """Settings for the HTTP server."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    prefix: str = DEFAULT_PREFIX
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "port", parse_port(self.port))
        object.__setattr__(self, "prefix", normalize_prefix(self.prefix))
        object.__setattr__(self, "log_level", parse_log_level(self.log_level))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        """
        Build a config from MORSE_TRANSLATOR_* variables.

        Unset variables fall back to the defaults. Set
        MORSE_TRANSLATOR_PREFIX to an empty string to serve at the root.
        """
        env = os.environ if environ is None else environ
        return cls(
            host=env.get(f"{ENV_PREFIX}HOST", DEFAULT_HOST),
            port=env.get(f"{ENV_PREFIX}PORT", DEFAULT_PORT),
            prefix=env.get(f"{ENV_PREFIX}PREFIX", DEFAULT_PREFIX),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    def with_overrides(self, **overrides: object) -> "ServerConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
