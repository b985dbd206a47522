"""Client configuration."""

from .client_config import CLIENT_SCHEMA, ClientConfig, framing_mode

__all__ = [
    "CLIENT_SCHEMA",
    "ClientConfig",
    "framing_mode",
]
