"""Client configuration value and its validation schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import voluptuous as vol

from ..const import (
    CONF_CONNECT_TIMEOUT,
    CONF_FRAMING,
    CONF_HOST,
    CONF_PORT,
    CONF_UNIT_ID,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PORT,
    DEFAULT_UNIT_ID,
)
from ..domain.exceptions import ConfigurationError
from ..domain.value_objects import FramingMode


def framing_mode(value: Any) -> FramingMode:
    """Voluptuous validator accepting a FramingMode or its name."""
    if isinstance(value, FramingMode):
        return value
    try:
        return FramingMode.from_string(value)
    except ValueError as err:
        raise vol.Invalid(str(err)) from err


CLIENT_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_HOST): vol.All(str, vol.Length(min=1)),
        vol.Optional(CONF_PORT, default=DEFAULT_PORT): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=65535)
        ),
        vol.Optional(CONF_FRAMING, default=FramingMode.TCP.value): framing_mode,
        vol.Optional(CONF_UNIT_ID, default=DEFAULT_UNIT_ID): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=255)
        ),
        vol.Optional(CONF_CONNECT_TIMEOUT, default=DEFAULT_CONNECT_TIMEOUT): vol.Any(
            None,
            vol.All(vol.Coerce(float), vol.Range(min=0, min_included=False)),
        ),
    }
)


@dataclass(frozen=True)
class ClientConfig:
    """Immutable connection settings for one Modbus device.

    Attributes:
        host: Device or gateway hostname / IP address
        port: TCP port (default: 502)
        framing: Wire framing (default: Modbus TCP)
        unit_id: Default unit id for requests (default: 1)
        connect_timeout: Seconds allowed for connection setup, None for no limit

    Example:
        >>> config = ClientConfig.from_dict({"host": "10.0.0.7", "framing": "rtu_over_tcp"})
        >>> config.port, config.framing
        (502, <FramingMode.RTU_OVER_TCP: 'rtu_over_tcp'>)
    """

    host: str
    port: int = DEFAULT_PORT
    framing: FramingMode = FramingMode.TCP
    unit_id: int = DEFAULT_UNIT_ID
    connect_timeout: Optional[float] = DEFAULT_CONNECT_TIMEOUT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Validate a mapping and build a ClientConfig.

        Raises:
            ConfigurationError: If the mapping fails validation
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Client configuration must be a mapping, got {type(data).__name__}"
            )
        try:
            validated = CLIENT_SCHEMA(data)
        except vol.Invalid as err:
            raise ConfigurationError(f"Invalid client configuration: {err}") from err

        return cls(
            host=validated[CONF_HOST],
            port=validated[CONF_PORT],
            framing=validated[CONF_FRAMING],
            unit_id=validated[CONF_UNIT_ID],
            connect_timeout=validated[CONF_CONNECT_TIMEOUT],
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the configuration mapping format."""
        return {
            CONF_HOST: self.host,
            CONF_PORT: self.port,
            CONF_FRAMING: self.framing.value,
            CONF_UNIT_ID: self.unit_id,
            CONF_CONNECT_TIMEOUT: self.connect_timeout,
        }
