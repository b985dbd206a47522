"""Configuration loader for client connection profiles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import yaml

from .config import ClientConfig
from .domain.exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)


def load_client_config(path: Union[str, Path]) -> ClientConfig:
    """Load and validate a client profile from YAML.

    The settings may sit at the top level or under a ``client:`` key::

        client:
          host: 192.168.1.50
          port: 502
          framing: rtu_over_tcp
          unit_id: 3

    Args:
        path: Path to the YAML file

    Returns:
        Validated ClientConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the YAML is invalid, empty or fails validation
    """
    config_file = Path(path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        raw = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Invalid YAML: {err}") from err

    if not raw:
        raise ConfigurationError("Configuration file is empty")

    if isinstance(raw, dict) and "client" in raw:
        raw = raw["client"]

    config = ClientConfig.from_dict(raw)

    _LOGGER.info(
        "Loaded client configuration: %s:%d (%s, unit %d)",
        config.host,
        config.port,
        config.framing.value,
        config.unit_id,
    )

    return config
