"""Modbus TCP and RTU-over-TCP client.

Reads and writes holding registers on a Modbus device over one TCP
connection, using either MBAP framing or RTU frames with a CRC-16 trailer.
"""

from .application.use_cases import ReadRegistersResult, WriteRegistersResult
from .client import ModbusClient
from .config import ClientConfig
from .config_loader import load_client_config
from .domain.exceptions import (
    AckMismatchError,
    ConfigurationError,
    CrcMismatchError,
    ExchangeInProgressError,
    MalformedResponseError,
    ModbusClientError,
    ModbusExceptionResponseError,
    TransportError,
)
from .domain.value_objects import ConnectionState, ErrorKind, ExceptionCode, FramingMode
from .infrastructure.protocol import ModbusCRC16, create_protocol
from .infrastructure.transport import TCPTransport

__version__ = "1.0.0"

__all__ = [
    "AckMismatchError",
    "ClientConfig",
    "ConfigurationError",
    "ConnectionState",
    "CrcMismatchError",
    "ErrorKind",
    "ExceptionCode",
    "ExchangeInProgressError",
    "FramingMode",
    "MalformedResponseError",
    "ModbusCRC16",
    "ModbusClient",
    "ModbusClientError",
    "ModbusExceptionResponseError",
    "ReadRegistersResult",
    "TCPTransport",
    "TransportError",
    "WriteRegistersResult",
    "create_protocol",
    "load_client_config",
]
