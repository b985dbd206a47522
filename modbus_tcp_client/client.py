"""Modbus client facade.

Owns one transport connection and one framing mode, and sequences
build → send → receive → validate → deliver for each public operation.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional, Sequence

from .application.use_cases import (
    ReadRegistersResult,
    ReadRegistersUseCase,
    WriteRegistersResult,
    WriteRegistersUseCase,
)
from .config import ClientConfig
from .const import DEFAULT_UNIT_ID
from .domain.exceptions import ConfigurationError, ExchangeInProgressError
from .domain.interfaces import ICRC, ITransport, StateCallback
from .domain.value_objects import ConnectionState, FramingMode
from .infrastructure.protocol import create_protocol
from .infrastructure.transport import TCPTransport

_LOGGER = logging.getLogger(__name__)


class ModbusClient:
    """Client for one Modbus TCP or RTU-over-TCP device.

    At most one exchange may be outstanding per client. The client holds no
    queue: starting a second operation before the first completes raises
    :class:`ExchangeInProgressError`. No response deadline is applied;
    wrap calls in ``asyncio.wait_for`` and treat a timeout like a transport
    failure. Closing the connection fails a pending exchange.

    Example:
        >>> client = ModbusClient(FramingMode.RTU_OVER_TCP)
        >>> await client.connect("192.168.1.50", 502, on_state_change=print)
        >>> result = await client.read_holding_registers(0x0000, 4)
        >>> if result.success:
        ...     print(result.registers)
        >>> ok = (await client.write_holding_registers(0x0010, [1, 2])).success
        >>> await client.disconnect()
    """

    def __init__(
        self,
        mode: FramingMode,
        transport: Optional[ITransport] = None,
        crc: Optional[ICRC] = None,
        unit_id: int = DEFAULT_UNIT_ID,
        config: Optional[ClientConfig] = None,
    ):
        """Initialize the client.

        Args:
            mode: Wire framing, fixed for the lifetime of the client
            transport: Transport implementation (default: TCPTransport)
            crc: CRC calculator for RTU-over-TCP (default: ModbusCRC16)
            unit_id: Unit id used when an operation does not pass one
            config: Settings used by connect() when host/port are omitted
        """
        self._mode = mode
        self._transport = transport or TCPTransport()
        self._protocol = create_protocol(mode, crc)
        self._unit_id = unit_id
        self._config = config
        self._read_use_case = ReadRegistersUseCase(self._transport, self._protocol)
        self._write_use_case = WriteRegistersUseCase(self._transport, self._protocol)
        self._exchange_active = False

    @classmethod
    def from_config(
        cls, config: ClientConfig, transport: Optional[ITransport] = None
    ) -> "ModbusClient":
        """Create a client from validated configuration."""
        return cls(
            mode=config.framing,
            transport=transport or TCPTransport(connect_timeout=config.connect_timeout),
            unit_id=config.unit_id,
            config=config,
        )

    @property
    def mode(self) -> FramingMode:
        """Framing mode of this client."""
        return self._mode

    @property
    def is_connected(self) -> bool:
        """Check if the underlying transport is connected."""
        return self._transport.is_connected

    async def connect(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        on_state_change: Optional[Callable[[ConnectionState], None]] = None,
    ) -> None:
        """Connect to the device.

        Every state transition reported by the transport is forwarded to
        ``on_state_change`` in order, one call per transition. Signals the
        transport reports outside the known set arrive as UNKNOWN.

        Args:
            host: Device hostname or IP (default: from config)
            port: TCP port (default: from config)
            on_state_change: Callback receiving each ConnectionState

        Raises:
            TransportError: If the connection cannot be established
            ConfigurationError: If host/port are omitted and no config is set
        """
        if host is None or port is None:
            if self._config is None:
                raise ConfigurationError("host and port are required without a config")
            host = self._config.host if host is None else host
            port = self._config.port if port is None else port

        forward: Optional[StateCallback] = None
        if on_state_change is not None:

            def forward(state) -> None:
                on_state_change(ConnectionState.from_signal(state))

        _LOGGER.debug("Connecting %s client to %s:%s", self._mode.value, host, port)
        await self._transport.connect(host, port, forward)

    async def disconnect(self) -> None:
        """Close the connection (idempotent)."""
        await self._transport.disconnect()

    async def read_holding_registers(
        self,
        address: int,
        count: int,
        unit_id: Optional[int] = None,
        on_result: Optional[Callable[[ReadRegistersResult], None]] = None,
    ) -> ReadRegistersResult:
        """Read ``count`` holding registers starting at ``address``.

        Args:
            address: Starting register address
            count: Number of registers (0-125)
            unit_id: Unit id (default: the client's unit id)
            on_result: Called exactly once with the result

        Returns:
            ReadRegistersResult; ``registers`` is None on any failure

        Raises:
            ValueError: If an argument is out of range
            ExchangeInProgressError: If another exchange is outstanding
        """
        unit = self._unit_id if unit_id is None else unit_id
        async with self._exchange():
            result = await self._read_use_case.execute(address, count, unit)
        if on_result is not None:
            on_result(result)
        return result

    async def write_holding_registers(
        self,
        address: int,
        values: Sequence[int],
        unit_id: Optional[int] = None,
        on_result: Optional[Callable[[WriteRegistersResult], None]] = None,
    ) -> WriteRegistersResult:
        """Write ``values`` to consecutive holding registers from ``address``.

        Args:
            address: First register address
            values: Register values (1-123 values, 0-65535 each)
            unit_id: Unit id (default: the client's unit id)
            on_result: Called exactly once with the result

        Returns:
            WriteRegistersResult; ``success`` is the acknowledgement outcome

        Raises:
            ValueError: If an argument is out of range
            ExchangeInProgressError: If another exchange is outstanding
        """
        unit = self._unit_id if unit_id is None else unit_id
        async with self._exchange():
            result = await self._write_use_case.execute(address, values, unit)
        if on_result is not None:
            on_result(result)
        return result

    @asynccontextmanager
    async def _exchange(self):
        if self._exchange_active:
            raise ExchangeInProgressError(
                "Another exchange is outstanding on this client"
            )
        self._exchange_active = True
        try:
            yield
        finally:
            self._exchange_active = False

    async def __aenter__(self) -> "ModbusClient":
        if self._config is not None and not self.is_connected:
            await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"ModbusClient(mode={self._mode.value}, unit_id={self._unit_id}, "
            f"connected={self.is_connected})"
        )
