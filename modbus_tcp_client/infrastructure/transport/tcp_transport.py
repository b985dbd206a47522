"""TCP transport implementation.

This module implements the ITransport interface over an asyncio stream
connection. It moves opaque frames; Modbus framing lives in the protocol
codecs.
"""

import asyncio
import errno
import logging
from typing import Optional

from ...const import DEFAULT_CONNECT_TIMEOUT
from ...domain.exceptions import TransportError
from ...domain.interfaces import ITransport, StateCallback
from ..decorators import handle_transport_errors
from ..state_machines import ConnectionEvent, ConnectionStateMachine

_LOGGER = logging.getLogger(__name__)

DISCONNECT_TIMEOUT = 5.0

# No route to the device: reported as WAITING before FAILED
_PATH_UNAVAILABLE_ERRNOS = frozenset(
    code
    for code in (
        getattr(errno, "ENETUNREACH", None),
        getattr(errno, "EHOSTUNREACH", None),
        getattr(errno, "ENETDOWN", None),
        getattr(errno, "EHOSTDOWN", None),
    )
    if code is not None
)


class TCPTransport(ITransport):
    """asyncio TCP transport for Modbus devices and gateways.

    Connection state changes are tracked by a ConnectionStateMachine and
    reported to the callback given to :meth:`connect`.

    Attributes:
        _reader: Stream reader (present only while connected)
        _writer: Stream writer (present only while connected)
        _state_machine: Connection lifecycle tracking

    Example:
        >>> transport = TCPTransport(connect_timeout=5.0)
        >>> await transport.connect("192.168.1.50", 502, print)
        preparing
        ready
        >>> await transport.send(request)
        >>> response = await transport.receive(1, 256)
        >>> await transport.disconnect()
        cancelled
    """

    def __init__(self, connect_timeout: Optional[float] = DEFAULT_CONNECT_TIMEOUT):
        """Initialize TCP transport.

        Args:
            connect_timeout: Seconds allowed for connection setup, or None
                to wait as long as the OS does
        """
        self._connect_timeout = connect_timeout
        self._host: Optional[str] = None
        self._port: Optional[int] = None
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None
        self._state_machine = ConnectionStateMachine()

    @property
    def state_machine(self) -> ConnectionStateMachine:
        """Connection state tracking for this transport."""
        return self._state_machine

    @handle_transport_errors("TCP connect")
    async def connect(
        self,
        host: str,
        port: int,
        on_state_change: Optional[StateCallback] = None,
    ) -> None:
        """Open a TCP connection to the device.

        Raises:
            TransportError: If the connection cannot be established
        """
        if self._writer is not None:
            _LOGGER.debug("Closing previous connection to %s:%s", self._host, self._port)
            await self.disconnect()

        self._host = host
        self._port = port
        self._state_machine.set_listener(on_state_change)
        self._state_machine.transition(ConnectionEvent.CONNECT)

        _LOGGER.debug("Connecting to %s:%s", host, port)

        try:
            if self._connect_timeout is None:
                reader, writer = await asyncio.open_connection(host, port)
            else:
                reader, writer = await asyncio.wait_for(
                    asyncio.open_connection(host, port),
                    timeout=self._connect_timeout,
                )
        except asyncio.TimeoutError as err:
            self._state_machine.transition(ConnectionEvent.CONNECT_FAILED)
            raise TransportError(
                f"Timeout connecting to {host}:{port} after {self._connect_timeout}s"
            ) from err
        except OSError as err:
            if err.errno in _PATH_UNAVAILABLE_ERRNOS:
                self._state_machine.transition(ConnectionEvent.PATH_UNAVAILABLE)
            self._state_machine.transition(ConnectionEvent.CONNECT_FAILED)
            raise TransportError(f"Failed to connect to {host}:{port}: {err}") from err

        self._reader = reader
        self._writer = writer
        self._state_machine.transition(ConnectionEvent.CONNECT_SUCCESS)
        _LOGGER.info("TCP transport connected to %s:%s", host, port)

    async def disconnect(self) -> None:
        """Close the TCP connection.

        Safe to call repeatedly. A receive pending on this connection sees
        end-of-stream and fails with TransportError.
        """
        writer = self._writer
        self._reader = None
        self._writer = None
        self._state_machine.transition(ConnectionEvent.CANCEL)

        if writer is None:
            return

        try:
            writer.close()
            await asyncio.wait_for(writer.wait_closed(), timeout=DISCONNECT_TIMEOUT)
        except asyncio.TimeoutError:
            _LOGGER.warning(
                "Timeout waiting for connection close to %s:%s",
                self._host,
                self._port,
            )
        except OSError as err:
            _LOGGER.debug("Error during disconnect (non-critical): %s", err)

        _LOGGER.debug("TCP transport disconnected from %s:%s", self._host, self._port)

    @handle_transport_errors("TCP send")
    async def send(self, data: bytes) -> None:
        """Write a complete frame and wait for the socket buffer to drain."""
        writer = self._require_writer()

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Sending %d bytes to %s:%s: %s",
                len(data),
                self._host,
                self._port,
                data.hex(),
            )

        try:
            writer.write(data)
            await writer.drain()
        except OSError as err:
            self._state_machine.transition(ConnectionEvent.CONNECTION_LOST)
            raise TransportError(f"Connection lost during send: {err}") from err

    @handle_transport_errors("TCP receive")
    async def receive(self, min_length: int, max_length: int) -> bytes:
        """Read at least ``min_length`` and at most ``max_length`` bytes."""
        if not 1 <= min_length <= max_length:
            raise ValueError(
                f"Receive bounds must satisfy 1 <= min <= max, got {min_length}, {max_length}"
            )

        self._require_writer()
        reader = self._reader
        buffer = bytearray()

        try:
            while len(buffer) < min_length:
                chunk = await reader.read(max_length - len(buffer))
                if not chunk:
                    self._state_machine.transition(ConnectionEvent.CONNECTION_LOST)
                    raise TransportError(
                        f"Connection closed after {len(buffer)} of {min_length} bytes"
                    )
                buffer += chunk
        except OSError as err:
            self._state_machine.transition(ConnectionEvent.CONNECTION_LOST)
            raise TransportError(f"Connection lost during receive: {err}") from err

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Received %d bytes from %s:%s: %s",
                len(buffer),
                self._host,
                self._port,
                buffer.hex(),
            )

        return bytes(buffer)

    @property
    def is_connected(self) -> bool:
        """Check if transport is connected and usable."""
        return (
            self._writer is not None
            and not self._writer.is_closing()
            and self._state_machine.is_ready
        )

    def _require_writer(self) -> asyncio.StreamWriter:
        if not self.is_connected:
            raise TransportError("Not connected to device")
        return self._writer
