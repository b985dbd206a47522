"""ITransport interface for transport layer implementations."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..value_objects.connection_state import ConnectionState

StateCallback = Callable[[ConnectionState], None]


class ITransport(ABC):
    """Interface for byte-stream transport implementations.

    The transport owns the socket. It knows nothing about Modbus framing; it
    moves opaque bytes and reports connection state changes.

    Connection lifecycle:
        1. connect(host, port, on_state_change) → establishes connection
        2. send(data) / receive(min, max) → one exchange at a time
        3. disconnect() → closes connection

    Example:
        >>> transport = TCPTransport()
        >>> await transport.connect("192.168.1.50", 502, print)
        >>> await transport.send(request)
        >>> response = await transport.receive(1, 256)
        >>> await transport.disconnect()
    """

    @abstractmethod
    async def connect(
        self,
        host: str,
        port: int,
        on_state_change: Optional[StateCallback] = None,
    ) -> None:
        """Establish connection to device.

        Every state transition is reported to ``on_state_change`` in order,
        once per transition, including transitions that happen later while
        the connection is in use.

        Args:
            host: Device hostname or IP address
            port: TCP port
            on_state_change: Callback receiving each ConnectionState

        Raises:
            TransportError: If the connection cannot be established
        """

    @abstractmethod
    async def disconnect(self) -> None:
        """Close connection to device.

        This method should be idempotent (safe to call multiple times).
        After disconnect, is_connected should return False.
        """

    @abstractmethod
    async def send(self, data: bytes) -> None:
        """Send a complete frame.

        Re-sending identical bytes must not corrupt transport state.

        Raises:
            TransportError: If not connected or the write fails
        """

    @abstractmethod
    async def receive(self, min_length: int, max_length: int) -> bytes:
        """Receive between ``min_length`` and ``max_length`` bytes.

        No deadline is applied; callers wrap this in ``asyncio.wait_for``
        if they need one.

        Raises:
            TransportError: If not connected, the read fails, or the peer
                closes the stream before ``min_length`` bytes arrive
        """

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if transport is currently connected."""
