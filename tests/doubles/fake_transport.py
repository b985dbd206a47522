"""Fake transport for testing without a network peer.

This fake implements the ITransport interface for testing.
"""

import asyncio
from typing import Any, List, Optional, Union

from modbus_tcp_client.domain.exceptions import TransportError
from modbus_tcp_client.domain.interfaces import ITransport, StateCallback
from modbus_tcp_client.domain.value_objects import ConnectionState


class FakeTransport(ITransport):
    """Fake TCP transport for testing.

    Responses are queued and handed out one per receive(). A queued
    exception is raised instead of returned.

    Attributes:
        _connected: Whether transport is connected
        _responses: Queued responses (bytes or exceptions)
        _calls: History of send() calls
        _fail_next_connect: Whether next connect() should fail

    Example:
        >>> transport = FakeTransport()
        >>> await transport.connect("127.0.0.1", 502)
        >>> transport.queue_response(b'\\x01\\x03\\x02\\x00\\x01...')
        >>> await transport.send(request)
        >>> response = await transport.receive(1, 256)
    """

    def __init__(self):
        """Initialize fake transport."""
        self._connected = False
        self._responses: List[Union[bytes, Exception]] = []
        self._calls: List[bytes] = []
        self._fail_next_connect = False
        self._on_state_change: Optional[StateCallback] = None
        self._receive_gate: Optional[asyncio.Event] = None
        self.host: str = ""
        self.port: int = 0
        self.receive_bounds: List[tuple] = []

    async def connect(
        self,
        host: str,
        port: int,
        on_state_change: Optional[StateCallback] = None,
    ) -> None:
        """Simulate connection, reporting PREPARING then READY or FAILED."""
        self._on_state_change = on_state_change
        self.host = host
        self.port = port
        self.emit(ConnectionState.PREPARING)

        if self._fail_next_connect:
            self._fail_next_connect = False
            self.emit(ConnectionState.FAILED)
            raise TransportError(f"Simulated connect failure to {host}:{port}")

        self._connected = True
        self.emit(ConnectionState.READY)

    async def disconnect(self) -> None:
        """Simulate disconnection."""
        if self._connected:
            self._connected = False
            self.emit(ConnectionState.CANCELLED)

    async def send(self, data: bytes) -> None:
        """Record a sent frame."""
        if not self._connected:
            raise TransportError("Not connected")
        self._calls.append(bytes(data))

    async def receive(self, min_length: int, max_length: int) -> bytes:
        """Return the next queued response."""
        if not self._connected:
            raise TransportError("Not connected")
        self.receive_bounds.append((min_length, max_length))

        if self._receive_gate is not None:
            await self._receive_gate.wait()

        if not self._responses:
            raise TransportError("No response queued")

        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def is_connected(self) -> bool:
        """Check if connected."""
        return self._connected

    # Test helper methods

    def queue_response(self, response: Union[bytes, Exception]) -> None:
        """Queue a response (or exception) for the next receive()."""
        self._responses.append(response)

    def get_calls(self) -> List[bytes]:
        """Get history of send() calls."""
        return self._calls.copy()

    def fail_next_connect(self) -> None:
        """Make next connect() report FAILED and raise TransportError."""
        self._fail_next_connect = True

    def force_connected(self) -> None:
        """Mark the transport connected without reporting any state."""
        self._connected = True

    def hold_receive(self) -> asyncio.Event:
        """Block receive() until the returned event is set."""
        self._receive_gate = asyncio.Event()
        return self._receive_gate

    def emit(self, signal: Any) -> None:
        """Report a raw state signal to the registered callback."""
        if self._on_state_change is not None:
            self._on_state_change(signal)
