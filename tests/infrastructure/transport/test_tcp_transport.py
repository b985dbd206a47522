"""Tests for TCPTransport against a local asyncio server."""

import asyncio
import errno
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

from modbus_tcp_client.domain.exceptions import TransportError
from modbus_tcp_client.domain.value_objects import ConnectionState
from modbus_tcp_client.infrastructure.transport import TCPTransport


class LocalDevice:
    """Minimal peer: replies to each request with the next canned response."""

    def __init__(self):
        self.requests = []
        self.responses = []
        self.close_after_request = False
        self.server = None
        self.port = None

    async def start(self):
        self.server = await asyncio.start_server(self._handle, "127.0.0.1", 0)
        self.port = self.server.sockets[0].getsockname()[1]

    async def stop(self):
        self.server.close()
        await self.server.wait_closed()

    async def _handle(self, reader, writer):
        try:
            while True:
                data = await reader.read(256)
                if not data:
                    break
                self.requests.append(data)
                if self.close_after_request:
                    break
                if self.responses:
                    writer.write(self.responses.pop(0))
                    await writer.drain()
        finally:
            writer.close()


@pytest_asyncio.fixture
async def device():
    """Start a local device on an ephemeral port."""
    local = LocalDevice()
    await local.start()
    yield local
    await local.stop()


@pytest_asyncio.fixture
async def transport():
    """Create a transport and close it after the test."""
    tcp = TCPTransport(connect_timeout=2.0)
    yield tcp
    await tcp.disconnect()


class TestTCPTransportConnection:
    """Test connection lifecycle and state reporting."""

    @pytest.mark.asyncio
    async def test_connect_reports_preparing_then_ready(self, device, transport):
        states = []

        await transport.connect("127.0.0.1", device.port, states.append)

        assert states == [ConnectionState.PREPARING, ConnectionState.READY]
        assert transport.is_connected

    @pytest.mark.asyncio
    async def test_disconnect_reports_cancelled(self, device, transport):
        states = []
        await transport.connect("127.0.0.1", device.port, states.append)

        await transport.disconnect()

        assert states[-1] == ConnectionState.CANCELLED
        assert not transport.is_connected

    @pytest.mark.asyncio
    async def test_disconnect_is_idempotent(self, transport):
        await transport.disconnect()
        await transport.disconnect()

        assert not transport.is_connected

    @pytest.mark.asyncio
    async def test_connection_refused(self, transport):
        """Refused connection fails without a WAITING state."""
        server = await asyncio.start_server(lambda r, w: None, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        server.close()
        await server.wait_closed()
        states = []

        with pytest.raises(TransportError, match="Failed to connect"):
            await transport.connect("127.0.0.1", port, states.append)

        assert states == [ConnectionState.PREPARING, ConnectionState.FAILED]
        assert not transport.is_connected

    @pytest.mark.asyncio
    async def test_unreachable_host_reports_waiting(self, transport):
        states = []
        unreachable = OSError(errno.EHOSTUNREACH, "No route to host")

        with patch.object(
            asyncio, "open_connection", AsyncMock(side_effect=unreachable)
        ):
            with pytest.raises(TransportError):
                await transport.connect("192.0.2.1", 502, states.append)

        assert states == [
            ConnectionState.PREPARING,
            ConnectionState.WAITING,
            ConnectionState.FAILED,
        ]

    @pytest.mark.asyncio
    async def test_connect_timeout(self):
        async def never_connects(*args, **kwargs):
            await asyncio.sleep(10)

        tcp = TCPTransport(connect_timeout=0.05)
        states = []

        with patch.object(asyncio, "open_connection", never_connects):
            with pytest.raises(TransportError, match="Timeout connecting"):
                await tcp.connect("192.0.2.1", 502, states.append)

        assert states == [ConnectionState.PREPARING, ConnectionState.FAILED]

    @pytest.mark.asyncio
    async def test_reconnect_closes_previous_connection(self, device, transport):
        states = []
        await transport.connect("127.0.0.1", device.port, states.append)

        await transport.connect("127.0.0.1", device.port, states.append)

        assert states == [
            ConnectionState.PREPARING,
            ConnectionState.READY,
            ConnectionState.CANCELLED,
            ConnectionState.PREPARING,
            ConnectionState.READY,
        ]
        assert transport.is_connected


class TestTCPTransportExchange:
    """Test send/receive."""

    @pytest.mark.asyncio
    async def test_send_and_receive(self, device, transport):
        device.responses.append(bytes.fromhex("01 03 02 00 2a"))
        await transport.connect("127.0.0.1", device.port)

        await transport.send(bytes.fromhex("01 03 00 00 00 01"))
        response = await transport.receive(1, 256)

        assert response == bytes.fromhex("01 03 02 00 2a")
        assert device.requests == [bytes.fromhex("01 03 00 00 00 01")]

    @pytest.mark.asyncio
    async def test_identical_frames_can_be_resent(self, device, transport):
        device.responses.extend([b"\x01", b"\x02"])
        await transport.connect("127.0.0.1", device.port)

        for expected in (b"\x01", b"\x02"):
            await transport.send(b"\xaa\xbb")
            assert await transport.receive(1, 256) == expected

    @pytest.mark.asyncio
    async def test_peer_close_fails_receive(self, device, transport):
        device.close_after_request = True
        states = []
        await transport.connect("127.0.0.1", device.port, states.append)

        await transport.send(b"\x01")
        with pytest.raises(TransportError, match="Connection closed"):
            await transport.receive(1, 256)

        assert states[-1] == ConnectionState.FAILED
        assert not transport.is_connected

    @pytest.mark.asyncio
    async def test_disconnect_fails_pending_receive(self, device, transport):
        states = []
        await transport.connect("127.0.0.1", device.port, states.append)
        pending = asyncio.create_task(transport.receive(1, 256))
        await asyncio.sleep(0.05)

        await transport.disconnect()

        with pytest.raises(TransportError):
            await pending
        # local close is not also reported as a failure
        assert states[-1] == ConnectionState.CANCELLED
        assert ConnectionState.FAILED not in states

    @pytest.mark.asyncio
    async def test_send_when_not_connected(self, transport):
        with pytest.raises(TransportError, match="Not connected"):
            await transport.send(b"\x01")

    @pytest.mark.asyncio
    async def test_receive_when_not_connected(self, transport):
        with pytest.raises(TransportError, match="Not connected"):
            await transport.receive(1, 256)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bounds", [(0, 256), (10, 5)])
    async def test_receive_rejects_invalid_bounds(self, transport, bounds):
        with pytest.raises(ValueError, match="Receive bounds"):
            await transport.receive(*bounds)
