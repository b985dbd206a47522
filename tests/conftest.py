"""Pytest configuration and fixtures for Modbus client tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import modbus_tcp_client
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from modbus_tcp_client.infrastructure.protocol import (
    ModbusCRC16,
    ModbusRTUOverTCPProtocol,
    ModbusTCPProtocol,
)
from tests.doubles import FakeTransport


@pytest.fixture
def crc() -> ModbusCRC16:
    """Return a CRC-16 calculator."""
    return ModbusCRC16()


@pytest.fixture
def tcp_protocol() -> ModbusTCPProtocol:
    """Return a Modbus TCP codec."""
    return ModbusTCPProtocol()


@pytest.fixture
def rtu_protocol() -> ModbusRTUOverTCPProtocol:
    """Return a Modbus RTU-over-TCP codec."""
    return ModbusRTUOverTCPProtocol()


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Return a connected fake transport."""
    transport = FakeTransport()
    transport.force_connected()
    return transport


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "asyncio: mark test as an asyncio test")
