"""Modbus protocol implementations.

This module contains implementations of the protocol layer interfaces
defined in the domain layer.
"""

from typing import Optional

from ...domain.interfaces import ICRC, IProtocol
from ...domain.value_objects import FramingMode
from .modbus_crc16 import ModbusCRC16
from .modbus_rtu_over_tcp_protocol import ModbusRTUOverTCPProtocol
from .modbus_tcp_protocol import ModbusTCPProtocol


def create_protocol(mode: FramingMode, crc: Optional[ICRC] = None) -> IProtocol:
    """Create the frame codec for a framing mode.

    Args:
        mode: Framing mode of the client
        crc: CRC calculator for RTU-over-TCP (default: ModbusCRC16)

    Example:
        >>> create_protocol(FramingMode.RTU_OVER_TCP).mode
        <FramingMode.RTU_OVER_TCP: 'rtu_over_tcp'>
    """
    if mode is FramingMode.TCP:
        return ModbusTCPProtocol()
    if mode is FramingMode.RTU_OVER_TCP:
        return ModbusRTUOverTCPProtocol(crc)
    raise ValueError(f"Unsupported framing mode: {mode!r}")


__all__ = [
    "ModbusCRC16",
    "ModbusRTUOverTCPProtocol",
    "ModbusTCPProtocol",
    "create_protocol",
]
