"""Constants for the Modbus TCP / RTU-over-TCP client.

Frame sizes and limits used by the protocol layer, plus the human-readable
texts for device-reported exception codes.
"""

from __future__ import annotations

# Defaults
DEFAULT_UNIT_ID = 1
DEFAULT_PORT = 502
DEFAULT_CONNECT_TIMEOUT = 10.0

# Configuration keys
CONF_HOST = "host"
CONF_PORT = "port"
CONF_FRAMING = "framing"
CONF_UNIT_ID = "unit_id"
CONF_CONNECT_TIMEOUT = "connect_timeout"

# Modbus function codes
FUNC_READ_HOLDING = 0x03
FUNC_WRITE_MULTIPLE = 0x10
EXCEPTION_FLAG = 0x80

# Modbus TCP (MBAP) framing
MBAP_PREFIX = bytes([0x00, 0x00, 0x00, 0x00])  # transaction id + protocol id
MBAP_HEADER_SIZE = 6  # prefix + 2-byte length field
TCP_READ_RESPONSE_MIN = 9  # MBAP(6) + unit + func + byte count
TCP_WRITE_RESPONSE_MIN = 12  # MBAP(6) + unit + func + addr(2) + count(2)
TCP_FUNCTION_OFFSET = 7
TCP_BYTE_COUNT_OFFSET = 8

# RTU framing
CRC_SIZE = 2
RTU_READ_RESPONSE_MIN = 5  # unit + func + byte count/exception + CRC
RTU_WRITE_RESPONSE_MIN = 8  # unit + func + addr(2) + count(2) + CRC
RTU_FUNCTION_OFFSET = 1
RTU_BYTE_COUNT_OFFSET = 2

# Request limits
MAX_READ_COUNT = 125
MAX_WRITE_COUNT = 123
REGISTER_MAX = 0xFFFF
UNIT_ID_MAX = 0xFF

# Single bounded receive per exchange.
# Response sizes: TCP 9 + 2*count, RTU 3 + 2*count + 2.
RECEIVE_MIN_LENGTH = 1
RECEIVE_MAX_LENGTH = 256

MODBUS_ERROR_CODES = {
    0x01: "Illegal function - device does not support this function code",
    0x02: "Illegal data address - register address out of legal range",
    0x03: "Illegal data value - value in the request is not allowed",
    0x04: "Server device failure - unrecoverable error while processing",
    0x05: "Acknowledge - request accepted, processing takes a long time",
    0x06: "Server device busy - retry later",
    0x08: "Memory parity error - extended file area failed consistency check",
    0x0A: "Gateway path unavailable - gateway misconfigured or overloaded",
    0x0B: "Gateway target failed to respond",
}


def format_modbus_error(error_code: int) -> str:
    """Format a Modbus exception code for log and error messages.

    Args:
        error_code: Exception code returned by the device

    Returns:
        Text such as ``"0x02 (Illegal data address - ...)"``

    Example:
        >>> format_modbus_error(0x02)
        '0x02 (Illegal data address - register address out of legal range)'
        >>> format_modbus_error(0x7F)
        '0x7F (Unknown exception code)'
    """
    description = MODBUS_ERROR_CODES.get(error_code, "Unknown exception code")
    return f"0x{error_code:02X} ({description})"
