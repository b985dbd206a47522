"""Modbus exception codes."""

from enum import IntEnum
from typing import Optional


class ExceptionCode(IntEnum):
    """Standard Modbus exception codes.

    These codes are returned by a device in the byte following an exception
    function code (function | 0x80).
    """

    ILLEGAL_FUNCTION = 0x01
    ILLEGAL_DATA_ADDRESS = 0x02
    ILLEGAL_DATA_VALUE = 0x03
    SERVER_DEVICE_FAILURE = 0x04
    ACKNOWLEDGE = 0x05
    SERVER_DEVICE_BUSY = 0x06
    MEMORY_PARITY_ERROR = 0x08
    GATEWAY_PATH_UNAVAILABLE = 0x0A
    GATEWAY_TARGET_NO_RESPONSE = 0x0B

    @classmethod
    def lookup(cls, code: int) -> Optional["ExceptionCode"]:
        """Return the matching member, or None for vendor-specific codes.

        Example:
            >>> ExceptionCode.lookup(2)
            <ExceptionCode.ILLEGAL_DATA_ADDRESS: 2>
            >>> ExceptionCode.lookup(0x40) is None
            True
        """
        try:
            return cls(code)
        except ValueError:
            return None
