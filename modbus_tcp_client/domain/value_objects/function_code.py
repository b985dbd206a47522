"""Modbus function codes."""

from enum import IntEnum


class FunctionCode(IntEnum):
    """Modbus function codes used by this client."""

    READ_HOLDING_REGISTERS = 0x03
    WRITE_MULTIPLE_REGISTERS = 0x10

    # Error responses have 0x80 bit set
    ERROR_READ_HOLDING = 0x83
    ERROR_WRITE_MULTIPLE = 0x90

    @staticmethod
    def is_exception(value: int) -> bool:
        """Check if a function byte flags an exception response.

        Example:
            >>> FunctionCode.is_exception(0x83)
            True
            >>> FunctionCode.is_exception(FunctionCode.READ_HOLDING_REGISTERS)
            False
        """
        return (value & 0x80) == 0x80
