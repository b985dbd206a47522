"""Custom exceptions for the Modbus client.

Every protocol or transport failure of a single exchange is raised as a
subclass of :class:`ModbusClientError` carrying an :class:`ErrorKind`, so the
use cases can fold it into a structured result without losing the reason.
"""

from typing import Optional

from ..const import format_modbus_error
from .value_objects.error_kind import ErrorKind
from .value_objects.exception_code import ExceptionCode


class ModbusClientError(Exception):
    """Base class for failures of a single request/response exchange."""

    kind: ErrorKind = ErrorKind.TRANSPORT


class TransportError(ModbusClientError):
    """Connect, send or receive failed, or the peer closed the stream."""

    kind = ErrorKind.TRANSPORT


class MalformedResponseError(ModbusClientError):
    """Response violates a length or parity bound."""

    kind = ErrorKind.MALFORMED


class CrcMismatchError(ModbusClientError):
    """Trailing CRC-16 does not match the preceding bytes."""

    kind = ErrorKind.CRC_MISMATCH

    def __init__(self, received: int, calculated: int):
        super().__init__(
            f"CRC mismatch: received=0x{received:04X}, calculated=0x{calculated:04X}"
        )
        self.received = received
        self.calculated = calculated


class ModbusExceptionResponseError(ModbusClientError):
    """Device answered with an exception response (function | 0x80).

    This is an expected protocol condition, not a bug, so it should be logged
    without a stack trace.

    Example:
        >>> err = ModbusExceptionResponseError(0x02)
        >>> err.exception_code
        2
        >>> err.known_code
        <ExceptionCode.ILLEGAL_DATA_ADDRESS: 2>
    """

    kind = ErrorKind.EXCEPTION_RESPONSE

    def __init__(self, exception_code: int, function_code: Optional[int] = None):
        super().__init__(f"Device exception {format_modbus_error(exception_code)}")
        self.exception_code = exception_code
        self.function_code = function_code

    @property
    def known_code(self) -> Optional[ExceptionCode]:
        """Standard exception code, or None for vendor-specific codes."""
        return ExceptionCode.lookup(self.exception_code)


class AckMismatchError(ModbusClientError):
    """Write acknowledgement does not confirm the write."""

    kind = ErrorKind.ACK_MISMATCH


class ExchangeInProgressError(RuntimeError):
    """A second exchange was started while one is still outstanding.

    The client holds no internal queue; callers must serialize operations.
    """


class ConfigurationError(ValueError):
    """Client configuration is missing or invalid."""
