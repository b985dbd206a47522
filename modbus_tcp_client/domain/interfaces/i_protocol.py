"""IProtocol interface for Modbus frame codecs."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..value_objects.framing_mode import FramingMode


class IProtocol(ABC):
    """Interface for a Modbus frame codec bound to one framing mode.

    The codec builds request frames and validates untrusted response bytes.
    Length bounds, parity, checksum and the exception flag are all checked
    before any register data is extracted.

    Example:
        >>> protocol = create_protocol(FramingMode.TCP)
        >>> request = protocol.build_read_request(0x0000, 2)
        >>> await transport.send(request)
        >>> response = await transport.receive(1, 256)
        >>> registers = protocol.decode_read_response(response)
    """

    @property
    @abstractmethod
    def mode(self) -> FramingMode:
        """Framing mode implemented by this codec."""

    @abstractmethod
    def build_read_request(self, address: int, count: int, unit_id: int = 1) -> bytes:
        """Build a read holding registers (0x03) request.

        Args:
            address: Starting register address (0x0000 - 0xFFFF)
            count: Number of consecutive registers to read (0-125)
            unit_id: Modbus unit id (0-255)

        Returns:
            Complete request frame

        Raises:
            ValueError: If any argument is out of range
        """

    @abstractmethod
    def build_write_request(
        self, address: int, values: Sequence[int], unit_id: int = 1
    ) -> bytes:
        """Build a write multiple registers (0x10) request.

        Args:
            address: Starting register address (0x0000 - 0xFFFF)
            values: Register values to write (1-123 values, each 0-65535)
            unit_id: Modbus unit id (0-255)

        Returns:
            Complete request frame

        Raises:
            ValueError: If any argument is out of range
        """

    @abstractmethod
    def decode_read_response(self, response: bytes) -> List[int]:
        """Validate a read response and decode its register values.

        Args:
            response: Raw bytes received from the transport

        Returns:
            Register values in ascending address order

        Raises:
            MalformedResponseError: If a length or parity bound is violated
            CrcMismatchError: If the trailing checksum is wrong
            ModbusExceptionResponseError: If the device reported an exception
        """

    @abstractmethod
    def check_write_response(self, response: bytes) -> None:
        """Validate a write acknowledgement.

        Args:
            response: Raw bytes received from the transport

        Raises:
            MalformedResponseError: If the response is too short
            AckMismatchError: If the acknowledgement does not confirm the write
            CrcMismatchError: If the trailing checksum is wrong
        """
