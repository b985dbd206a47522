"""Modbus TCP frame codec.

Frame layout::

    +----------------+-------------+--------+------+-------------------+
    | Transaction+   |   Length    |  Unit  | Func |      Payload      |
    | Protocol (0s)  |  (BE, 2 B)  |  1 B   | 1 B  |  variable length  |
    +----------------+-------------+--------+------+-------------------+

- Length: number of bytes from the unit id to the end of the frame
- No checksum; TCP provides integrity
- Transaction id is always zero: one exchange at a time per connection
"""

import logging
import struct
from typing import List

from ...const import (
    FUNC_WRITE_MULTIPLE,
    MBAP_PREFIX,
    TCP_BYTE_COUNT_OFFSET,
    TCP_FUNCTION_OFFSET,
    TCP_READ_RESPONSE_MIN,
    TCP_WRITE_RESPONSE_MIN,
)
from ...domain.exceptions import AckMismatchError, MalformedResponseError
from ...domain.value_objects import FramingMode
from .modbus_protocol_base import ModbusProtocolBase

_LOGGER = logging.getLogger(__name__)


class ModbusTCPProtocol(ModbusProtocolBase):
    """Modbus TCP (MBAP header) codec.

    Example:
        >>> protocol = ModbusTCPProtocol()
        >>> protocol.build_read_request(0x0000, 10).hex(" ")
        '00 00 00 00 00 06 01 03 00 00 00 0a'
    """

    @property
    def mode(self) -> FramingMode:
        return FramingMode.TCP

    def _wrap(self, payload: bytes) -> bytes:
        # Length is derived from the finished payload, never patched in later
        return MBAP_PREFIX + struct.pack(">H", len(payload)) + payload

    def decode_read_response(self, response: bytes) -> List[int]:
        """Validate and decode a Modbus TCP read response.

        Frame format: [MBAP 6][Unit][Func][ByteCount][Data...]

        Example:
            >>> protocol = ModbusTCPProtocol()
            >>> protocol.decode_read_response(bytes.fromhex("000000000007010304 01e6 00fa"))
            [486, 250]
        """
        if len(response) < TCP_READ_RESPONSE_MIN:
            _LOGGER.debug("Response too short: %d bytes", len(response))
            raise MalformedResponseError(f"Response too short: {len(response)} bytes")

        return self._decode_data_region(
            response, start=TCP_BYTE_COUNT_OFFSET + 1, trailer=0
        )

    def check_write_response(self, response: bytes) -> None:
        """Validate a Modbus TCP write acknowledgement.

        Frame format: [MBAP 6][Unit][0x10][Addr_H][Addr_L][Count_H][Count_L]
        Only the echoed function code is checked.
        """
        if len(response) < TCP_WRITE_RESPONSE_MIN:
            _LOGGER.debug("Write acknowledgement too short: %d bytes", len(response))
            raise MalformedResponseError(
                f"Write acknowledgement too short: {len(response)} bytes"
            )

        function_code = response[TCP_FUNCTION_OFFSET]
        if function_code != FUNC_WRITE_MULTIPLE:
            _LOGGER.warning(
                "Write acknowledgement has function 0x%02X, expected 0x%02X",
                function_code,
                FUNC_WRITE_MULTIPLE,
            )
            raise AckMismatchError(
                f"Write acknowledgement has function 0x{function_code:02X}"
            )
