"""Modbus RTU-over-TCP frame codec.

RTU frames are carried unchanged over the TCP stream: no MBAP header, a
CRC-16 (low byte first) terminates every frame.

Frame layout::

    Request:  [Unit][Function][Payload...][CRC_L][CRC_H]
    Response: [Unit][Function][ByteCount][Data...][CRC_L][CRC_H]
    Error:    [Unit][Function+0x80][Exception Code][CRC_L][CRC_H]
"""

import logging
import struct
from typing import List, Optional

from ...const import (
    CRC_SIZE,
    RTU_BYTE_COUNT_OFFSET,
    RTU_FUNCTION_OFFSET,
    RTU_READ_RESPONSE_MIN,
    RTU_WRITE_RESPONSE_MIN,
    format_modbus_error,
)
from ...domain.exceptions import (
    CrcMismatchError,
    MalformedResponseError,
    ModbusExceptionResponseError,
)
from ...domain.interfaces import ICRC
from ...domain.value_objects import FramingMode, FunctionCode
from .modbus_crc16 import ModbusCRC16
from .modbus_protocol_base import ModbusProtocolBase

_LOGGER = logging.getLogger(__name__)


class ModbusRTUOverTCPProtocol(ModbusProtocolBase):
    """Modbus RTU-over-TCP codec.

    Validation order for responses is fixed: length, CRC, exception flag,
    byte count bounds and parity. No register data is read before all of
    them pass.

    Attributes:
        crc: CRC calculator implementation

    Example:
        >>> protocol = ModbusRTUOverTCPProtocol()
        >>> protocol.build_read_request(0x0000, 10).hex(" ")
        '01 03 00 00 00 0a c5 cd'
    """

    def __init__(self, crc: Optional[ICRC] = None):
        """Initialize RTU-over-TCP codec.

        Args:
            crc: CRC calculator implementation (default: ModbusCRC16)
        """
        self._crc = crc or ModbusCRC16()

    @property
    def mode(self) -> FramingMode:
        return FramingMode.RTU_OVER_TCP

    def _wrap(self, payload: bytes) -> bytes:
        return payload + struct.pack("<H", self._crc.calculate(payload))

    def decode_read_response(self, response: bytes) -> List[int]:
        """Validate and decode an RTU read response.

        Raises:
            MalformedResponseError: Too short, truncated, or odd byte count
            CrcMismatchError: Trailing CRC does not match
            ModbusExceptionResponseError: Function byte has the 0x80 flag
        """
        if len(response) < RTU_READ_RESPONSE_MIN:
            _LOGGER.debug("Response too short: %d bytes", len(response))
            raise MalformedResponseError(f"Response too short: {len(response)} bytes")

        self._verify_crc(response)

        function_code = response[RTU_FUNCTION_OFFSET]
        if FunctionCode.is_exception(function_code):
            exception_code = response[RTU_BYTE_COUNT_OFFSET]
            _LOGGER.debug(
                "Modbus exception: func=0x%02X, %s",
                function_code,
                format_modbus_error(exception_code),
            )
            raise ModbusExceptionResponseError(exception_code, function_code)

        return self._decode_data_region(
            response, start=RTU_BYTE_COUNT_OFFSET + 1, trailer=CRC_SIZE
        )

    def check_write_response(self, response: bytes) -> None:
        """Validate an RTU write acknowledgement.

        Frame format: [Unit][0x10][Addr_H][Addr_L][Count_H][Count_L][CRC_L][CRC_H]
        Only the CRC is checked; the echoed fields are not compared.
        """
        if len(response) < RTU_WRITE_RESPONSE_MIN:
            _LOGGER.debug("Write acknowledgement too short: %d bytes", len(response))
            raise MalformedResponseError(
                f"Write acknowledgement too short: {len(response)} bytes"
            )

        self._verify_crc(response)

    def _verify_crc(self, response: bytes) -> None:
        received_crc = struct.unpack("<H", response[-CRC_SIZE:])[0]
        calculated_crc = self._crc.calculate(response[:-CRC_SIZE])

        if received_crc != calculated_crc:
            _LOGGER.warning(
                "CRC mismatch: received=0x%04X, calculated=0x%04X",
                received_crc,
                calculated_crc,
            )
            raise CrcMismatchError(received_crc, calculated_crc)
