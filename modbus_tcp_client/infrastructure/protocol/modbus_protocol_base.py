"""Shared request building for the Modbus frame codecs.

Both framings carry the same unit-addressed payload::

    read:  [Unit][0x03][Addr_H][Addr_L][Count_H][Count_L]
    write: [Unit][0x10][Addr_H][Addr_L][Count_H][Count_L][ByteCount][Val_H][Val_L]...

Subclasses wrap it in an MBAP header or append a CRC-16.
"""

import logging
import struct
from abc import abstractmethod
from typing import List, Sequence

from ...const import (
    DEFAULT_UNIT_ID,
    FUNC_READ_HOLDING,
    FUNC_WRITE_MULTIPLE,
    MAX_READ_COUNT,
    MAX_WRITE_COUNT,
    REGISTER_MAX,
    UNIT_ID_MAX,
)
from ...domain.helpers.register_codec import decode_registers, encode_registers
from ...domain.exceptions import MalformedResponseError
from ...domain.interfaces import IProtocol

_LOGGER = logging.getLogger(__name__)


class ModbusProtocolBase(IProtocol):
    """Validates request arguments and assembles the unit-addressed payload."""

    def build_read_request(
        self, address: int, count: int, unit_id: int = DEFAULT_UNIT_ID
    ) -> bytes:
        self._validate_unit_id(unit_id)
        self._validate_address(address)
        if not isinstance(count, int) or not 0 <= count <= MAX_READ_COUNT:
            raise ValueError(
                f"Register count must be 0-{MAX_READ_COUNT}, got {count}"
            )

        payload = struct.pack(">BBHH", unit_id, FUNC_READ_HOLDING, address, count)
        frame = self._wrap(payload)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Built %s read request: unit=%d, addr=0x%04X, count=%d, frame=%s",
                self.mode.value,
                unit_id,
                address,
                count,
                frame.hex(),
            )

        return frame

    def build_write_request(
        self,
        address: int,
        values: Sequence[int],
        unit_id: int = DEFAULT_UNIT_ID,
    ) -> bytes:
        """Build a write multiple registers request.

        Accepts 1-123 values, the Modbus application limit. This is stricter
        than the single-byte byte count alone requires (127 registers), and
        an empty write is rejected rather than sent.

        Raises:
            ValueError: If the unit id, address, value count or any value
                is out of range
        """
        self._validate_unit_id(unit_id)
        self._validate_address(address)
        values = list(values)
        if not 1 <= len(values) <= MAX_WRITE_COUNT:
            raise ValueError(
                f"Write must carry 1-{MAX_WRITE_COUNT} registers, got {len(values)}"
            )

        payload = struct.pack(
            ">BBHHB",
            unit_id,
            FUNC_WRITE_MULTIPLE,
            address,
            len(values),
            len(values) * 2,
        ) + encode_registers(values)
        frame = self._wrap(payload)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Built %s write request: unit=%d, addr=0x%04X, count=%d, frame=%s",
                self.mode.value,
                unit_id,
                address,
                len(values),
                frame.hex(),
            )

        return frame

    @abstractmethod
    def _wrap(self, payload: bytes) -> bytes:
        """Frame a complete unit-addressed payload for the wire."""

    @staticmethod
    def _decode_data_region(response: bytes, start: int, trailer: int) -> List[int]:
        """Bounds- and parity-check the data region, then decode it.

        Args:
            response: Full response frame
            start: Offset of the first data byte (byte count sits just before)
            trailer: Bytes required after the data region (CRC size or 0)
        """
        byte_count = response[start - 1]
        end = start + byte_count

        if len(response) < end + trailer:
            raise MalformedResponseError(
                f"Response truncated: byte count {byte_count} needs "
                f"{end + trailer} bytes, got {len(response)}"
            )
        if byte_count % 2:
            _LOGGER.warning("Odd data region byte count: %d", byte_count)
            raise MalformedResponseError(f"Odd data region byte count: {byte_count}")

        values = decode_registers(response[start:end])

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Decoded read response: %d registers, values=%s",
                len(values),
                values,
            )

        return values

    @staticmethod
    def _validate_unit_id(unit_id: int) -> None:
        if not isinstance(unit_id, int) or not 0 <= unit_id <= UNIT_ID_MAX:
            raise ValueError(f"Unit id must be 0-255, got {unit_id}")

    @staticmethod
    def _validate_address(address: int) -> None:
        if not isinstance(address, int) or not 0 <= address <= REGISTER_MAX:
            raise ValueError(f"Register address must be 0-65535, got {address}")
