"""WriteRegistersUseCase for holding register writes.

Function 0x10 (write multiple registers) is used for every write, including
single-register writes.
"""

import logging
from typing import Sequence

from ...const import DEFAULT_UNIT_ID, RECEIVE_MAX_LENGTH, RECEIVE_MIN_LENGTH
from ...domain.exceptions import ModbusClientError, TransportError
from ...domain.interfaces import IProtocol, ITransport
from .write_registers_result import WriteRegistersResult

_LOGGER = logging.getLogger(__name__)


class WriteRegistersUseCase:
    """Use case for writing holding registers (function 0x10).

    Example:
        >>> use_case = WriteRegistersUseCase(transport, protocol)
        >>> result = await use_case.execute(0x0010, [100, 200])
        >>> assert result.success
    """

    def __init__(self, transport: ITransport, protocol: IProtocol):
        self._transport = transport
        self._protocol = protocol

    async def execute(
        self,
        address: int,
        values: Sequence[int],
        unit_id: int = DEFAULT_UNIT_ID,
    ) -> WriteRegistersResult:
        """Execute one write exchange.

        Args:
            address: First register address to write
            values: Register values (1-123 values, 0-65535 each)
            unit_id: Modbus unit id (default: 1)

        Returns:
            WriteRegistersResult with success/error information

        Raises:
            ValueError: If any argument is out of range (nothing is sent)
        """
        values = list(values)
        request = self._protocol.build_write_request(address, values, unit_id)

        try:
            await self._transport.send(request)
            response = await self._transport.receive(
                RECEIVE_MIN_LENGTH, RECEIVE_MAX_LENGTH
            )
            if not response:
                raise TransportError("Empty response payload")
            self._protocol.check_write_response(response)
        except ModbusClientError as err:
            _LOGGER.warning(
                "Write of %d registers at 0x%04X (unit %d) failed: %s",
                len(values),
                address,
                unit_id,
                err,
            )
            return WriteRegistersResult(
                success=False,
                error=str(err),
                error_kind=err.kind,
                exception_code=getattr(err, "exception_code", None),
                address=address,
                values=values,
                unit_id=unit_id,
            )

        _LOGGER.debug(
            "Wrote %d registers at 0x%04X (unit %d)", len(values), address, unit_id
        )
        return WriteRegistersResult(
            success=True,
            address=address,
            values=values,
            unit_id=unit_id,
        )
