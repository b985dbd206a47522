"""ReadRegistersUseCase for holding register reads.

This use case orchestrates one read exchange:
1. Build the request frame (arguments validated here, before any I/O)
2. Send it and issue exactly one bounded receive
3. Validate and decode the response
4. Fold any failure into a ReadRegistersResult
"""

import logging

from ...const import DEFAULT_UNIT_ID, RECEIVE_MAX_LENGTH, RECEIVE_MIN_LENGTH
from ...domain.exceptions import ModbusClientError, TransportError
from ...domain.interfaces import IProtocol, ITransport
from .read_registers_result import ReadRegistersResult

_LOGGER = logging.getLogger(__name__)


class ReadRegistersUseCase:
    """Use case for reading holding registers (function 0x03).

    Dependencies (injected):
    - transport: Moves bytes to and from the device
    - protocol: Builds requests and validates responses

    Example:
        >>> use_case = ReadRegistersUseCase(transport, protocol)
        >>> result = await use_case.execute(0x0000, 2)
        >>> if result.success:
        ...     print(result.registers)
    """

    def __init__(self, transport: ITransport, protocol: IProtocol):
        self._transport = transport
        self._protocol = protocol

    async def execute(
        self,
        address: int,
        count: int,
        unit_id: int = DEFAULT_UNIT_ID,
    ) -> ReadRegistersResult:
        """Execute one read exchange.

        Args:
            address: Starting register address
            count: Number of registers to read
            unit_id: Modbus unit id (default: 1)

        Returns:
            ReadRegistersResult with registers or failure details

        Raises:
            ValueError: If address, count or unit id is out of range
        """
        request = self._protocol.build_read_request(address, count, unit_id)

        try:
            await self._transport.send(request)
            response = await self._transport.receive(
                RECEIVE_MIN_LENGTH, RECEIVE_MAX_LENGTH
            )
            if not response:
                raise TransportError("Empty response payload")
            registers = self._protocol.decode_read_response(response)
        except ModbusClientError as err:
            _LOGGER.warning(
                "Read of %d registers at 0x%04X (unit %d) failed: %s",
                count,
                address,
                unit_id,
                err,
            )
            return ReadRegistersResult(
                success=False,
                error=str(err),
                error_kind=err.kind,
                exception_code=getattr(err, "exception_code", None),
                address=address,
                count=count,
                unit_id=unit_id,
            )

        return ReadRegistersResult(
            success=True,
            registers=registers,
            address=address,
            count=count,
            unit_id=unit_id,
        )
