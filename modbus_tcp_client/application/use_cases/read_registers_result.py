"""Read Registers Result DTO.

Data Transfer Object representing the result of a read holding registers
exchange.
"""

from dataclasses import dataclass
from typing import List, Optional

from ...domain.value_objects import ErrorKind


@dataclass
class ReadRegistersResult:
    """Result of a read holding registers exchange.

    ``registers`` is None whenever the exchange failed; ``error_kind`` then
    says why.

    Attributes:
        success: Whether the response was received and decoded
        registers: Register values in ascending address order
        error: Error message if failed
        error_kind: Failure classification if failed
        exception_code: Modbus exception code for device exception responses
        address: First register address requested
        count: Number of registers requested
        unit_id: Unit id addressed
    """

    success: bool
    registers: Optional[List[int]] = None
    error: str = ""
    error_kind: Optional[ErrorKind] = None
    exception_code: Optional[int] = None
    address: int = 0
    count: int = 0
    unit_id: int = 1
