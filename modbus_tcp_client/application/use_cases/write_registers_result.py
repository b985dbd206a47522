"""Write Registers Result DTO.

Data Transfer Object representing the result of a write multiple registers
exchange.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.value_objects import ErrorKind


@dataclass
class WriteRegistersResult:
    """Result of a write multiple registers exchange.

    Attributes:
        success: Whether the device acknowledged the write
        error: Error message if failed
        error_kind: Failure classification if failed
        exception_code: Modbus exception code if applicable
        address: First register address written
        values: Values that were written
        unit_id: Unit id addressed
    """

    success: bool
    error: str = ""
    error_kind: Optional[ErrorKind] = None
    exception_code: Optional[int] = None
    address: int = 0
    values: List[int] = field(default_factory=list)
    unit_id: int = 1
