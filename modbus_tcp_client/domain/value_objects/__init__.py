"""Value Objects for the Modbus client domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Encapsulate related data and behavior
"""

from .connection_state import ConnectionState
from .error_kind import ErrorKind
from .exception_code import ExceptionCode
from .framing_mode import FramingMode
from .function_code import FunctionCode

__all__ = [
    "ConnectionState",
    "ErrorKind",
    "ExceptionCode",
    "FramingMode",
    "FunctionCode",
]
