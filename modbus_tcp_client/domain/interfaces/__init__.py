"""Domain interfaces for the Modbus client.

This module defines the contracts (interfaces) that infrastructure implementations
must fulfill. Using these interfaces enables:
- Dependency Inversion: the client does not depend on socket details
- Testability: Easy to fake implementations for testing
- Flexibility: Swap implementations (TCP → TLS, etc.) without changing the client
"""

from .i_crc import ICRC
from .i_protocol import IProtocol
from .i_transport import ITransport, StateCallback

__all__ = [
    "ICRC",
    "IProtocol",
    "ITransport",
    "StateCallback",
]
