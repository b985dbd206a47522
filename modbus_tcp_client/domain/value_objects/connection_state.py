"""ConnectionState value object.

Represents the lifecycle states a transport reports while a connection is
being set up, used and torn down.
"""

from enum import Enum
from typing import Any


class ConnectionState(Enum):
    """Transport connection states.

    State Transitions (as reported by the TCP transport):
        PREPARING → READY
        PREPARING → WAITING → FAILED   (no route to the device)
        PREPARING → FAILED
        READY → FAILED                 (peer closed / socket error)
        any → CANCELLED                (local close)

    UNKNOWN is the catch-all for any signal outside this set, so a
    transport-specific state is surfaced instead of being dropped.
    """

    PREPARING = "preparing"
    READY = "ready"
    WAITING = "waiting"
    FAILED = "failed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    @property
    def is_terminal(self) -> bool:
        """Check if no further traffic is possible in this state.

        Example:
            >>> ConnectionState.FAILED.is_terminal
            True
            >>> ConnectionState.WAITING.is_terminal
            False
        """
        return self in (ConnectionState.FAILED, ConnectionState.CANCELLED)

    @classmethod
    def from_signal(cls, signal: Any) -> "ConnectionState":
        """Map a transport-reported signal to a ConnectionState.

        Args:
            signal: A ConnectionState, or a state name such as ``"ready"``

        Returns:
            Corresponding ConnectionState, or UNKNOWN if not recognized

        Example:
            >>> ConnectionState.from_signal("Ready")
            <ConnectionState.READY: 'ready'>
            >>> ConnectionState.from_signal("setup")
            <ConnectionState.UNKNOWN: 'unknown'>
        """
        if isinstance(signal, cls):
            return signal
        if isinstance(signal, str):
            try:
                return cls(signal.strip().lower())
            except ValueError:
                return cls.UNKNOWN
        return cls.UNKNOWN

    def __str__(self) -> str:
        """String representation for logging."""
        return self.value
