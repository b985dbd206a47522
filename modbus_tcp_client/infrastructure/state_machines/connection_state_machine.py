"""Connection state machine for explicit state management."""

import logging
from enum import Enum, auto
from typing import Optional

from ...domain.interfaces import StateCallback
from ...domain.value_objects import ConnectionState

_LOGGER = logging.getLogger(__name__)


class ConnectionEvent(Enum):
    """Connection events that trigger state transitions."""

    CONNECT = auto()
    CONNECT_SUCCESS = auto()
    PATH_UNAVAILABLE = auto()
    CONNECT_FAILED = auto()
    CONNECTION_LOST = auto()
    CANCEL = auto()


class ConnectionStateMachine:
    """State machine for the transport connection lifecycle.

    The machine starts idle (``state is None``). Every accepted transition
    is reported to the listener exactly once, in order.

    Valid transitions:
        idle/FAILED/CANCELLED -> PREPARING (on CONNECT)
        PREPARING -> READY (on CONNECT_SUCCESS)
        PREPARING -> WAITING (on PATH_UNAVAILABLE)
        PREPARING/WAITING -> FAILED (on CONNECT_FAILED)
        READY -> FAILED (on CONNECTION_LOST)
        PREPARING/WAITING/READY/FAILED -> CANCELLED (on CANCEL)

    Example:
        >>> sm = ConnectionStateMachine()
        >>> sm.transition(ConnectionEvent.CONNECT)
        True
        >>> sm.state
        <ConnectionState.PREPARING: 'preparing'>
        >>> sm.transition(ConnectionEvent.CONNECT_SUCCESS)
        True
        >>> sm.is_ready
        True
    """

    def __init__(self, listener: Optional[StateCallback] = None):
        """Initialize state machine in the idle state.

        Args:
            listener: Called with the new state after each transition
        """
        self._state: Optional[ConnectionState] = None
        self._previous_state: Optional[ConnectionState] = None
        self._listener = listener

        # Valid transitions: (current_state, event) -> new_state
        self._transitions = {
            (None, ConnectionEvent.CONNECT): ConnectionState.PREPARING,
            (ConnectionState.FAILED, ConnectionEvent.CONNECT): ConnectionState.PREPARING,
            (
                ConnectionState.CANCELLED,
                ConnectionEvent.CONNECT,
            ): ConnectionState.PREPARING,
            (
                ConnectionState.PREPARING,
                ConnectionEvent.CONNECT_SUCCESS,
            ): ConnectionState.READY,
            (
                ConnectionState.PREPARING,
                ConnectionEvent.PATH_UNAVAILABLE,
            ): ConnectionState.WAITING,
            (
                ConnectionState.PREPARING,
                ConnectionEvent.CONNECT_FAILED,
            ): ConnectionState.FAILED,
            (
                ConnectionState.WAITING,
                ConnectionEvent.CONNECT_FAILED,
            ): ConnectionState.FAILED,
            (
                ConnectionState.READY,
                ConnectionEvent.CONNECTION_LOST,
            ): ConnectionState.FAILED,
            (
                ConnectionState.PREPARING,
                ConnectionEvent.CANCEL,
            ): ConnectionState.CANCELLED,
            (
                ConnectionState.WAITING,
                ConnectionEvent.CANCEL,
            ): ConnectionState.CANCELLED,
            (ConnectionState.READY, ConnectionEvent.CANCEL): ConnectionState.CANCELLED,
            (ConnectionState.FAILED, ConnectionEvent.CANCEL): ConnectionState.CANCELLED,
        }

    @property
    def state(self) -> Optional[ConnectionState]:
        """Get current state (None while idle)."""
        return self._state

    @property
    def previous_state(self) -> Optional[ConnectionState]:
        """Get the state before the last transition."""
        return self._previous_state

    @property
    def is_ready(self) -> bool:
        """Check if the connection is usable."""
        return self._state == ConnectionState.READY

    def set_listener(self, listener: Optional[StateCallback]) -> None:
        """Replace the state change listener."""
        self._listener = listener

    def transition(self, event: ConnectionEvent) -> bool:
        """Attempt state transition.

        Args:
            event: Event triggering transition

        Returns:
            True if transition valid and executed, False otherwise
        """
        key = (self._state, event)

        if key not in self._transitions:
            _LOGGER.debug(
                "Invalid transition: %s + %s",
                self._state.name if self._state else "IDLE",
                event.name,
            )
            return False

        self._change_state(self._transitions[key], event)
        return True

    def _change_state(self, new_state: ConnectionState, event: ConnectionEvent):
        self._previous_state = self._state
        self._state = new_state

        _LOGGER.debug(
            "Connection state: %s -> %s (event: %s)",
            self._previous_state.name if self._previous_state else "IDLE",
            new_state.name,
            event.name,
        )

        if self._listener is not None:
            try:
                self._listener(new_state)
            except Exception as err:
                _LOGGER.error("Error in state change callback: %s", err)

    def reset(self):
        """Reset to the idle state without notifying."""
        self._state = None
        self._previous_state = None

    def __str__(self) -> str:
        """String representation."""
        name = self._state.name if self._state else "IDLE"
        return f"ConnectionStateMachine(state={name})"

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"ConnectionStateMachine(state={self._state!r}, "
            f"previous={self._previous_state!r})"
        )
