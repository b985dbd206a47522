"""State machines for explicit state management."""

from .connection_state_machine import ConnectionEvent, ConnectionStateMachine

__all__ = [
    "ConnectionEvent",
    "ConnectionStateMachine",
]
