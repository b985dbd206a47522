"""Tests for connection state machine."""

from unittest.mock import Mock

import pytest

from modbus_tcp_client.domain.value_objects import ConnectionState
from modbus_tcp_client.infrastructure.state_machines import (
    ConnectionEvent,
    ConnectionStateMachine,
)


class TestConnectionStateMachine:
    """Test connection state machine."""

    def test_initial_state_is_idle(self):
        """Test state machine starts idle."""
        sm = ConnectionStateMachine()
        assert sm.state is None
        assert not sm.is_ready

    def test_transition_connect(self):
        """Test idle -> PREPARING transition."""
        sm = ConnectionStateMachine()
        assert sm.transition(ConnectionEvent.CONNECT)
        assert sm.state == ConnectionState.PREPARING

    def test_transition_connect_success(self):
        """Test PREPARING -> READY transition."""
        sm = ConnectionStateMachine()
        sm.transition(ConnectionEvent.CONNECT)
        assert sm.transition(ConnectionEvent.CONNECT_SUCCESS)
        assert sm.state == ConnectionState.READY
        assert sm.is_ready
        assert sm.previous_state == ConnectionState.PREPARING

    def test_path_unavailable_then_failed(self):
        """Test PREPARING -> WAITING -> FAILED."""
        sm = ConnectionStateMachine()
        sm.transition(ConnectionEvent.CONNECT)
        assert sm.transition(ConnectionEvent.PATH_UNAVAILABLE)
        assert sm.state == ConnectionState.WAITING
        assert sm.transition(ConnectionEvent.CONNECT_FAILED)
        assert sm.state == ConnectionState.FAILED

    def test_connection_lost(self):
        """Test READY -> FAILED on connection loss."""
        sm = ConnectionStateMachine()
        sm.transition(ConnectionEvent.CONNECT)
        sm.transition(ConnectionEvent.CONNECT_SUCCESS)
        assert sm.transition(ConnectionEvent.CONNECTION_LOST)
        assert sm.state == ConnectionState.FAILED

    @pytest.mark.parametrize(
        "events",
        [
            [ConnectionEvent.CONNECT],
            [ConnectionEvent.CONNECT, ConnectionEvent.CONNECT_SUCCESS],
            [ConnectionEvent.CONNECT, ConnectionEvent.PATH_UNAVAILABLE],
            [ConnectionEvent.CONNECT, ConnectionEvent.CONNECT_FAILED],
        ],
    )
    def test_cancel_from_any_active_state(self, events):
        sm = ConnectionStateMachine()
        for event in events:
            sm.transition(event)

        assert sm.transition(ConnectionEvent.CANCEL)
        assert sm.state == ConnectionState.CANCELLED

    def test_invalid_transition_returns_false(self):
        """Test invalid transitions return False."""
        sm = ConnectionStateMachine()
        # Can't go to READY from idle directly
        assert not sm.transition(ConnectionEvent.CONNECT_SUCCESS)
        assert sm.state is None

    def test_cancel_when_idle_is_ignored(self):
        sm = ConnectionStateMachine()
        assert not sm.transition(ConnectionEvent.CANCEL)

    def test_connection_lost_after_cancel_is_ignored(self):
        """Closing locally does not also report a failure."""
        listener = Mock()
        sm = ConnectionStateMachine(listener)
        sm.transition(ConnectionEvent.CONNECT)
        sm.transition(ConnectionEvent.CONNECT_SUCCESS)
        sm.transition(ConnectionEvent.CANCEL)

        assert not sm.transition(ConnectionEvent.CONNECTION_LOST)
        assert listener.call_count == 3

    def test_reconnect_after_failure(self):
        sm = ConnectionStateMachine()
        sm.transition(ConnectionEvent.CONNECT)
        sm.transition(ConnectionEvent.CONNECT_FAILED)

        assert sm.transition(ConnectionEvent.CONNECT)
        assert sm.state == ConnectionState.PREPARING

    def test_listener_called_once_per_transition_in_order(self):
        """Test listener sees each state exactly once, in order."""
        seen = []
        sm = ConnectionStateMachine(seen.append)

        sm.transition(ConnectionEvent.CONNECT)
        sm.transition(ConnectionEvent.CONNECT_SUCCESS)
        sm.transition(ConnectionEvent.CONNECT_SUCCESS)  # invalid, no call
        sm.transition(ConnectionEvent.CONNECTION_LOST)

        assert seen == [
            ConnectionState.PREPARING,
            ConnectionState.READY,
            ConnectionState.FAILED,
        ]

    def test_listener_error_does_not_break_transition(self, caplog):
        sm = ConnectionStateMachine(Mock(side_effect=RuntimeError("boom")))

        assert sm.transition(ConnectionEvent.CONNECT)
        assert sm.state == ConnectionState.PREPARING
        assert "Error in state change callback" in caplog.text

    def test_set_listener(self):
        listener = Mock()
        sm = ConnectionStateMachine()
        sm.set_listener(listener)

        sm.transition(ConnectionEvent.CONNECT)

        listener.assert_called_once_with(ConnectionState.PREPARING)

    def test_reset(self):
        """Test reset returns to idle without notifying."""
        listener = Mock()
        sm = ConnectionStateMachine(listener)
        sm.transition(ConnectionEvent.CONNECT)
        listener.reset_mock()

        sm.reset()

        assert sm.state is None
        assert sm.previous_state is None
        listener.assert_not_called()

    def test_str_representation(self):
        sm = ConnectionStateMachine()
        assert str(sm) == "ConnectionStateMachine(state=IDLE)"
        sm.transition(ConnectionEvent.CONNECT)
        assert "PREPARING" in str(sm)
