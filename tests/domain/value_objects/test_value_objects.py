"""Tests for domain value objects."""

import pytest

from modbus_tcp_client.domain.value_objects import (
    ConnectionState,
    ExceptionCode,
    FramingMode,
    FunctionCode,
)


class TestFramingMode:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("tcp", FramingMode.TCP),
            ("TCP", FramingMode.TCP),
            ("rtu_over_tcp", FramingMode.RTU_OVER_TCP),
            ("RTU-over-TCP", FramingMode.RTU_OVER_TCP),
            (" rtu_over_tcp ", FramingMode.RTU_OVER_TCP),
        ],
    )
    def test_from_string(self, name, expected):
        assert FramingMode.from_string(name) is expected

    def test_from_string_unknown(self):
        with pytest.raises(ValueError, match="Unknown framing mode"):
            FramingMode.from_string("ascii")

    def test_has_checksum(self):
        assert FramingMode.RTU_OVER_TCP.has_checksum
        assert not FramingMode.TCP.has_checksum


class TestConnectionState:
    @pytest.mark.parametrize(
        "signal,expected",
        [
            (ConnectionState.READY, ConnectionState.READY),
            ("preparing", ConnectionState.PREPARING),
            ("Waiting", ConnectionState.WAITING),
            ("FAILED", ConnectionState.FAILED),
            ("cancelled", ConnectionState.CANCELLED),
        ],
    )
    def test_from_signal_known(self, signal, expected):
        assert ConnectionState.from_signal(signal) is expected

    @pytest.mark.parametrize("signal", ["setup", "", 3, None, object()])
    def test_from_signal_unknown(self, signal):
        """Unrecognized signals map to UNKNOWN instead of being dropped."""
        assert ConnectionState.from_signal(signal) is ConnectionState.UNKNOWN

    def test_is_terminal(self):
        assert ConnectionState.FAILED.is_terminal
        assert ConnectionState.CANCELLED.is_terminal
        assert not ConnectionState.READY.is_terminal
        assert not ConnectionState.UNKNOWN.is_terminal

    def test_str(self):
        assert str(ConnectionState.READY) == "ready"


class TestFunctionCode:
    @pytest.mark.parametrize("value", [0x83, 0x90, 0x80, 0xFF])
    def test_exception_flag_set(self, value):
        assert FunctionCode.is_exception(value)

    @pytest.mark.parametrize("value", [0x03, 0x10, 0x7F])
    def test_exception_flag_clear(self, value):
        assert not FunctionCode.is_exception(value)


class TestExceptionCode:
    def test_lookup_known(self):
        assert ExceptionCode.lookup(0x0B) is ExceptionCode.GATEWAY_TARGET_NO_RESPONSE

    def test_lookup_vendor_code(self):
        assert ExceptionCode.lookup(0x40) is None
