"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
We primarily use Fakes: they implement the real interface contract, can be
reused across many tests, and behave more realistically than mocks.

Example:
    >>> from tests.doubles import FakeTransport
    >>> transport = FakeTransport()
    >>> transport.queue_response(response_bytes)
    >>> await transport.send(request)
    >>> assert await transport.receive(1, 256) == response_bytes
"""

from .fake_transport import FakeTransport
from .frames import rtu_frame, tcp_frame

__all__ = ["FakeTransport", "rtu_frame", "tcp_frame"]
