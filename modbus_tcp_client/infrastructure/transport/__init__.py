"""Transport implementations."""

from .tcp_transport import TCPTransport

__all__ = [
    "TCPTransport",
]
