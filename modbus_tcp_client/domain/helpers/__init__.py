"""Domain helper functions."""

from .register_codec import decode_registers, encode_registers

__all__ = [
    "decode_registers",
    "encode_registers",
]
