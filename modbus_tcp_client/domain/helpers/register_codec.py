"""Register value packing helpers.

Holding registers are 16-bit unsigned values transferred as big-endian byte
pairs, in ascending address order.
"""

import struct
from typing import List, Sequence, Union

from ...const import REGISTER_MAX


def encode_registers(values: Sequence[int]) -> bytes:
    """Pack register values into big-endian byte pairs.

    Args:
        values: Register values (0-65535 each)

    Returns:
        ``2 * len(values)`` bytes

    Raises:
        ValueError: If any value is outside 0-65535

    Examples:
        >>> encode_registers([0x0102, 0xFFFF])
        b'\\x01\\x02\\xff\\xff'
        >>> encode_registers([])
        b''
    """
    for index, value in enumerate(values):
        if not isinstance(value, int) or not 0 <= value <= REGISTER_MAX:
            raise ValueError(
                f"Register value #{index} must be 0-65535, got {value!r}"
            )
    return struct.pack(f">{len(values)}H", *values)


def decode_registers(data: Union[bytes, bytearray, memoryview]) -> List[int]:
    """Unpack big-endian byte pairs into register values.

    A trailing unpaired byte is dropped rather than rejected. Callers that
    need strict framing check the byte count parity before decoding.

    Args:
        data: Data region of a read response

    Returns:
        Register values in order

    Examples:
        >>> decode_registers(b'\\x01\\xe6\\x00\\xfa')
        [486, 250]
        >>> decode_registers(b'\\x00\\x01\\x02')
        [1]
    """
    register_count = len(data) // 2
    return list(struct.unpack(f">{register_count}H", bytes(data[: register_count * 2])))
