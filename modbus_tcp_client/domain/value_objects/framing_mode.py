"""Framing mode value object."""

from enum import Enum


class FramingMode(Enum):
    """Wire framing used by a client for its whole lifetime.

    TCP:
        ``[00 00][00 00][len_hi len_lo][unit][func][payload...]``
        MBAP header, no checksum.
    RTU_OVER_TCP:
        ``[unit][func][payload...][crc_lo crc_hi]``
        RTU frame carried over the TCP stream, CRC-16 terminated.
    """

    TCP = "tcp"
    RTU_OVER_TCP = "rtu_over_tcp"

    @property
    def has_checksum(self) -> bool:
        """Whether frames in this mode carry a trailing CRC-16."""
        return self is FramingMode.RTU_OVER_TCP

    @classmethod
    def from_string(cls, value: str) -> "FramingMode":
        """Parse a framing mode from its configuration name.

        Accepts the enum value or name in any case, with ``-`` treated as ``_``.

        Raises:
            ValueError: If the name is not a known framing mode

        Example:
            >>> FramingMode.from_string("rtu-over-tcp")
            <FramingMode.RTU_OVER_TCP: 'rtu_over_tcp'>
        """
        normalized = str(value).strip().lower().replace("-", "_")
        for mode in cls:
            if normalized == mode.value:
                return mode
        raise ValueError(
            f"Unknown framing mode '{value}'. Valid: {[m.value for m in cls]}"
        )
