"""Failure classification for a single request/response exchange."""

from enum import Enum


class ErrorKind(Enum):
    """Why an exchange failed."""

    TRANSPORT = "transport"  # connect/send/receive failure, empty payload
    MALFORMED = "malformed"  # length or parity bound violated
    CRC_MISMATCH = "crc_mismatch"  # RTU-over-TCP only
    EXCEPTION_RESPONSE = "exception_response"  # device set the 0x80 flag
    ACK_MISMATCH = "ack_mismatch"  # write acknowledgement check failed
