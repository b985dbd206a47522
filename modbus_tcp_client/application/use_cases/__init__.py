"""Use cases for the application layer.

Each use case runs exactly one request/response exchange and returns a
result object; protocol and transport failures never escape as exceptions.
"""

from .read_registers_result import ReadRegistersResult
from .read_registers_use_case import ReadRegistersUseCase
from .write_registers_result import WriteRegistersResult
from .write_registers_use_case import WriteRegistersUseCase

__all__ = [
    "ReadRegistersResult",
    "ReadRegistersUseCase",
    "WriteRegistersResult",
    "WriteRegistersUseCase",
]
