"""Exceptions raised by the PCG32 generator and its adapters."""

from typing import Any


class PcgError(Exception):
    """Base class for every error raised by pcg_random."""


class InvalidArgument(PcgError, ValueError):
    """An argument is outside the range an operation accepts."""

    def __init__(self, param_name: str, value: Any, reason: str) -> None:
        self.param_name = param_name
        self.value = value
        super().__init__(f"{param_name}={value!r} {reason}.")


class NullBuffer(PcgError, TypeError):
    """A byte-fill operation was handed ``None`` instead of a buffer."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"{param_name} must not be None.")
