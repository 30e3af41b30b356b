"""Public package surface for the PCG32 random number generator."""

from .draws import DrawConfig, run_draws
from .errors import InvalidArgument, NullBuffer, PcgError
from .prng import DEFAULT_STREAM, MULTIPLIER, PCG32
from .random_adapter import PCGRandom

__all__ = [
    "DEFAULT_STREAM",
    "DrawConfig",
    "InvalidArgument",
    "MULTIPLIER",
    "NullBuffer",
    "PCG32",
    "PCGRandom",
    "PcgError",
    "run_draws",
]
