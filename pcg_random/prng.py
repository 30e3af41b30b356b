# PCG32 (XSH-RR, 64-bit state / 32-bit output) for deterministic draws
# Algorithm: M.E. O'Neill, http://www.pcg-random.org/
import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from .errors import InvalidArgument, NullBuffer

logger = logging.getLogger(__name__)

MULTIPLIER = 6364136223846793005
DEFAULT_STREAM = 1442695040888963407

MASK64 = (1 << 64) - 1
U32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1
INT32_MIN = -(1 << 31)
INVERSE_U32_MAX = 1.0 / U32_MAX
BYTE_WIDTH = 4


def _as_u64(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(name, value, "must be an integer")
    return value & MASK64


def _check_int32(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(name, value, "must be an integer")
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidArgument(name, value, "is outside the signed 32-bit range")


@dataclass
class PCG32:
    """Permuted congruential generator with selectable streams.

    ``PCG32(seed, stream)`` always yields the same sequence for the same pair.
    The stream picks one of 2^63 non-overlapping sequences; its low bit is
    forced on so the increment is odd.

    ``PCG32()`` seeds from the system clock. The clock has finite
    resolution, so generators created in close succession without an
    explicit seed may get identical seeds and therefore produce identical
    sequences. Callers that need several independent unseeded generators
    must pass distinct ``stream`` values or explicit seeds.

    Not cryptographically secure, and not safe for unsynchronised use from
    several threads: give each thread its own instance on its own stream.
    """

    seed: Optional[int] = None
    stream: int = DEFAULT_STREAM
    _state: int = field(init=False, repr=False)
    _increment: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.seed is None:
            self.seed = time.time_ns() & MASK64
            logger.debug(f"PCG32 seeded from clock: seed={self.seed} stream={self.stream}")
        self._state = _as_u64("seed", self.seed)
        self._increment = _as_u64("stream", self.stream) | 1

    @property
    def state(self) -> int:
        return self._state

    @property
    def increment(self) -> int:
        return self._increment

    def next_u32(self) -> int:
        """Advance the LCG and return the permuted 32-bit output of the old state."""
        oldstate = self._state
        self._state = (oldstate * MULTIPLIER + self._increment) & MASK64
        xorshifted = (((oldstate >> 18) ^ oldstate) >> 27) & U32_MAX
        rot = oldstate >> 59
        return (xorshifted >> rot) | ((xorshifted << ((-rot) & 31)) & U32_MAX)

    def next_bounded(self, max_value: int) -> int:
        """Unsigned draw in ``[0, max_value)`` without modulo bias.

        ``max_value == 0`` returns 0 and leaves the state untouched.
        """
        if isinstance(max_value, bool) or not isinstance(max_value, int):
            raise InvalidArgument("max_value", max_value, "must be an integer")
        if not 0 <= max_value <= U32_MAX:
            raise InvalidArgument("max_value", max_value, "is outside the unsigned 32-bit range")
        if max_value == 0:
            return 0

        threshold = (U32_MAX - max_value) % max_value
        while True:
            rand = self.next_u32()
            if rand >= threshold:
                return rand % max_value

    def next(self) -> int:
        """Non-negative draw in ``[0, INT32_MAX]``."""
        return self.next_u32() >> 1

    def next_below(self, max_value: int) -> int:
        """Draw in ``[0, max_value)``; returns 0 when ``max_value`` is 0."""
        _check_int32("max_value", max_value)
        if max_value < 0:
            raise InvalidArgument("max_value", max_value, "is less than 0")
        return self.next_bounded(max_value)

    def next_in_range(self, min_value: int, max_value: int) -> int:
        """Draw in ``[min_value, max_value)``; ``min_value`` if the bounds are equal."""
        _check_int32("min_value", min_value)
        _check_int32("max_value", max_value)
        if min_value > max_value:
            raise InvalidArgument("min_value", min_value, f"is greater than max_value ({max_value})")
        if min_value == max_value:
            return min_value
        return self.next_bounded(max_value - min_value) + min_value

    def fill_bytes(self, buffer) -> None:
        """Fill a writable buffer with random bytes, least significant byte first.

        Whole draws are unpacked while more than four bytes remain; one final
        draw covers the last one to four bytes, so an empty buffer still
        consumes a draw.
        """
        if buffer is None:
            raise NullBuffer("buffer")

        view = memoryview(buffer).cast("B")
        length = len(view)
        i = 0
        while i < length - BYTE_WIDTH:
            view[i:i + BYTE_WIDTH] = self.next_u32().to_bytes(BYTE_WIDTH, "little")
            i += BYTE_WIDTH

        tail = self.next_u32().to_bytes(BYTE_WIDTH, "little")
        view[i:] = tail[:length - i]

    def random_bytes(self, length: int) -> bytes:
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise InvalidArgument("length", length, "must be a non-negative integer")
        buffer = bytearray(length)
        self.fill_bytes(buffer)
        return bytes(buffer)

    def sample(self) -> float:
        """Float in ``[0.0, 1.0)``; the largest possible value is 0.99999999976716936."""
        while True:
            rand = self.next_u32()
            if rand != U32_MAX:
                return rand * INVERSE_U32_MAX
