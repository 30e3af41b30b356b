"""Bridge PCG32 into the standard library ``random.Random`` API."""

import random
from typing import Optional

from .prng import DEFAULT_STREAM, PCG32


class PCGRandom(random.Random):
    """``random.Random`` whose entropy comes from an owned :class:`PCG32`.

    Every inherited helper (``randrange``, ``choice``, ``shuffle``,
    ``uniform``, ``gauss``...) is driven by ``random()`` and
    ``getrandbits()``, both of which delegate to the engine.
    """

    def __new__(cls, *args, **kwargs):
        # _random.Random.__new__ rejects a second positional argument.
        return super().__new__(cls)

    def __init__(self, seed: Optional[int] = None, stream: int = DEFAULT_STREAM) -> None:
        self._stream = stream
        super().__init__(seed)

    def seed(self, a: Optional[int] = None, stream: Optional[int] = None) -> None:
        """Rebuild the engine; ``stream=None`` keeps the current stream."""
        if stream is not None:
            self._stream = stream
        self._engine = PCG32(a, self._stream)
        self.gauss_next = None

    @property
    def engine(self) -> PCG32:
        return self._engine

    def random(self) -> float:
        return self._engine.sample()

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        if k <= 32:
            return self._engine.next_u32() >> (32 - k)

        result = 0
        for shift in range(0, k, 32):
            word = self._engine.next_u32()
            remaining = k - shift
            if remaining < 32:
                word >>= 32 - remaining
            result |= word << shift
        return result

    def randbytes(self, n: int) -> bytes:
        return self._engine.random_bytes(n)

    def getstate(self):
        raise NotImplementedError("PCGRandom does not support saving generator state")

    def setstate(self, state):
        raise NotImplementedError("PCGRandom does not support restoring generator state")
