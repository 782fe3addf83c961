"""Seeded pseudo-random provider for reproducible runs."""

import numpy as np


INT64_MAX = np.iinfo(np.int64).max
WORD_BITS = 32


class SeededRandomProvider:
    """Uniform provider backed by a numpy ``RandomState``.

    Two providers built with the same seed produce identical draw streams.
    Bounds beyond int64 are drawn from several 32-bit words with rejection,
    so any Python int bound stays uniform.
    """

    def __init__(self, seed: int = 0):
        """Initialize the random state.

        Args:
            seed: Random seed for reproducibility
        """
        self.seed = seed
        self._rng = np.random.RandomState(seed)

    def uniform_int(self, n: int) -> int:
        if n <= 0:
            return 0
        if n <= INT64_MAX:
            return int(self._rng.randint(0, n, dtype=np.int64))
        return self._wide_uniform_int(n)

    def _wide_uniform_int(self, n: int) -> int:
        words = (n.bit_length() + WORD_BITS - 1) // WORD_BITS
        space = 1 << (words * WORD_BITS)
        # Largest multiple of n that fits in the drawn space
        limit = space - space % n
        while True:
            draw = 0
            for word in self._rng.randint(0, 1 << WORD_BITS, size=words, dtype=np.uint64):
                draw = (draw << WORD_BITS) | int(word)
            if draw < limit:
                return draw % n

    def uniform_float(self) -> float:
        return float(self._rng.random_sample())
