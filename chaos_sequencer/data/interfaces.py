"""Random provider protocol definitions.

Defines the uniform-draw capability the generator and the enhancement pass
depend on. Concrete sources (secure entropy, seeded, replayed scripts) live in
``chaos_sequencer.data.sources``.
"""

from typing import Protocol


class RandomProvider(Protocol):
    """Supplies uniform integer and float draws."""

    def uniform_int(self, n: int) -> int:
        """Get an integer uniformly distributed in [0, n).

        Args:
            n: Exclusive upper bound

        Returns:
            Integer in [0, n), or 0 when n <= 0
        """
        ...

    def uniform_float(self) -> float:
        """Get a float uniformly distributed in [0, 1)."""
        ...


class EntropySource(Protocol):
    """A single link of the secure provider's fallback chain.

    Sources may raise OSError or NotImplementedError when the underlying
    entropy is unavailable; the chain moves on to the next source.
    """

    name: str

    def randbelow(self, n: int) -> int:
        """Get an integer in [0, n) for n > 0."""
        ...

    def randbits(self, k: int) -> int:
        """Get a non-negative integer with k random bits."""
        ...
