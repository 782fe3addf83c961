"""Cryptographically strong random provider with a fallback chain.

Sources are tried in priority order:
    1. the ``secrets`` module
    2. raw ``os.urandom`` bytes
    3. a time-derived value
A failing source never aborts the run; it degrades randomness quality only.
"""

import os
import secrets
import time

import structlog

from chaos_sequencer.data.interfaces import EntropySource


logger = structlog.get_logger()

FLOAT_BITS = 53
FLOAT_SCALE = float(1 << FLOAT_BITS)


class SecretsEntropySource:
    """Primary source backed by the ``secrets`` module."""

    name = "secrets"

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)

    def randbits(self, k: int) -> int:
        return secrets.randbits(k)


class UrandomEntropySource:
    """Secondary source reading additional bytes from ``os.urandom``.

    The bytes are read as a signed big-endian integer; the absolute value is
    reduced modulo n, which carries a small modulo bias.
    """

    name = "urandom"

    def randbelow(self, n: int) -> int:
        nbytes = max(8, (n.bit_length() + 7) // 8 + 1)
        raw = int.from_bytes(os.urandom(nbytes), "big", signed=True)
        return abs(raw) % n

    def randbits(self, k: int) -> int:
        raw = int.from_bytes(os.urandom((k + 7) // 8), "big")
        return raw & ((1 << k) - 1)


class TimeEntropySource:
    """Last-resort source derived from the nanosecond clock."""

    name = "clock"

    def randbelow(self, n: int) -> int:
        return time.time_ns() % n

    def randbits(self, k: int) -> int:
        return time.time_ns() & ((1 << k) - 1)


DEFAULT_CHAIN: tuple[EntropySource, ...] = (
    SecretsEntropySource(),
    UrandomEntropySource(),
    TimeEntropySource(),
)


class SecureRandomProvider:
    """Uniform provider that walks an ordered chain of entropy sources."""

    def __init__(self, chain: tuple[EntropySource, ...] | None = None):
        """Initialize with an entropy chain.

        Args:
            chain: Sources in priority order (defaults to secrets, urandom,
                clock)
        """
        self.chain = tuple(chain) if chain is not None else DEFAULT_CHAIN
        if not self.chain:
            raise ValueError("entropy chain must contain at least one source")

    def uniform_int(self, n: int) -> int:
        """Get an integer in [0, n); 0 for n <= 0."""
        if n <= 0:
            return 0
        for source in self.chain:
            try:
                return source.randbelow(n)
            except (OSError, NotImplementedError) as e:
                logger.warning("entropy_source_failed", source=source.name, draw="int", error=str(e))
        logger.error("entropy_chain_exhausted", draw="int", n=n)
        return 0

    def uniform_float(self) -> float:
        """Get a float in [0, 1) from 53 random bits."""
        for source in self.chain:
            try:
                return source.randbits(FLOAT_BITS) / FLOAT_SCALE
            except (OSError, NotImplementedError) as e:
                logger.warning("entropy_source_failed", source=source.name, draw="float", error=str(e))
        logger.error("entropy_chain_exhausted", draw="float")
        return 0.0
