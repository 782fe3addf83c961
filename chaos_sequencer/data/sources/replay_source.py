"""Replay provider for scripted draw streams.

Feeds the generator a fixed sequence of integer and float draws so that a run
can be reproduced exactly, e.g. in tests or when replaying a recorded stream.
"""

from collections.abc import Sequence

from chaos_sequencer.errors import ProviderExhaustedError


class ReplayRandomProvider:
    """Provider returning scripted draws in order.

    Integer draws are reduced modulo the requested bound so any script stays
    within [0, n). A call with n <= 0 returns 0 without consuming a draw.
    """

    def __init__(
        self,
        int_draws: Sequence[int],
        float_draws: Sequence[float],
        cycle: bool = True,
    ):
        """Initialize with draw scripts.

        Args:
            int_draws: Integer draws, consumed by uniform_int
            float_draws: Float draws in [0, 1), consumed by uniform_float
            cycle: Restart each script from the beginning when exhausted

        Raises:
            ValueError: If a float draw lies outside [0, 1) or a cycling
                script is empty
        """
        for draw in float_draws:
            if not 0.0 <= draw < 1.0:
                raise ValueError(f"float draws must be in [0, 1), got {draw}")
        if cycle and (not int_draws or not float_draws):
            raise ValueError("cycling scripts must not be empty")

        self.int_draws = list(int_draws)
        self.float_draws = list(float_draws)
        self.cycle = cycle
        self._int_pos = 0
        self._float_pos = 0

    @classmethod
    def constant(cls, int_draw: int, float_draw: float) -> "ReplayRandomProvider":
        """Build a provider that always returns the same two draws."""
        return cls([int_draw], [float_draw], cycle=True)

    def _next(self, script: list, pos: int, kind: str):
        if pos >= len(script):
            if not self.cycle:
                raise ProviderExhaustedError(
                    f"replay script for {kind} draws exhausted after {len(script)} draws"
                )
            pos %= len(script)
        return script[pos]

    def uniform_int(self, n: int) -> int:
        if n <= 0:
            return 0
        draw = self._next(self.int_draws, self._int_pos, "int")
        self._int_pos += 1
        return draw % n

    def uniform_float(self) -> float:
        draw = self._next(self.float_draws, self._float_pos, "float")
        self._float_pos += 1
        return draw
