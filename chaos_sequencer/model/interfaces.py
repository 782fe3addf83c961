"""Protocol definitions for sequence dynamics models.

This module defines the interface that all step models must implement,
enabling swappable recurrences behind the same generation loop.
"""

from typing import NamedTuple, Protocol

from chaos_sequencer.data.interfaces import RandomProvider
from chaos_sequencer.model.regimes import Regime


class StepOutcome(NamedTuple):
    """Value produced for a step and the regime that produced it."""

    value: int
    regime: Regime


class DynamicsModel(Protocol):
    """Protocol for bounded integer sequence dynamics.

    A model seeds the first two steps and then produces each later step from
    the previous two values and the running mean.
    """

    def initial_value(self, provider: RandomProvider) -> int:
        """Draw the value for step 0."""
        ...

    def random_walk(self, prev: int, provider: RandomProvider) -> int:
        """Draw the value for step 1 from step 0."""
        ...

    def next_value(
        self,
        prev1: int,
        prev2: int,
        running_mean: float,
        provider: RandomProvider,
    ) -> StepOutcome:
        """Produce the value for step i >= 2.

        Args:
            prev1: Value at i-1
            prev2: Value at i-2
            running_mean: Mean of all values before step i
            provider: Source of uniform draws

        Returns:
            StepOutcome with the bounded value and its regime
        """
        ...
