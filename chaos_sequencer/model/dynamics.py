"""Regime-switching integer recurrence.

Implements the per-step rule of the chaotic sequence:
    x_i = clamp(f_{s_i}(x_{i-1}, x_{i-2}, m_{i-1}) + vol(x), min, max)
where s_i is drawn from the regime threshold table and m is the running mean.

All float-to-int conversions truncate toward zero, term by term, and integer
halving truncates toward zero as well (-3 / 2 == -1).
"""

import math

from chaos_sequencer.config.schema import GeneratorConfig
from chaos_sequencer.data.interfaces import RandomProvider
from chaos_sequencer.model.interfaces import StepOutcome
from chaos_sequencer.model.regimes import (
    MULTIPLICATIVE_FACTORS,
    REGIME_THRESHOLDS,
    Regime,
    RegimeThreshold,
    select_regime,
)


def clamp(value: int, lower: int, upper: int) -> int:
    """Saturate value to the closed interval [lower, upper]."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def trunc(x: float) -> int:
    """Convert a float to int, truncating toward zero."""
    return math.trunc(x)


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class ChaoticRegimeModel:
    """Four-regime chaotic recurrence over bounded integers.

    The model holds only the immutable generator config; the running mean is
    passed in by the caller so that it stays owned by the generation loop.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        thresholds: tuple[RegimeThreshold, ...] = REGIME_THRESHOLDS,
    ):
        """Initialize the model.

        Args:
            config: Validated generator configuration
            thresholds: Regime threshold table, sorted by upper bound
        """
        self.config = config
        self.thresholds = thresholds
        self._rules = {
            Regime.TREND_FOLLOWING: self._trend_following,
            Regime.MEAN_REVERSION: self._mean_reversion,
            Regime.MULTIPLICATIVE: self._multiplicative,
            Regime.ADDITIVE_NOISE: self._additive_noise,
        }

    def initial_value(self, provider: RandomProvider) -> int:
        """Draw step 0 uniformly from [min_value, max_value]."""
        span = self.config.max_value - self.config.min_value + 1
        return provider.uniform_int(span) + self.config.min_value

    def random_walk(self, prev: int, provider: RandomProvider) -> int:
        """Draw step 1 as a +/-10 walk from step 0."""
        return clamp(
            prev + provider.uniform_int(21) - 10,
            self.config.min_value,
            self.config.max_value,
        )

    def next_value(
        self,
        prev1: int,
        prev2: int,
        running_mean: float,
        provider: RandomProvider,
    ) -> StepOutcome:
        """Produce the next value from the previous two.

        Draw order is fixed: regime roll, chaos factor, then whatever the
        selected regime draws itself.

        Args:
            prev1: Value at i-1
            prev2: Value at i-2
            running_mean: Mean of all values before step i
            provider: Source of uniform draws

        Returns:
            StepOutcome with the clamped value and the selected regime
        """
        roll = provider.uniform_float()
        chaos = provider.uniform_float() * 2 - 1
        regime = select_regime(roll, self.thresholds)

        rule = self._rules[regime]
        candidate = rule(prev1, prev2, running_mean, chaos, provider)

        candidate += trunc(chaos * candidate * self.config.volatility)
        value = clamp(candidate, self.config.min_value, self.config.max_value)
        return StepOutcome(value=value, regime=regime)

    def _trend_following(self, prev1, prev2, running_mean, chaos, provider):
        trend = prev1 - prev2
        return (
            prev1
            + trunc(trend * self.config.trend_strength)
            + trunc(chaos * prev1 * 0.5)
        )

    def _mean_reversion(self, prev1, prev2, running_mean, chaos, provider):
        deviation = prev1 - running_mean
        return (
            prev1
            - trunc(deviation * self.config.mean_reversion)
            + trunc(chaos * prev1 * 0.3)
        )

    def _multiplicative(self, prev1, prev2, running_mean, chaos, provider):
        index = provider.uniform_int(len(MULTIPLICATIVE_FACTORS))
        return trunc(prev1 * MULTIPLICATIVE_FACTORS[index]) + trunc(chaos * 10)

    def _additive_noise(self, prev1, prev2, running_mean, chaos, provider):
        # Memory term halves the last move, truncating toward zero
        noise = provider.uniform_int(21) - 10
        return prev1 + trunc_div(prev1 - prev2, 2) + noise
