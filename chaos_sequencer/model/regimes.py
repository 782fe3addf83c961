"""Regime definitions and the threshold table used to select them.

Each step from index 2 onward is produced by one of four generative rules.
The rule is picked by a single uniform draw compared against sorted upper
bounds, so every regime covers an equal quarter of [0, 1).
"""

from dataclasses import dataclass
from enum import Enum


class Regime(str, Enum):
    """Generative rule that produced a step."""

    INITIAL = "initial"
    RANDOM_WALK = "random_walk"
    TREND_FOLLOWING = "trend_following"
    MEAN_REVERSION = "mean_reversion"
    MULTIPLICATIVE = "multiplicative"
    ADDITIVE_NOISE = "additive_noise"


@dataclass(frozen=True)
class RegimeThreshold:
    """Upper bound (exclusive) of the roll range assigned to a regime.

    Attributes:
        upper: Rolls strictly below this value select the regime
        regime: Regime selected for the range
    """

    upper: float
    regime: Regime

    def __post_init__(self):
        """Validate the bound lies in (0, 1]."""
        if not 0.0 < self.upper <= 1.0:
            raise ValueError(f"upper must be in (0, 1], got {self.upper}")


# Sorted by upper bound; the last entry must close the interval at 1.0
REGIME_THRESHOLDS: tuple[RegimeThreshold, ...] = (
    RegimeThreshold(upper=0.25, regime=Regime.TREND_FOLLOWING),
    RegimeThreshold(upper=0.50, regime=Regime.MEAN_REVERSION),
    RegimeThreshold(upper=0.75, regime=Regime.MULTIPLICATIVE),
    RegimeThreshold(upper=1.00, regime=Regime.ADDITIVE_NOISE),
)

MULTIPLICATIVE_FACTORS: tuple[float, ...] = (0.3, 0.7, 1.3, 1.7, 2.0, -0.5)


def select_regime(
    roll: float,
    thresholds: tuple[RegimeThreshold, ...] = REGIME_THRESHOLDS,
) -> Regime:
    """Map a uniform roll in [0, 1) to a regime.

    Args:
        roll: Uniform draw in [0, 1)
        thresholds: Threshold table sorted by ascending upper bound

    Returns:
        The first regime whose upper bound exceeds the roll. Rolls at or
        above the last bound fall into the last regime.
    """
    for threshold in thresholds:
        if roll < threshold.upper:
            return threshold.regime
    return thresholds[-1].regime
