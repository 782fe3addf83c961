"""Summary metrics computation.

Computes descriptive statistics (mean, median, spread, quantiles) and trend
statistics (trend strength, volatility) over the generated values. Enhanced
values are not considered.

Degenerate inputs follow a not-a-number policy: a single-record sequence has
no sample deviation, so stdev, variance and coefficient_of_variation are NaN;
a zero mean leaves coefficient_of_variation NaN. Both cases log a warning.
"""

import math

import numpy as np
import structlog
from pydantic import BaseModel

from chaos_sequencer.errors import EmptyInputError
from chaos_sequencer.model.records import StepRecord


logger = structlog.get_logger()


class SequenceStatistics(BaseModel):
    """Statistics derived from a finished sequence.

    Attributes:
        mean: Arithmetic mean
        median: Integer median (floor average of the middle pair for even counts)
        stdev: Sample standard deviation (n - 1 denominator)
        variance: stdev squared
        coefficient_of_variation: stdev / mean
        min: Smallest value
        max: Largest value
        count: Number of values
        q1: 25th percentile, interpolated then truncated
        q3: 75th percentile, interpolated then truncated
        iqr: q3 - q1
        trend_strength: |up - down| / (up + down) over adjacent pairs
        volatility: Mean absolute adjacent difference
    """

    mean: float
    median: int
    stdev: float
    variance: float
    coefficient_of_variation: float
    min: int
    max: int
    count: int
    q1: int
    q3: int
    iqr: int
    trend_strength: float
    volatility: float

    def to_dict(self) -> dict:
        """Render with fixed field names; NaN becomes None."""
        return {
            key: None if isinstance(value, float) and math.isnan(value) else value
            for key, value in self.model_dump().items()
        }


def quantile(sorted_values: list[int], q: float) -> int:
    """Linearly interpolated quantile of pre-sorted values, truncated to int.

    Args:
        sorted_values: Values in ascending order (non-empty)
        q: Quantile in [0, 1]

    Returns:
        Interpolated value at position q * (count - 1), truncated toward zero
    """
    pos = q * (len(sorted_values) - 1)
    lower = int(pos)
    upper = lower + 1
    weight = pos - lower

    if upper >= len(sorted_values):
        return sorted_values[lower]
    return int(sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight)


def median(sorted_values: list[int]) -> int:
    """Median of pre-sorted values using integer (floor) averaging."""
    count = len(sorted_values)
    mid = count // 2
    if count % 2 == 0:
        return (sorted_values[mid - 1] + sorted_values[mid]) // 2
    return sorted_values[mid]


def trend_strength(values: np.ndarray) -> float:
    """Imbalance between rising and falling adjacent pairs, in [0, 1].

    Ties count toward neither side; a sequence with no directional pairs
    has zero trend strength.
    """
    if len(values) < 2:
        return 0.0
    diffs = np.diff(values)
    up = int(np.count_nonzero(diffs > 0))
    down = int(np.count_nonzero(diffs < 0))
    total = up + down
    if total == 0:
        return 0.0
    return abs(up - down) / total


def volatility(values: np.ndarray) -> float:
    """Mean absolute change between adjacent values."""
    if len(values) < 2:
        return 0.0
    return float(np.mean(np.abs(np.diff(values))))


def summarize(records: list[StepRecord]) -> SequenceStatistics:
    """Compute statistics over the value field of a sequence.

    Args:
        records: Generated (optionally enhanced) records

    Returns:
        SequenceStatistics recomputed from scratch

    Raises:
        EmptyInputError: If records is empty
    """
    if len(records) == 0:
        raise EmptyInputError("empty sequence")

    raw = [record.value for record in records]
    ordered = sorted(raw)
    values = np.asarray(raw, dtype=np.float64)
    count = len(raw)

    mean = float(np.mean(values))

    if count < 2:
        logger.warning("degenerate_statistics", reason="single_value", count=count)
        stdev = math.nan
    else:
        stdev = float(np.std(values, ddof=1))
    variance = stdev * stdev

    if mean == 0:
        logger.warning("degenerate_statistics", reason="zero_mean", count=count)
        cv = math.nan
    else:
        cv = stdev / mean

    q1 = quantile(ordered, 0.25)
    q3 = quantile(ordered, 0.75)

    return SequenceStatistics(
        mean=mean,
        median=median(ordered),
        stdev=stdev,
        variance=variance,
        coefficient_of_variation=cv,
        min=ordered[0],
        max=ordered[-1],
        count=count,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        trend_strength=trend_strength(values),
        volatility=volatility(values),
    )
