"""Tests for summary metrics computation."""

import math

import numpy as np
import pytest
from chaos_sequencer.config.schema import GeneratorConfig
from chaos_sequencer.data.sources import SeededRandomProvider
from chaos_sequencer.engine.generator import generate
from chaos_sequencer.engine.metrics import median, quantile, summarize, trend_strength, volatility
from chaos_sequencer.errors import EmptyInputError
from chaos_sequencer.model.records import StepRecord
from chaos_sequencer.model.regimes import Regime


def records_from(values):
    return [StepRecord(step=i, value=v, regime=Regime.ADDITIVE_NOISE) for i, v in enumerate(values)]


def test_summarize_basic():
    """Test statistics of a simple ascending sequence."""
    stats = summarize(records_from([1, 2, 3, 4, 5]))

    assert stats.mean == 3.0
    assert stats.median == 3
    assert stats.stdev == pytest.approx(math.sqrt(2.5))
    assert stats.variance == pytest.approx(2.5)
    assert stats.coefficient_of_variation == pytest.approx(math.sqrt(2.5) / 3.0)
    assert stats.min == 1
    assert stats.max == 5
    assert stats.count == 5
    assert stats.q1 == 2
    assert stats.q3 == 4
    assert stats.iqr == 2
    assert stats.trend_strength == 1.0
    assert stats.volatility == 1.0


def test_summarize_ignores_enhanced_values():
    """Test that statistics use value, not enhanced_value."""
    records = [
        StepRecord(step=0, value=10, regime=Regime.INITIAL, enhanced_value=900, enhancement_delta=890),
        StepRecord(step=1, value=20, regime=Regime.RANDOM_WALK, enhanced_value=1, enhancement_delta=-19),
    ]
    stats = summarize(records)
    assert stats.min == 10
    assert stats.max == 20
    assert stats.mean == 15.0


def test_summarize_empty_raises():
    """Test that an empty sequence raises EmptyInputError."""
    with pytest.raises(EmptyInputError, match="empty sequence"):
        summarize([])


def test_summarize_single_value_is_nan_not_error():
    """Test the NaN policy for a single value."""
    stats = summarize(records_from([7]))

    assert math.isnan(stats.stdev)
    assert math.isnan(stats.variance)
    assert math.isnan(stats.coefficient_of_variation)
    assert stats.mean == 7.0
    assert stats.median == stats.q1 == stats.q3 == 7
    assert stats.iqr == 0
    assert stats.trend_strength == 0.0
    assert stats.volatility == 0.0
    assert stats.to_dict()["stdev"] is None


def test_summarize_zero_mean_cv_is_nan():
    """Test that a zero mean leaves the coefficient of variation NaN."""
    stats = summarize(records_from([-1, 1]))
    assert stats.mean == 0.0
    assert stats.stdev == pytest.approx(math.sqrt(2))
    assert math.isnan(stats.coefficient_of_variation)


def test_median_even_count_uses_floor_average():
    """Test integer floor averaging for even counts."""
    assert median([1, 2, 3, 4]) == 2
    assert median([1, 4]) == 2
    assert median([-3, 0]) == -2
    assert median([5]) == 5


def test_quantile_interpolates_then_truncates():
    """Test linear interpolation followed by truncation."""
    assert quantile([1, 2, 3, 4], 0.25) == 1   # 1.75
    assert quantile([1, 2, 3, 4], 0.75) == 3   # 3.25
    assert quantile([10, 20], 0.5) == 15
    assert quantile([1, 2, 3, 4], 1.0) == 4
    assert quantile([1, 2, 3, 4], 0.0) == 1


def test_trend_strength_ignores_ties():
    """Test that equal neighbours count toward neither direction."""
    assert trend_strength(np.array([1, 1, 2, 2, 1])) == 0.0
    assert trend_strength(np.array([5, 5, 5])) == 0.0
    assert trend_strength(np.array([5, 4, 3, 3])) == 1.0
    assert trend_strength(np.array([1, 2, 3, 2])) == pytest.approx(1 / 3)


def test_volatility_mean_absolute_change():
    """Test mean absolute adjacent difference."""
    assert volatility(np.array([1, 3, 0])) == 2.5
    assert volatility(np.array([4])) == 0.0


def test_summarize_constant_sequence():
    """Test statistics of a constant sequence."""
    stats = summarize(records_from([4, 4, 4, 4]))
    assert stats.stdev == 0.0
    assert stats.coefficient_of_variation == 0.0
    assert stats.trend_strength == 0.0
    assert stats.volatility == 0.0
    assert stats.min == stats.median == stats.max == 4


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_summarize_ordering_invariants_on_generated_sequences(seed):
    """Test min <= q1 <= q3 <= max on generated sequences."""
    config = GeneratorConfig(max_value=500)
    stats = summarize(generate(100, config, SeededRandomProvider(seed=seed)))

    assert stats.min <= stats.q1 <= stats.q3 <= stats.max
    assert stats.min <= stats.median <= stats.max
    assert 0.0 <= stats.trend_strength <= 1.0
    assert stats.volatility >= 0.0
    assert stats.count == 100
    assert stats.iqr == stats.q3 - stats.q1
