"""Tests for the enhancement pass."""

import pytest
from chaos_sequencer.config.schema import GeneratorConfig
from chaos_sequencer.data.sources import ReplayRandomProvider, SeededRandomProvider
from chaos_sequencer.engine.enhance import enhance, enhancement_candidate
from chaos_sequencer.engine.generator import generate
from chaos_sequencer.model.records import StepRecord
from chaos_sequencer.model.regimes import Regime


CONFIG = GeneratorConfig(min_value=1, max_value=1000)


def record(value, step=1, regime=Regime.ADDITIVE_NOISE):
    return StepRecord(step=step, value=value, regime=regime)


@pytest.mark.parametrize(
    "value, step, int_draw, float_draw, expected",
    [
        (22, 1, 40, 0.5, 86),     # % 11: 66 + 40 - 20
        (77, 1, 20, 0.5, 231),    # % 11 wins over % 7
        (14, 1, 0, 0.5, 18),      # % 7: 28 - 10
        (35, 1, 10, 0.5, 70),     # % 7 wins over % 5
        (25, 1, 10, 0.5, 17),     # % 5: 12 + 10 - 5
        (26, 13, 100, 0.5, 76),   # periodic: 26 + 100 - 50
        (26, 1, 200, 0.05, 126),  # random event: 26 + 200 - 100
        (26, 1, 0, 0.5, 16),      # normal: 26 - 10
        (55, 13, 0, 0.05, 145),   # modulo rules precede periodic and random rules
    ],
)
def test_enhancement_rules(value, step, int_draw, float_draw, expected):
    """Test each enhancement rule and their precedence."""
    provider = ReplayRandomProvider([int_draw], [float_draw], cycle=False)
    assert enhancement_candidate(value, step, provider) == expected


def test_enhancement_halving_truncates_toward_zero():
    """Test that value / 2 truncates toward zero for negatives."""
    provider = ReplayRandomProvider([5], [0.5], cycle=False)
    # -15 / 2 -> -7, then + 5 - 5
    assert enhancement_candidate(-15, 1, provider) == -7


def test_enhance_consumes_one_float_per_record():
    """Test that every record draws its chaos float first."""
    records = [record(22, step=0), record(26, step=1)]
    provider = ReplayRandomProvider([20, 200], [0.5, 0.05], cycle=False)

    enhanced = enhance(records, CONFIG, provider)

    assert [r.enhanced_value for r in enhanced] == [66, 126]


def test_enhance_clamps_to_widened_range_and_keeps_raw_delta():
    """Test the [min, 2*max] clamp and the pre-clamp delta."""
    # 990 % 11 == 0 -> 2970 - 20, above 2 * max_value
    provider = ReplayRandomProvider([0, 0], [0.5, 0.5], cycle=False)
    enhanced = enhance([record(990), record(2)], CONFIG, provider)

    high, low = enhanced
    assert high.enhanced_value == 2000
    assert high.enhancement_delta == 2950 - 990
    assert low.enhanced_value == 1
    assert low.enhancement_delta == -10


def test_enhance_preserves_original_fields():
    """Test that enhancement only adds fields."""
    config = GeneratorConfig(max_value=500)
    records = generate(200, config, SeededRandomProvider(seed=11))

    enhanced = enhance(records, config, SeededRandomProvider(seed=12))

    assert len(enhanced) == len(records)
    for before, after in zip(records, enhanced):
        assert (after.step, after.value, after.regime) == (before.step, before.value, before.regime)
        assert config.min_value <= after.enhanced_value <= config.max_value * 2
        assert after.enhancement_delta is not None
    assert all(not r.is_enhanced for r in records)


def test_enhance_empty_sequence():
    """Test that an empty sequence passes through unchanged."""
    assert enhance([], CONFIG, ReplayRandomProvider([], [], cycle=False)) == []


def test_enhance_is_deterministic_with_injected_provider():
    """Test that enhancement is reproducible with a seeded provider."""
    records = generate(50, CONFIG, SeededRandomProvider(seed=1))
    e1 = enhance(records, CONFIG, SeededRandomProvider(seed=2))
    e2 = enhance(records, CONFIG, SeededRandomProvider(seed=2))
    assert [r.model_dump() for r in e1] == [r.model_dump() for r in e2]
