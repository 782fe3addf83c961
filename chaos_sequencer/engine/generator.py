"""Serial sequence generation.

Each value depends on the previous one or two, so the loop is strictly
sequential. The running mean is private to the loop and discarded afterward.
"""

import structlog

from chaos_sequencer.config.schema import GeneratorConfig
from chaos_sequencer.data.interfaces import RandomProvider
from chaos_sequencer.errors import InvalidArgumentError
from chaos_sequencer.model.dynamics import ChaoticRegimeModel
from chaos_sequencer.model.interfaces import DynamicsModel
from chaos_sequencer.model.records import StepRecord
from chaos_sequencer.model.regimes import Regime


logger = structlog.get_logger()


def generate(
    n: int,
    config: GeneratorConfig,
    provider: RandomProvider,
    model: DynamicsModel | None = None,
) -> list[StepRecord]:
    """Generate a chaotic sequence of n steps.

    Args:
        n: Number of steps (must be >= 2)
        config: Validated generator configuration
        provider: Source of uniform draws
        model: Step model; defaults to ChaoticRegimeModel over config

    Returns:
        List of n StepRecords with steps 0..n-1

    Raises:
        InvalidArgumentError: If n <= 0 or n == 1
    """
    if n <= 0:
        raise InvalidArgumentError("the number of steps must be a positive integer")
    if n < 2:
        raise InvalidArgumentError(
            "sequence length must be at least 2 for proper chaotic behavior"
        )

    if model is None:
        model = ChaoticRegimeModel(config)

    values = [0] * n
    values[0] = model.initial_value(provider)
    values[1] = model.random_walk(values[0], provider)

    records = [
        StepRecord(step=0, value=values[0], regime=Regime.INITIAL),
        StepRecord(step=1, value=values[1], regime=Regime.RANDOM_WALK),
    ]

    running_mean = (values[0] + values[1]) / 2.0

    for i in range(2, n):
        outcome = model.next_value(values[i - 1], values[i - 2], running_mean, provider)
        values[i] = outcome.value
        running_mean = (running_mean * i + outcome.value) / (i + 1)
        records.append(StepRecord(step=i, value=outcome.value, regime=outcome.regime))

    logger.debug(
        "sequence_generated",
        steps=n,
        first=values[0],
        last=values[-1],
        min_value=config.min_value,
        max_value=config.max_value,
    )
    return records
