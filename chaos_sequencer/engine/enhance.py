"""Post-hoc enhancement pass.

Each record is transformed independently from its own value and step index;
no record sees another record's enhanced value. The first matching rule wins:

    value % 11 == 0  ->  value*3 +/- 20      (major)
    value % 7  == 0  ->  value*2 +/- 10
    value % 5  == 0  ->  value/2 +/- 5
    step  % 13 == 0  ->  value   +/- 50      (periodic disruption)
    chaos < 0.1      ->  value   +/- 100     (random major event)
    otherwise        ->  value   +/- 10

Enhanced values are clamped to [min_value, 2*max_value], a wider band than the
generated values since enhancement amplifies rather than adds noise.
"""

import structlog

from chaos_sequencer.config.schema import GeneratorConfig
from chaos_sequencer.data.interfaces import RandomProvider
from chaos_sequencer.model.dynamics import clamp, trunc_div
from chaos_sequencer.model.records import StepRecord


logger = structlog.get_logger()

RANDOM_EVENT_PROBABILITY = 0.1
PERIODIC_DISRUPTION_EVERY = 13


def enhancement_candidate(value: int, step: int, provider: RandomProvider) -> int:
    """Compute the raw (unclamped) enhanced value for one step.

    The chaos draw is taken before the rules are checked, so every step
    consumes exactly one float draw whichever rule fires.

    Args:
        value: Generated value
        step: Step index
        provider: Source of uniform draws

    Returns:
        Enhancement candidate before clamping
    """
    chaos = provider.uniform_float()

    if value % 11 == 0:
        return value * 3 + provider.uniform_int(41) - 20
    if value % 7 == 0:
        return value * 2 + provider.uniform_int(21) - 10
    if value % 5 == 0:
        return trunc_div(value, 2) + provider.uniform_int(11) - 5
    if step % PERIODIC_DISRUPTION_EVERY == 0:
        return value + provider.uniform_int(101) - 50
    if chaos < RANDOM_EVENT_PROBABILITY:
        return value + provider.uniform_int(201) - 100
    return value + provider.uniform_int(21) - 10


def enhance(
    records: list[StepRecord],
    config: GeneratorConfig,
    provider: RandomProvider,
) -> list[StepRecord]:
    """Populate enhanced_value and enhancement_delta on every record.

    step, value and regime are carried over unchanged. enhancement_delta is
    the raw candidate minus the value, taken before the clamp.

    Args:
        records: Generated records
        config: Generator configuration the records were produced with
        provider: Source of uniform draws

    Returns:
        New list of enhanced records, same length and order
    """
    enhanced = []
    for record in records:
        candidate = enhancement_candidate(record.value, record.step, provider)
        enhanced.append(
            record.model_copy(
                update={
                    "enhanced_value": clamp(candidate, config.min_value, config.enhanced_max),
                    "enhancement_delta": candidate - record.value,
                }
            )
        )

    logger.debug("sequence_enhanced", steps=len(enhanced))
    return enhanced
