"""Pure sequence pipeline.

Chains generation, the optional enhancement pass and statistics. The pipeline
is deterministic given a deterministic provider, dependency-injected, and
agnostic to I/O operations.
"""

from datetime import datetime, timezone

import pandas as pd
import structlog
from pydantic import BaseModel, ConfigDict, Field

from chaos_sequencer.config.schema import GeneratorConfig
from chaos_sequencer.data.interfaces import RandomProvider
from chaos_sequencer.engine.enhance import enhance
from chaos_sequencer.engine.generator import generate
from chaos_sequencer.engine.metrics import SequenceStatistics, summarize
from chaos_sequencer.model.interfaces import DynamicsModel
from chaos_sequencer.model.records import StepRecord


logger = structlog.get_logger()

RECORD_COLUMNS = ["step", "value", "regime", "enhanced_value", "enhancement_delta"]


class SequenceRun(BaseModel):
    """Container for a finished run.

    Attributes:
        config: Generator configuration used for the run
        records: Generated records, enhanced when the pass ran
        statistics: Statistics over the generated values
        enhanced: Whether the enhancement pass ran
        generated_at: UTC timestamp of the run
    """

    model_config = ConfigDict(frozen=True)

    config: GeneratorConfig
    records: list[StepRecord]
    statistics: SequenceStatistics
    enhanced: bool = True
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_frame(self) -> pd.DataFrame:
        """Tabulate the records, one row per step."""
        df = pd.DataFrame(
            [record.model_dump() for record in self.records],
            columns=RECORD_COLUMNS,
        )
        if not self.enhanced:
            df = df.drop(columns=["enhanced_value", "enhancement_delta"])
        return df

    def to_dict(self) -> dict:
        """Render the run as a JSON-ready mapping."""
        return {
            "metadata": {
                "generated_at": self.generated_at.isoformat(),
                "config": self.config.model_dump(),
                "sequence_length": len(self.records),
            },
            "statistics": self.statistics.to_dict(),
            "sequence": [record.to_dict() for record in self.records],
        }


def run_sequence(
    n: int,
    config: GeneratorConfig,
    provider: RandomProvider,
    enhanced: bool = True,
    model: DynamicsModel | None = None,
) -> SequenceRun:
    """Generate, optionally enhance, and summarize a sequence.

    This is the pure core of the tool: no I/O, dependency-injected provider
    and model.

    Args:
        n: Number of steps (must be >= 2)
        config: Validated generator configuration
        provider: Source of uniform draws
        enhanced: Run the enhancement pass after generation
        model: Step model; defaults to ChaoticRegimeModel

    Returns:
        SequenceRun with records and statistics

    Raises:
        InvalidArgumentError: If n < 2
    """
    records = generate(n, config, provider, model=model)
    if enhanced:
        records = enhance(records, config, provider)

    statistics = summarize(records)
    logger.info(
        "sequence_run_complete",
        steps=len(records),
        enhanced=enhanced,
        mean=round(statistics.mean, 2),
        trend_strength=round(statistics.trend_strength, 2),
    )
    return SequenceRun(
        config=config,
        records=records,
        statistics=statistics,
        enhanced=enhanced,
    )
