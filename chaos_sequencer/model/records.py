"""Per-step records emitted by the generator."""

from pydantic import BaseModel, ConfigDict

from chaos_sequencer.model.regimes import Regime


class StepRecord(BaseModel):
    """One position of a generated sequence.

    Attributes:
        step: Zero-based index in the sequence
        value: Generated value, always within [min_value, max_value]
        regime: Rule that produced the value
        enhanced_value: Value after the enhancement pass, if it ran
        enhancement_delta: Raw enhancement candidate minus value, if it ran
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    step: int
    value: int
    regime: Regime
    enhanced_value: int | None = None
    enhancement_delta: int | None = None

    @property
    def is_enhanced(self) -> bool:
        return self.enhanced_value is not None

    def to_dict(self) -> dict:
        """Render with fixed field names, omitting absent enhancement fields."""
        return self.model_dump(exclude_none=True)
