"""Pydantic configuration schemas.

Defines validated data structures for the generator and for a full run.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GeneratorConfig(BaseModel):
    """Configuration for chaotic sequence generation.

    Immutable once built, so a run cannot change it mid-generation.

    Attributes:
        volatility: How strongly the chaos factor rescales each candidate
        trend_strength: Weight of the last move in the trend-following regime
        mean_reversion: Pull toward the running mean in the reversion regime
        min_value: Inclusive lower bound of generated values
        max_value: Inclusive upper bound of generated values
    """

    model_config = ConfigDict(frozen=True)

    volatility: float = Field(default=0.7, ge=0, le=1, description="Chaos scaling (0..1)")
    trend_strength: float = Field(default=0.3, ge=0, le=1, description="Trend following weight (0..1)")
    mean_reversion: float = Field(default=0.2, ge=0, le=1, description="Mean reversion weight (0..1)")
    min_value: int = Field(default=1, description="Inclusive lower bound")
    max_value: int = Field(default=1000, description="Inclusive upper bound")

    @model_validator(mode="after")
    def validate_range(self):
        """Reject degenerate value ranges."""
        if self.min_value >= self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must be less than "
                f"max_value ({self.max_value})"
            )
        return self

    @property
    def enhanced_max(self) -> int:
        """Upper bound of enhanced values, twice the base upper bound."""
        return self.max_value * 2


class RunDefaults(BaseModel):
    """Default run parameters, overridable from the command line.

    Attributes:
        steps: Sequence length
        provider: Name of the random provider
        seed: Seed for seeded providers
        enhanced: Whether to run the enhancement pass
        sample: Number of leading records echoed to the console
    """

    steps: int = Field(default=50, ge=2, description="Sequence length (must be >= 2)")
    provider: Literal["secure", "seeded"] = Field(default="secure")
    seed: int | None = Field(default=None)
    enhanced: bool = Field(default=True)
    sample: int = Field(default=10, ge=0)


class RunConfig(BaseModel):
    """Top-level run configuration.

    Attributes:
        generator: Generator parameters
        defaults: Default run parameters
    """

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    defaults: RunDefaults = Field(default_factory=RunDefaults)
