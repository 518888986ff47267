"""Engine hyperparameters and calibration bands.

All odds-related constants live here so the projection builder, the
backtest and any presentation layer agree on:
1. Percentage uplifts and per-candidate bounds for nomination/winner odds
2. Rebalancing bands for the displayed slice of a category
3. Signal adjustment constants for external snapshots
4. Default session weights

Changing these values changes the percentages users see and the backtest
numbers. Re-run the backtest after any change.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class CalibrationParams(BaseModel):
    """Uplifts and bounds for converting propensities into percentages."""

    nomination_uplift: float = Field(
        default=1.14,
        gt=0,
        le=5,
        description="Multiplier on the nomination share-of-category percentage.",
    )
    nomination_min: float = Field(
        default=0.6,
        ge=0,
        le=100,
        description="Lowest nomination percentage a candidate can be shown.",
    )
    nomination_max: float = Field(
        default=99.0,
        ge=0,
        le=100,
        description="Highest nomination percentage a candidate can be shown.",
    )
    winner_uplift: float = Field(
        default=1.2,
        gt=0,
        le=5,
        description="Multiplier on the blended winner percentage.",
    )
    winner_min: float = Field(
        default=0.4,
        ge=0,
        le=100,
        description="Lowest winner percentage a candidate can be shown.",
    )
    winner_max: float = Field(
        default=92.0,
        ge=0,
        le=100,
        description="Highest winner percentage a candidate can be shown.",
    )


class RebalanceBand(BaseModel):
    """Target band for the sum of one field across a category.

    min_total/max_total/target_total apply to the sum; min_value/max_value
    apply to each entry. target_total is clamped into the total range before
    use, so it may sit outside it.
    """

    min_total: float
    max_total: float
    target_total: float
    min_value: float
    max_value: float

    @model_validator(mode="after")
    def _check_ranges(self) -> "RebalanceBand":
        if self.min_total > self.max_total:
            raise ValueError("min_total must be <= max_total")
        if self.min_value > self.max_value:
            raise ValueError("min_value must be <= max_value")
        return self

    def is_feasible(self, n: int) -> bool:
        """Whether n entries within [min_value, max_value] can sum into the band."""
        if n <= 0:
            return False
        return self.min_value * n <= self.max_total and self.max_value * n >= self.min_total


class RebalanceParams(BaseModel):
    """Bands applied to the displayed slice of a live category."""

    nomination_band: RebalanceBand = Field(
        default_factory=lambda: RebalanceBand(
            min_total=90, max_total=95, target_total=93, min_value=0.6, max_value=50
        )
    )
    winner_band: RebalanceBand = Field(
        default_factory=lambda: RebalanceBand(
            min_total=30, max_total=45, target_total=38, min_value=0.4, max_value=24
        )
    )
    winner_to_nomination_cap: float = Field(
        default=0.5,
        gt=0,
        le=1,
        description="A candidate's winner percentage never exceeds this fraction of its nomination percentage.",
    )


class SignalParams(BaseModel):
    """Constants for folding external aggregate scores into features.

    Adjustments:
        precursor += round((combined - precursor_pivot) * precursor_scale)
        history   += round((letterboxd + thegamer - history_pivot) * history_scale)
        buzz      += round((reddit + thegamer - buzz_pivot) * buzz_scale)
    """

    precursor_pivot: float = 0.35
    precursor_scale: float = 10.0
    history_pivot: float = 0.55
    history_scale: float = 8.0
    buzz_pivot: float = 0.5
    buzz_scale: float = 10.0
    high_combined: float = Field(default=0.7, ge=0, le=1)
    high_reddit: float = Field(default=0.75, ge=0, le=1)
    medium_combined: float = Field(default=0.45, ge=0, le=1)


class WeightParams(BaseModel):
    """Default raw session weights (normalized by simple division)."""

    precursor: float = Field(default=58, ge=0)
    history: float = Field(default=30, ge=0)
    buzz: float = Field(default=12, ge=0)


class EngineParams(BaseModel):
    """Master configuration for the odds engine."""

    calibration: CalibrationParams = Field(default_factory=CalibrationParams)
    rebalance: RebalanceParams = Field(default_factory=RebalanceParams)
    signals: SignalParams = Field(default_factory=SignalParams)
    weights: WeightParams = Field(default_factory=WeightParams)


# Default instance for easy import
DEFAULT_ENGINE_PARAMS = EngineParams()


def get_engine_params() -> EngineParams:
    """Get the engine parameters in effect."""
    return DEFAULT_ENGINE_PARAMS


__all__ = [
    "CalibrationParams",
    "RebalanceBand",
    "RebalanceParams",
    "SignalParams",
    "WeightParams",
    "EngineParams",
    "DEFAULT_ENGINE_PARAMS",
    "get_engine_params",
]
