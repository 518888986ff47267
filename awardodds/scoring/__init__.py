"""Scoring pipeline: propensities, calibration, rebalancing and projections.

This package contains:
- Per-candidate scoring (scorer) and interchangeable kernels
- Odds calibration against category totals
- Band rebalancing of a category's displayed slice
- The projection builder that chains them for one live category
"""

from __future__ import annotations

from awardodds.scoring.calibration import nomination_odds, winner_odds
from awardodds.scoring.kernels import KernelNotInitializedError, PythonKernel, ScoringKernel, VectorKernel, get_kernel
from awardodds.scoring.projection import build_projections
from awardodds.scoring.rebalance import rebalance_category, rebalance_field_total
from awardodds.scoring.scorer import experience_multiplier, score, strength_multiplier

__all__ = [
    "score",
    "strength_multiplier",
    "experience_multiplier",
    "nomination_odds",
    "winner_odds",
    "rebalance_field_total",
    "rebalance_category",
    "build_projections",
    "ScoringKernel",
    "PythonKernel",
    "VectorKernel",
    "KernelNotInitializedError",
    "get_kernel",
]
