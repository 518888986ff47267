"""Scoring kernels: interchangeable implementations of the scoring core.

Two implementations share one numeric contract (scorer.score_features):

- PythonKernel: managed path, one score() call per candidate. Always ready.
- VectorKernel: numpy path that scores a whole category in one pass.
  It must be initialize()d before use.

The experience multiplier needs string lookups into ExperienceConfig, so
both kernels compute it host-side through scorer.experience_multiplier and
only the arithmetic differs. Outputs agree within floating-point tolerance
(np.exp vs math.exp).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Type

import numpy as np

from awardodds.model.types import Candidate, ExperienceConfig, NormalizedWeights, ScoreResult
from awardodds.scoring.scorer import (
    COMPOSITE_MEAN,
    COMPOSITE_SPREAD,
    WINNER_PRECURSOR_BASE,
    WINNER_PRECURSOR_DIVISOR,
    experience_multiplier,
    score,
    strength_multiplier,
)
from awardodds.shared.numeric import to_float


class KernelNotInitializedError(RuntimeError):
    """Raised when a kernel is used before initialize() completed."""

    pass


class ScoringKernel(ABC):
    """Abstract base class for scoring implementations.

    Example:
        kernel = get_kernel("vector")
        kernel.initialize()
        results = kernel.score_batch("actor", candidates, weights)
    """

    name: str = "abstract"

    def initialize(self) -> None:
        """Prepare the kernel. Default implementation has nothing to do."""
        return None

    @property
    def is_ready(self) -> bool:
        return True

    @abstractmethod
    def score_batch(
        self,
        category_id: str,
        candidates: Sequence[Candidate],
        weights: NormalizedWeights,
        experience: Optional[ExperienceConfig] = None,
    ) -> List[ScoreResult]:
        """Score every candidate of one category, preserving order."""
        pass


class PythonKernel(ScoringKernel):
    name = "python"

    def score_batch(
        self,
        category_id: str,
        candidates: Sequence[Candidate],
        weights: NormalizedWeights,
        experience: Optional[ExperienceConfig] = None,
    ) -> List[ScoreResult]:
        return [score(category_id, c, weights, experience) for c in candidates]


class VectorKernel(ScoringKernel):
    name = "vector"

    def __init__(self) -> None:
        self._ready = False

    def initialize(self) -> None:
        self._ready = True

    @property
    def is_ready(self) -> bool:
        return self._ready

    def score_batch(
        self,
        category_id: str,
        candidates: Sequence[Candidate],
        weights: NormalizedWeights,
        experience: Optional[ExperienceConfig] = None,
    ) -> List[ScoreResult]:
        if not self._ready:
            raise KernelNotInitializedError("vector kernel not initialized; call initialize() first")
        if not candidates:
            return []

        precursor = np.array([to_float(c.precursor) for c in candidates], dtype=np.float64)
        history = np.array([to_float(c.history) for c in candidates], dtype=np.float64)
        buzz = np.array([to_float(c.buzz) for c in candidates], dtype=np.float64)
        strength_mult = np.array([strength_multiplier(c.strength) for c in candidates], dtype=np.float64)
        experience_mult = np.array(
            [experience_multiplier(category_id, c.title, experience) for c in candidates],
            dtype=np.float64,
        )

        precursor_contribution = precursor * to_float(weights.precursor)
        history_contribution = history * to_float(weights.history)
        buzz_contribution = buzz * to_float(weights.buzz)
        linear = precursor_contribution + history_contribution + buzz_contribution

        centered = (linear - COMPOSITE_MEAN) / COMPOSITE_SPREAD
        with np.errstate(over="ignore"):
            nomination_raw = (1.0 / (1.0 + np.exp(-centered))) * strength_mult
        winner_raw = nomination_raw * (WINNER_PRECURSOR_BASE + precursor / WINNER_PRECURSOR_DIVISOR) * experience_mult

        return [
            ScoreResult(
                nomination_raw=float(nomination_raw[i]),
                winner_raw=float(winner_raw[i]),
                precursor_contribution=float(precursor_contribution[i]),
                history_contribution=float(history_contribution[i]),
                buzz_contribution=float(buzz_contribution[i]),
                strength_multiplier=float(strength_mult[i]),
                experience_multiplier=float(experience_mult[i]),
            )
            for i in range(len(candidates))
        ]


KERNELS: Dict[str, Type[ScoringKernel]] = {
    PythonKernel.name: PythonKernel,
    VectorKernel.name: VectorKernel,
}


def get_kernel(name: str = "python") -> ScoringKernel:
    """Instantiate a kernel by name. The caller initializes it."""
    try:
        return KERNELS[name]()
    except KeyError:
        raise ValueError(f"unknown scoring kernel {name!r}; expected one of {sorted(KERNELS)}") from None


__all__ = [
    "KernelNotInitializedError",
    "ScoringKernel",
    "PythonKernel",
    "VectorKernel",
    "KERNELS",
    "get_kernel",
]
