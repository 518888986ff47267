"""Per-candidate propensity scoring.

Turns a candidate's three features, strength tier and (for person
categories) track record into two unnormalized, strictly positive
propensities:

    linear     = precursor*w_p + history*w_h + buzz*w_b
    centered   = (linear - 55) / 12
    nomination = sigmoid(centered) * strength_multiplier
    winner     = nomination * (0.6 + precursor/190) * experience_multiplier

55 is the assumed population-average composite and 12 its spread, so
typical composites land within about +/-2 standard units.
"""

from __future__ import annotations

from typing import Optional

from awardodds.model.catalog import is_person_category
from awardodds.model.records import sanitize_strength
from awardodds.model.types import Candidate, ExperienceConfig, NormalizedWeights, ScoreResult
from awardodds.shared.enums import Strength
from awardodds.shared.numeric import clamp, sigmoid, to_float


COMPOSITE_MEAN = 55.0
COMPOSITE_SPREAD = 12.0

WINNER_PRECURSOR_BASE = 0.6
WINNER_PRECURSOR_DIVISOR = 190.0

STRENGTH_MULTIPLIERS = {
    Strength.HIGH: 1.06,
    Strength.MEDIUM: 1.0,
    Strength.LOW: 0.94,
}

# Track-record adjustments (person categories only)
FIRST_TIMER_BONUS = 0.06
REPEAT_WINNER_BASE_PENALTY = 0.08
REPEAT_WINNER_PER_WIN_PENALTY = 0.03
REPEAT_WINNER_MAX_COUNTED = 3
RECENT_WINNER_PENALTY = 0.12
OVERDUE_BONUS = 0.08
EXPERIENCE_MIN = 0.55
EXPERIENCE_MAX = 1.15


def strength_multiplier(strength: Strength) -> float:
    """High +6%, Medium neutral, Low -6%. Unknown tiers count as Low."""
    return STRENGTH_MULTIPLIERS[sanitize_strength(strength)]


def experience_multiplier(
    category_id: str,
    contender_name: str,
    experience: Optional[ExperienceConfig] = None,
) -> float:
    """Winner multiplier from a contender's track record in the category.

    Film categories always return 1.0. For person categories first-timers get
    a bonus, repeat winners a penalty growing with wins (capped at 3), very
    recent winners a steeper separate penalty, and overdue contenders a boost.
    Result is clamped to [0.55, 1.15].
    """
    if not is_person_category(category_id):
        return 1.0

    config = experience or ExperienceConfig()
    wins = to_float(config.prior_wins(category_id, contender_name))
    recent_level = to_float(config.recent_penalty_level(category_id, contender_name))

    boost = 1.0
    if wins == 0:
        boost += FIRST_TIMER_BONUS
    else:
        boost -= REPEAT_WINNER_BASE_PENALTY + min(wins, REPEAT_WINNER_MAX_COUNTED) * REPEAT_WINNER_PER_WIN_PENALTY

    if recent_level > 0:
        boost -= RECENT_WINNER_PENALTY * recent_level
    if config.is_overdue(category_id, contender_name):
        boost += OVERDUE_BONUS
    return clamp(boost, EXPERIENCE_MIN, EXPERIENCE_MAX)


def score_features(
    precursor: float,
    history: float,
    buzz: float,
    weights: NormalizedWeights,
    strength_mult: float,
    experience_mult: float,
) -> ScoreResult:
    """Scoring core over plain numbers; kernels must reproduce this exactly."""
    precursor_contribution = precursor * to_float(weights.precursor)
    history_contribution = history * to_float(weights.history)
    buzz_contribution = buzz * to_float(weights.buzz)
    linear = precursor_contribution + history_contribution + buzz_contribution

    centered = (linear - COMPOSITE_MEAN) / COMPOSITE_SPREAD
    nomination_raw = sigmoid(centered) * strength_mult
    winner_raw = nomination_raw * (WINNER_PRECURSOR_BASE + precursor / WINNER_PRECURSOR_DIVISOR) * experience_mult

    return ScoreResult(
        nomination_raw=nomination_raw,
        winner_raw=winner_raw,
        precursor_contribution=precursor_contribution,
        history_contribution=history_contribution,
        buzz_contribution=buzz_contribution,
        strength_multiplier=strength_mult,
        experience_multiplier=experience_mult,
    )


def score(
    category_id: str,
    candidate: Candidate,
    weights: NormalizedWeights,
    experience: Optional[ExperienceConfig] = None,
) -> ScoreResult:
    """Score one candidate. Pure: no state is read or written outside the args.

    Args:
        category_id: Category the candidate competes in
        candidate: Candidate with features in [0, 100]
        weights: Unit-sum feature weights
        experience: Optional track-record tables (person categories only)

    Returns:
        ScoreResult with both raw propensities and their breakdown
    """
    return score_features(
        to_float(candidate.precursor),
        to_float(candidate.history),
        to_float(candidate.buzz),
        weights,
        strength_multiplier(candidate.strength),
        experience_multiplier(category_id, candidate.title, experience),
    )


__all__ = [
    "COMPOSITE_MEAN",
    "COMPOSITE_SPREAD",
    "STRENGTH_MULTIPLIERS",
    "strength_multiplier",
    "experience_multiplier",
    "score_features",
    "score",
]
