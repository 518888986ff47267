"""Projection builder for one live category.

Runs the full live pipeline: score every candidate, calibrate nomination and
winner odds against the category totals, order by winner odds, and
rebalance the displayed slice (top 10 for Best Picture, top 5 elsewhere)
into the configured bands. Candidates below the display limit keep their
calibrated but unrebalanced odds.
"""

from __future__ import annotations

from typing import List, Optional

from awardodds.config.params import EngineParams, get_engine_params
from awardodds.model.catalog import display_limit, display_title
from awardodds.model.types import Category, ExperienceConfig, NormalizedWeights, Projection
from awardodds.scoring.calibration import nomination_odds, winner_odds
from awardodds.scoring.kernels import PythonKernel, ScoringKernel
from awardodds.scoring.rebalance import rebalance_category


def build_projections(
    category: Category,
    weights: NormalizedWeights,
    experience: Optional[ExperienceConfig] = None,
    *,
    kernel: Optional[ScoringKernel] = None,
    params: Optional[EngineParams] = None,
) -> List[Projection]:
    """Calibrated, rebalanced odds for every candidate of a category.

    Args:
        category: Category with its candidates
        weights: Unit-sum feature weights
        experience: Optional track-record tables
        kernel: Scoring implementation (managed Python by default)
        params: Engine parameters (defaults from config.params)

    Returns:
        Projections ordered by winner odds, displayed slice first
    """
    p = params or get_engine_params()
    k = kernel or PythonKernel()
    candidates = category.candidates
    if not candidates:
        return []

    scores = k.score_batch(category.id, candidates, weights, experience)

    nomination_total = sum(s.nomination_raw for s in scores) or 1.0
    winner_total = sum(s.winner_raw for s in scores) or 1.0
    nominee_scale = category.nominees / max(1, len(candidates))
    cal = p.calibration

    projections: List[Projection] = []
    for index, (candidate, result) in enumerate(zip(candidates, scores)):
        nomination = nomination_odds(
            result.nomination_raw,
            nomination_total,
            nominee_scale,
            uplift=cal.nomination_uplift,
            min_odds=cal.nomination_min,
            max_odds=cal.nomination_max,
        )
        winner = winner_odds(
            result.winner_raw,
            winner_total,
            nomination,
            category.winner_base,
            uplift=cal.winner_uplift,
            min_odds=cal.winner_min,
            max_odds=cal.winner_max,
        )
        projections.append(
            Projection(
                index=index,
                category_id=category.id,
                raw_title=candidate.title,
                raw_studio=candidate.studio,
                title=display_title(category.id, candidate.title, candidate.studio),
                nomination=nomination,
                winner=winner,
                precursor_contribution=result.precursor_contribution,
                history_contribution=result.history_contribution,
                buzz_contribution=result.buzz_contribution,
                strength_multiplier=result.strength_multiplier,
                experience_multiplier=result.experience_multiplier,
            )
        )

    projections.sort(key=lambda proj: proj.winner, reverse=True)

    limit = display_limit(category.id)
    shown = projections[:limit]
    rebalance_category(shown, p.rebalance)
    return shown + projections[limit:]


__all__ = ["build_projections"]
