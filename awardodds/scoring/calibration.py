"""Odds calibration: raw propensities to bounded percentages.

Both functions are fail-soft: missing, non-numeric, NaN or infinite
inputs coerce to 0 (the nominee scale falls back to 1) and the output is
always clamped into [min_odds, max_odds].

Win odds are conditioned on nomination odds: the raw share of the category
is blended with the calibrated nomination percentage weighted by the
category's base win rate, so categories with historically concentrated
winners can diverge from categories with more parity.
"""

from __future__ import annotations

from typing import Any

from awardodds.shared.numeric import clamp, to_float

DEFAULT_NOMINATION_UPLIFT = 1.14
DEFAULT_NOMINATION_MIN = 0.6
DEFAULT_NOMINATION_MAX = 99.0
DEFAULT_WINNER_UPLIFT = 1.2
DEFAULT_WINNER_MIN = 0.4
DEFAULT_WINNER_MAX = 92.0


def _share_pct(raw: Any, category_raw_total: Any) -> float:
    total = max(to_float(category_raw_total), 1.0)
    return to_float(raw) / total * 100.0


def nomination_odds(
    raw: Any,
    category_raw_total: Any,
    nominee_scale: Any,
    uplift: float = DEFAULT_NOMINATION_UPLIFT,
    min_odds: float = DEFAULT_NOMINATION_MIN,
    max_odds: float = DEFAULT_NOMINATION_MAX,
) -> float:
    """Nomination percentage for one candidate.

    nominee_scale = nominee_slots / candidate_count, so in aggregate roughly
    nominee_slots candidates land near 100%.

    Example:
        # raw 0.4 of a total 1.0, half the field gets nominated
        nomination_odds(0.4, 1.0, 0.5)
        # 0.4 * 100 * 0.5 * 1.14 = 22.8
    """
    scale = to_float(nominee_scale) or 1.0
    return clamp(_share_pct(raw, category_raw_total) * scale * to_float(uplift), min_odds, max_odds)


def winner_odds(
    raw: Any,
    category_raw_total: Any,
    nomination: Any,
    winner_base: Any,
    uplift: float = DEFAULT_WINNER_UPLIFT,
    min_odds: float = DEFAULT_WINNER_MIN,
    max_odds: float = DEFAULT_WINNER_MAX,
) -> float:
    """Winner percentage for one candidate.

    blended = (share_pct + nomination * winner_base) / (1 + winner_base)
    """
    base = to_float(winner_base)
    denominator = (1.0 + base) or 1.0
    blended = (_share_pct(raw, category_raw_total) + to_float(nomination) * base) / denominator
    return clamp(blended * to_float(uplift), min_odds, max_odds)


__all__ = [
    "DEFAULT_NOMINATION_UPLIFT",
    "DEFAULT_NOMINATION_MIN",
    "DEFAULT_NOMINATION_MAX",
    "DEFAULT_WINNER_UPLIFT",
    "DEFAULT_WINNER_MIN",
    "DEFAULT_WINNER_MAX",
    "nomination_odds",
    "winner_odds",
]
