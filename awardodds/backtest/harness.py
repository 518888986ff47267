"""Backtest the odds engine against labeled historical ceremonies.

For every (year, category) in the fixture the harness:
1. Scores every contender (no experience tables; track record is a live
   session feature, not part of the replay)
2. Calibrates nomination and winner odds with the category's own historical
   nominee count and base win rate
3. Evaluates:
   - nomination accuracy: |top-N by nomination odds ∩ nominated| / N
   - winner correctness: does the top winner-odds contender carry `winner`
   - Brier scores: mean (odds/100 - outcome)^2 over all contenders

Rows are aggregated overall and per category. Results are deterministic for
a given fixture and weights (apart from computed_at).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from awardodds.config.params import CalibrationParams, get_engine_params
from awardodds.backtest.fixtures import HistoricalYear, HistoryFixture, default_history
from awardodds.model.types import NormalizedWeights
from awardodds.scoring.calibration import nomination_odds, winner_odds
from awardodds.scoring.kernels import PythonKernel, ScoringKernel
from awardodds.shared.enums import CategoryId

logger = logging.getLogger(__name__)

BACKTEST_CATEGORIES: List[str] = [c.value for c in CategoryId]


@dataclass
class CategoryYearResult:
    """Evaluation of one category in one ceremony."""

    year: int
    ceremony: int
    category_id: str
    nomination_accuracy: float
    winner_correct: bool
    nomination_brier_score: float
    winner_brier_score: float
    top_predicted: str
    actual_winner: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "ceremony": self.ceremony,
            "category_id": self.category_id,
            "nomination_accuracy": self.nomination_accuracy,
            "winner_correct": self.winner_correct,
            "nomination_brier_score": self.nomination_brier_score,
            "winner_brier_score": self.winner_brier_score,
            "top_predicted": self.top_predicted,
            "actual_winner": self.actual_winner,
        }


@dataclass
class SummaryMetrics:
    nomination_accuracy_avg: float = 0.0
    winner_accuracy_pct: float = 0.0  # 0-100
    nomination_brier_avg: float = 0.0
    winner_brier_avg: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "nomination_accuracy_avg": self.nomination_accuracy_avg,
            "winner_accuracy_pct": self.winner_accuracy_pct,
            "nomination_brier_avg": self.nomination_brier_avg,
            "winner_brier_avg": self.winner_brier_avg,
        }


@dataclass
class CategorySummary:
    category_id: str
    metrics: SummaryMetrics

    def to_dict(self) -> Dict[str, Any]:
        return {"category_id": self.category_id, **self.metrics.to_dict()}


@dataclass
class BacktestResult:
    """Aggregated backtest output, JSON-ready through to_dict()."""

    weights: NormalizedWeights
    years_backtested: int
    year_range: Dict[str, int]
    overall: SummaryMetrics
    by_category: List[CategorySummary] = field(default_factory=list)
    by_year: List[CategoryYearResult] = field(default_factory=list)
    computed_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "computed_at": self.computed_at,
            "years_backtested": self.years_backtested,
            "year_range": dict(self.year_range),
            "weights": self.weights.to_dict(),
            "overall": self.overall.to_dict(),
            "by_category": [c.to_dict() for c in self.by_category],
            "by_year": [r.to_dict() for r in self.by_year],
        }


def _mean(values: List[float]) -> float:
    return sum(values) / (len(values) or 1)


def summarize(rows: List[CategoryYearResult]) -> SummaryMetrics:
    """Simple means over rows; winner accuracy as a percentage."""
    return SummaryMetrics(
        nomination_accuracy_avg=_mean([r.nomination_accuracy for r in rows]),
        winner_accuracy_pct=sum(1 for r in rows if r.winner_correct) / (len(rows) or 1) * 100.0,
        nomination_brier_avg=_mean([r.nomination_brier_score for r in rows]),
        winner_brier_avg=_mean([r.winner_brier_score for r in rows]),
    )


def score_category_year(
    year: HistoricalYear,
    category_id: str,
    weights: NormalizedWeights,
    kernel: Optional[ScoringKernel] = None,
    calibration: Optional[CalibrationParams] = None,
) -> Optional[CategoryYearResult]:
    """Evaluate one category of one ceremony, or None if it has no contenders."""
    hist = year.categories.get(category_id)
    if hist is None or not hist.contenders:
        return None

    k = kernel or PythonKernel()
    cal = calibration or get_engine_params().calibration
    contenders = hist.contenders
    scores = k.score_batch(category_id, [c.to_candidate() for c in contenders], weights)

    nomination_total = sum(s.nomination_raw for s in scores) or 1.0
    winner_total = sum(s.winner_raw for s in scores) or 1.0
    nominee_scale = hist.nominees / max(1, len(contenders))

    odds = []
    for contender, result in zip(contenders, scores):
        nom = nomination_odds(
            result.nomination_raw,
            nomination_total,
            nominee_scale,
            uplift=cal.nomination_uplift,
            min_odds=cal.nomination_min,
            max_odds=cal.nomination_max,
        )
        win = winner_odds(
            result.winner_raw,
            winner_total,
            nom,
            hist.winner_base,
            uplift=cal.winner_uplift,
            min_odds=cal.winner_min,
            max_odds=cal.winner_max,
        )
        odds.append((contender, nom, win))

    # Stable sorts: ties keep fixture order.
    by_nomination = sorted(odds, key=lambda o: o[1], reverse=True)
    top_n = {c.title for c, _, _ in by_nomination[: hist.nominees]}
    actual_nominees = {c.title for c in contenders if c.nominated}
    correct = len(top_n & actual_nominees)
    nomination_accuracy = correct / hist.nominees if hist.nominees > 0 else 0.0

    top_contender = sorted(odds, key=lambda o: o[2], reverse=True)[0][0]
    actual_winner = next((c.title for c in contenders if c.winner), "")

    n = len(odds)
    nomination_brier = sum((nom / 100.0 - (1.0 if c.nominated else 0.0)) ** 2 for c, nom, _ in odds) / n
    winner_brier = sum((win / 100.0 - (1.0 if c.winner else 0.0)) ** 2 for c, _, win in odds) / n

    return CategoryYearResult(
        year=year.year,
        ceremony=year.ceremony,
        category_id=category_id,
        nomination_accuracy=nomination_accuracy,
        winner_correct=bool(top_contender.winner),
        nomination_brier_score=nomination_brier,
        winner_brier_score=winner_brier,
        top_predicted=top_contender.title,
        actual_winner=actual_winner,
    )


def run_backtest(
    weights: NormalizedWeights,
    history: Optional[HistoryFixture] = None,
    kernel: Optional[ScoringKernel] = None,
) -> BacktestResult:
    """Replay scoring and calibration over every historical ceremony.

    Args:
        weights: Unit-sum feature weights to evaluate
        history: Fixture to replay (bundled fixture by default)
        kernel: Scoring implementation (managed Python by default)

    Returns:
        BacktestResult with overall, per-category and per-row metrics
    """
    fixture = history or default_history()
    k = kernel or PythonKernel()
    cal = get_engine_params().calibration

    by_year: List[CategoryYearResult] = []
    skipped = 0
    for year in fixture.years:
        for category_id in BACKTEST_CATEGORIES:
            row = score_category_year(year, category_id, weights, kernel=k, calibration=cal)
            if row is None:
                skipped += 1
                continue
            by_year.append(row)

    by_category = [
        CategorySummary(category_id=cid, metrics=summarize([r for r in by_year if r.category_id == cid]))
        for cid in BACKTEST_CATEGORIES
    ]
    result = BacktestResult(
        weights=weights,
        years_backtested=len(fixture.years),
        year_range=fixture.year_range,
        overall=summarize(by_year),
        by_category=by_category,
        by_year=by_year,
        computed_at=datetime.now(timezone.utc).isoformat(),
    )

    logger.info(
        {
            "backtest": {
                "rows": len(by_year),
                "skipped": skipped,
                "kernel": k.name,
                "winner_accuracy_pct": round(result.overall.winner_accuracy_pct, 2),
            }
        }
    )
    return result


# Single-slot cache for the default weights. Concurrent first calls may both
# compute; the results are identical.
_cached_result: Optional[BacktestResult] = None


def default_weights() -> NormalizedWeights:
    w = get_engine_params().weights
    return NormalizedWeights.from_raw(w.precursor, w.history, w.buzz)


def get_backtest_result() -> BacktestResult:
    global _cached_result
    if _cached_result is None:
        _cached_result = run_backtest(default_weights())
    return _cached_result


def clear_backtest_cache() -> None:
    global _cached_result
    _cached_result = None


__all__ = [
    "BACKTEST_CATEGORIES",
    "CategoryYearResult",
    "SummaryMetrics",
    "CategorySummary",
    "BacktestResult",
    "summarize",
    "score_category_year",
    "run_backtest",
    "default_weights",
    "get_backtest_result",
    "clear_backtest_cache",
]
