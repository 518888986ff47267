"""Run the historical backtest from the command line.

Usage:
    # Default weights (58/30/12), summary table
    python -m awardodds.backtest

    # Custom raw weights, JSON output
    python -m awardodds.backtest --precursor 50 --history 35 --buzz 15 --json

    # Vectorized kernel, per-row output
    python -m awardodds.backtest --kernel vector -v
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from awardodds.backtest.fixtures import default_history, load_history
from awardodds.backtest.harness import BacktestResult, run_backtest
from awardodds.config.params import get_engine_params
from awardodds.config.settings import load_settings
from awardodds.model.records import normalize_weights
from awardodds.scoring.kernels import get_kernel
from awardodds.shared.logging import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    defaults = get_engine_params().weights
    parser = argparse.ArgumentParser(description="Backtest award odds against historical ceremonies")
    parser.add_argument("--precursor", type=float, default=defaults.precursor, help="Raw precursor weight")
    parser.add_argument("--history", type=float, default=defaults.history, help="Raw history weight")
    parser.add_argument("--buzz", type=float, default=defaults.buzz, help="Raw buzz weight")
    parser.add_argument("--kernel", choices=["python", "vector"], default=None, help="Scoring kernel")
    parser.add_argument("--fixture", default=None, help="Path to a history fixture JSON")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print one line per category-year")
    return parser


def _print_summary(result: BacktestResult, verbose: bool) -> None:
    w = result.weights
    print(f"Backtest {result.year_range['from']}-{result.year_range['to']} "
          f"({result.years_backtested} years, {len(result.by_year)} rows)")
    print(f"Weights: precursor={w.precursor:.3f} history={w.history:.3f} buzz={w.buzz:.3f}")
    print()
    print(f"{'category':<20} {'nom acc':>8} {'win %':>7} {'nom brier':>10} {'win brier':>10}")
    for summary in result.by_category:
        m = summary.metrics
        print(f"{summary.category_id:<20} {m.nomination_accuracy_avg:>8.3f} {m.winner_accuracy_pct:>7.1f} "
              f"{m.nomination_brier_avg:>10.4f} {m.winner_brier_avg:>10.4f}")
    o = result.overall
    print(f"{'overall':<20} {o.nomination_accuracy_avg:>8.3f} {o.winner_accuracy_pct:>7.1f} "
          f"{o.nomination_brier_avg:>10.4f} {o.winner_brier_avg:>10.4f}")

    if verbose:
        print()
        for row in result.by_year:
            mark = "✓" if row.winner_correct else "✗"
            print(f"{row.year} {row.category_id:<20} nom={row.nomination_accuracy:.2f} "
                  f"pred={row.top_predicted} actual={row.actual_winner} {mark}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(
        level=settings.logging.level,
        json_logs=settings.logging.json_logs,
        log_dir=settings.logging.log_dir,
        retention_bytes=settings.logging.retention_bytes,
    )

    kernel = get_kernel(args.kernel or settings.scoring_kernel)
    kernel.initialize()

    fixture_path = args.fixture or settings.history_path
    history = load_history(fixture_path) if fixture_path else default_history()

    weights = normalize_weights(args.precursor, args.history, args.buzz)
    result = run_backtest(weights, history=history, kernel=kernel)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_summary(result, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
