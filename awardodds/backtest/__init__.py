"""Historical replay of the odds engine."""

from awardodds.backtest.fixtures import HistoryFixture, default_history, load_history
from awardodds.backtest.harness import (
    BacktestResult,
    CategoryYearResult,
    clear_backtest_cache,
    get_backtest_result,
    run_backtest,
)

__all__ = [
    "HistoryFixture",
    "default_history",
    "load_history",
    "BacktestResult",
    "CategoryYearResult",
    "clear_backtest_cache",
    "get_backtest_result",
    "run_backtest",
]
