"""External source signal ingest."""

from awardodds.signals.adapter import SignalApplyResult, apply_source_signals, normalize_signal_key
from awardodds.signals.snapshot import AggregateSignal, SourceSnapshot

__all__ = [
    "AggregateSignal",
    "SourceSnapshot",
    "SignalApplyResult",
    "apply_source_signals",
    "normalize_signal_key",
]
