"""Fold external source snapshots into candidate features.

apply_source_signals() is idempotent by snapshot identity (generated_at) and
defensive about shape: malformed snapshots, already-applied identities and
snapshots that match no candidate are all reported as changed=False, never
raised. Repeated polling of an unchanged upstream source is the steady
state.

Matching uses normalize_signal_key() on the candidate title first, then on
the studio field, so a person candidate picks up the signal of the film it
is associated with.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from pydantic import ValidationError

from awardodds.config.params import SignalParams
from awardodds.model.types import Candidate, Category
from awardodds.shared.enums import Strength
from awardodds.shared.numeric import clamp, round_half_up, to_float
from awardodds.signals.snapshot import AggregateSignal, SourceSnapshot

logger = logging.getLogger(__name__)

_CURLY_APOSTROPHES = re.compile("[\u2018\u2019]")
_BRACKETED = re.compile(r"\[[^\]]*]")
_PARENTHETICAL = re.compile(r"\([^)]*\)")
_NON_KEY_CHARS = re.compile(r"[^a-z0-9']+")


@dataclass(frozen=True)
class SignalApplyResult:
    changed: bool
    updated_count: int
    applied_snapshot_id: Optional[Any]


def normalize_signal_key(value: Any) -> str:
    """Matching key for a title: lowercase, no annotations, single spaces.

    Example:
        normalize_signal_key("The Dish [Spielberg Movie]")  # "the dish"
    """
    text = str(value or "").lower()
    text = _CURLY_APOSTROPHES.sub("'", text)
    text = _BRACKETED.sub(" ", text)
    text = _PARENTHETICAL.sub(" ", text)
    text = _NON_KEY_CHARS.sub(" ", text)
    return text.strip()


def _rejected(last_applied_snapshot_id: Optional[Any], reason: str) -> SignalApplyResult:
    logger.debug({"source_signals": {"applied": False, "reason": reason}})
    return SignalApplyResult(changed=False, updated_count=0, applied_snapshot_id=last_applied_snapshot_id or None)


def _parse_snapshot(snapshot: Any) -> Optional[SourceSnapshot]:
    if isinstance(snapshot, SourceSnapshot):
        return snapshot
    if not isinstance(snapshot, Mapping):
        return None
    try:
        return SourceSnapshot.model_validate(dict(snapshot))
    except ValidationError:
        return None


def _build_lookup(entries: Iterable[Any]) -> Dict[str, AggregateSignal]:
    lookup: Dict[str, AggregateSignal] = {}
    for entry in entries:
        if isinstance(entry, AggregateSignal):
            signal = entry
        elif isinstance(entry, Mapping):
            try:
                signal = AggregateSignal.model_validate(dict(entry))
            except ValidationError:
                continue
        else:
            continue
        key = normalize_signal_key(signal.title)
        # First occurrence wins.
        if key and key not in lookup:
            lookup[key] = signal
    return lookup


def _apply_to_candidate(candidate: Candidate, signal: AggregateSignal, params: SignalParams) -> None:
    combined = clamp(signal.combined_score, 0.0, 1.0)
    letterboxd = clamp(signal.letterboxd_score, 0.0, 1.0)
    reddit = clamp(signal.reddit_score, 0.0, 1.0)
    thegamer = clamp(signal.thegamer_score, 0.0, 1.0)

    candidate.precursor = clamp(
        to_float(candidate.precursor) + round_half_up((combined - params.precursor_pivot) * params.precursor_scale), 0, 100
    )
    candidate.history = clamp(
        to_float(candidate.history) + round_half_up((letterboxd + thegamer - params.history_pivot) * params.history_scale), 0, 100
    )
    candidate.buzz = clamp(
        to_float(candidate.buzz) + round_half_up((reddit + thegamer - params.buzz_pivot) * params.buzz_scale), 0, 100
    )

    if combined >= params.high_combined or reddit >= params.high_reddit:
        candidate.strength = Strength.HIGH
    elif combined >= params.medium_combined:
        candidate.strength = Strength.MEDIUM
    else:
        candidate.strength = Strength.LOW


def apply_source_signals(
    categories: Iterable[Category],
    snapshot: Any,
    last_applied_snapshot_id: Optional[Any],
    params: Optional[SignalParams] = None,
) -> SignalApplyResult:
    """Merge an aggregate-score snapshot into candidate features in place.

    Args:
        categories: Categories whose candidates may be updated
        snapshot: Raw mapping (or SourceSnapshot) from the upstream producer
        last_applied_snapshot_id: generated_at of the last applied snapshot
        params: Adjustment constants (defaults from config.params)

    Returns:
        SignalApplyResult; applied_snapshot_id is the new identity only when
        at least one candidate changed, else last_applied_snapshot_id
    """
    parsed = _parse_snapshot(snapshot)
    if parsed is None:
        return _rejected(last_applied_snapshot_id, "malformed")
    if not parsed.generated_at or parsed.generated_at == last_applied_snapshot_id:
        return _rejected(last_applied_snapshot_id, "already_applied_or_missing_id")

    lookup = _build_lookup(parsed.aggregate)
    if not lookup:
        return _rejected(last_applied_snapshot_id, "empty_aggregate")

    p = params or SignalParams()
    updated = 0
    for category in categories:
        for candidate in category.candidates:
            signal = lookup.get(normalize_signal_key(candidate.title)) or lookup.get(
                normalize_signal_key(candidate.studio)
            )
            if signal is None:
                continue
            _apply_to_candidate(candidate, signal, p)
            updated += 1

    if updated == 0:
        return _rejected(last_applied_snapshot_id, "no_matches")

    logger.info({"source_signals": {"applied": True, "snapshot": str(parsed.generated_at), "updated": updated}})
    return SignalApplyResult(changed=True, updated_count=updated, applied_snapshot_id=parsed.generated_at)


__all__ = ["SignalApplyResult", "normalize_signal_key", "apply_source_signals"]
