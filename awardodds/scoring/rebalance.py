"""Category rebalancing: force a field's sum into a target band.

rebalance_field_total() scales once toward the clamped target, clamps each
entry, then runs at most two correction passes that spread the remaining
gap over entries with slack. Clamping can absorb part of the scaling, so
the result is best-effort: with tiny slack sets the sum may stay outside
the band. Callers needing a guarantee check RebalanceBand.is_feasible()
first.

The pass limit is fixed at two. Raising it changes the percentages users
see, so keep it in step with the published numbers.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, List, Optional, Sequence

from awardodds.config.params import RebalanceBand, RebalanceParams
from awardodds.shared.numeric import clamp, to_float

logger = logging.getLogger(__name__)

CORRECTION_PASSES = 2
# Entries within this distance of a bound count as having no slack.
SLACK_EPSILON = 0.001


def _get(entry: Any, field: str) -> float:
    if isinstance(entry, MutableMapping):
        return to_float(entry.get(field))
    return to_float(getattr(entry, field, 0.0))


def _set(entry: Any, field: str, value: float) -> None:
    if isinstance(entry, MutableMapping):
        entry[field] = value
    else:
        setattr(entry, field, value)


def _total(entries: Sequence[Any], field: str) -> float:
    return sum(_get(e, field) for e in entries)


def rebalance_field_total(entries: Sequence[Any], field: str, band: RebalanceBand) -> None:
    """Mutate `field` on every entry so the sum lands in the band when possible.

    Entries may be mappings or attribute objects.
    """
    if not entries:
        return

    target = clamp(band.target_total, band.min_total, band.max_total)
    total = _total(entries, field)

    if total <= 0:
        even = clamp(target / len(entries), band.min_value, band.max_value)
        for entry in entries:
            _set(entry, field, even)
        total = _total(entries, field)
        if total <= 0:
            return

    scale = target / total
    for entry in entries:
        _set(entry, field, clamp(_get(entry, field) * scale, band.min_value, band.max_value))

    for _ in range(CORRECTION_PASSES):
        current = _total(entries, field)
        if band.min_total <= current <= band.max_total:
            return

        bound = band.min_total if current < band.min_total else band.max_total
        delta = bound - current
        if delta > 0:
            adjustable = [e for e in entries if _get(e, field) < band.max_value - SLACK_EPSILON]
        else:
            adjustable = [e for e in entries if _get(e, field) > band.min_value + SLACK_EPSILON]
        if not adjustable:
            break

        per_entry = delta / len(adjustable)
        for entry in adjustable:
            _set(entry, field, clamp(_get(entry, field) + per_entry, band.min_value, band.max_value))

    final = _total(entries, field)
    if not band.min_total <= final <= band.max_total:
        logger.debug(
            {"rebalance": {"field": field, "total": final, "band": [band.min_total, band.max_total], "result": "out_of_band"}}
        )


def rebalance_category(entries: List[Any], params: Optional[RebalanceParams] = None) -> List[Any]:
    """Rebalance nomination then winner, then cap winner at a share of nomination.

    Returns the same list, mutated in place.
    """
    if not entries:
        return entries
    p = params or RebalanceParams()

    rebalance_field_total(entries, "nomination", p.nomination_band)
    rebalance_field_total(entries, "winner", p.winner_band)
    for entry in entries:
        _set(entry, "winner", min(_get(entry, "winner"), _get(entry, "nomination") * p.winner_to_nomination_cap))
    return entries


__all__ = ["CORRECTION_PASSES", "rebalance_field_total", "rebalance_category"]
