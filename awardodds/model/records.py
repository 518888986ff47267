"""Parsing of loosely-typed contender records (CSV rows, stored profiles)."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from awardodds.model.types import Candidate, NormalizedWeights
from awardodds.shared.enums import Strength
from awardodds.shared.numeric import clamp, to_float

FEATURE_MIN = 0.0
FEATURE_MAX = 100.0


def sanitize_strength(value: Any) -> Strength:
    """Map a strength label to Strength; anything unrecognized is LOW."""
    if isinstance(value, Strength):
        return value
    text = str(value or "").strip()
    for member in Strength:
        if text == member.value:
            return member
    return Strength.LOW


def clamp_feature(value: Any) -> float:
    return clamp(to_float(value), FEATURE_MIN, FEATURE_MAX)


def parse_candidate_record(record: Any) -> Optional[Candidate]:
    """Build a Candidate from a mapping, or None if title/studio are missing.

    Feature values are coerced (garbage -> 0) and clamped to [0, 100].
    """
    if not isinstance(record, Mapping):
        return None

    title = str(record.get("title") or "").strip()
    studio = str(record.get("studio") or "").strip()
    if not title or not studio:
        return None

    return Candidate(
        title=title,
        studio=studio,
        precursor=clamp_feature(record.get("precursor")),
        history=clamp_feature(record.get("history")),
        buzz=clamp_feature(record.get("buzz")),
        strength=sanitize_strength(record.get("strength")),
    )


def normalize_weights(precursor: Any, history: Any, buzz: Any) -> NormalizedWeights:
    """Normalize raw session weights (e.g. 58/30/12) into a unit-sum triple."""
    return NormalizedWeights.from_raw(to_float(precursor), to_float(history), to_float(buzz))


__all__ = [
    "sanitize_strength",
    "clamp_feature",
    "parse_candidate_record",
    "normalize_weights",
]
