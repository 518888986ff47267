"""Pydantic models for external source snapshots.

Snapshots come from an upstream crawler and are not trusted: score fields
that are missing, non-numeric, NaN or infinite coerce to 0, titles coerce to
strings. Range clamping into [0, 1] happens in the adapter.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from awardodds.shared.numeric import to_float


class AggregateSignal(BaseModel):
    """Per-title aggregate scores, each nominally in [0, 1]."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = ""
    combined_score: float = Field(default=0.0, alias="combinedScore")
    letterboxd_score: float = Field(default=0.0, alias="letterboxdScore")
    reddit_score: float = Field(default=0.0, alias="redditScore")
    thegamer_score: float = Field(default=0.0, alias="thegamerScore")

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, v: Any) -> str:
        return str(v or "")

    @field_validator("combined_score", "letterboxd_score", "reddit_score", "thegamer_score", mode="before")
    @classmethod
    def _coerce_score(cls, v: Any) -> float:
        return to_float(v)


class SourceSnapshot(BaseModel):
    """One upstream snapshot, idempotency-keyed by generated_at.

    `aggregate` is kept raw; entries are validated one by one so a single
    malformed entry does not reject the snapshot.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    generated_at: Any = Field(default=None, alias="generatedAt")
    aggregate: List[Any]


__all__ = ["AggregateSignal", "SourceSnapshot"]
