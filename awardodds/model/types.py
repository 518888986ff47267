"""Domain types for candidates, categories and scoring output."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from awardodds.shared.enums import Strength


# ─────────────────────────────────────────────────────────────────────────────
# Candidates and categories
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class Candidate:
    """One contender in one category.

    For person categories `title` is the person and `studio` holds the
    associated film title. Features are mutated in place by signal ingest
    and user edits.
    """

    title: str
    studio: str
    precursor: float
    history: float
    buzz: float
    strength: Strength = Strength.MEDIUM
    nominated: Optional[bool] = None
    winner: Optional[bool] = None


@dataclass
class Category:
    """A named award category holding candidates in display order."""

    id: str
    name: str
    nominees: int
    winner_base: float
    candidates: List[Candidate] = field(default_factory=list)


@dataclass(frozen=True)
class NormalizedWeights:
    """Feature weights summing to 1."""

    precursor: float
    history: float
    buzz: float

    @classmethod
    def from_raw(cls, precursor: float, history: float, buzz: float) -> "NormalizedWeights":
        """Normalize raw integer session weights by simple division.

        A non-positive total divides by 1 so all-zero weights stay zero.
        """
        total = precursor + history + buzz
        if total <= 0:
            total = 1
        return cls(precursor=precursor / total, history=history / total, buzz=buzz / total)

    def to_dict(self) -> Dict[str, float]:
        return {"precursor": self.precursor, "history": self.history, "buzz": self.buzz}


# ─────────────────────────────────────────────────────────────────────────────
# Scoring output
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScoreResult:
    """Unnormalized propensities plus the terms that produced them."""

    nomination_raw: float
    winner_raw: float
    precursor_contribution: float
    history_contribution: float
    buzz_contribution: float
    strength_multiplier: float
    experience_multiplier: float


@dataclass
class Projection:
    """Calibrated odds for one candidate as shown for a live category."""

    index: int
    category_id: str
    raw_title: str
    raw_studio: str
    title: str
    nomination: float
    winner: float
    precursor_contribution: float
    history_contribution: float
    buzz_contribution: float
    strength_multiplier: float
    experience_multiplier: float


# ─────────────────────────────────────────────────────────────────────────────
# Track-record adjustments
# ─────────────────────────────────────────────────────────────────────────────


class ExperienceConfig(BaseModel):
    """Per-session track-record tables, keyed category -> contender name.

    - prior_category_wins: number of earlier wins in the category
    - recent_winner_penalty: penalty level for very recent winners
    - overdue_narrative_boost: truthy when an "overdue" narrative applies
    """

    model_config = ConfigDict(frozen=True)

    prior_category_wins: Dict[str, Dict[str, float]] = Field(default_factory=dict)
    recent_winner_penalty: Dict[str, Dict[str, float]] = Field(default_factory=dict)
    overdue_narrative_boost: Dict[str, Dict[str, float]] = Field(default_factory=dict)

    def prior_wins(self, category_id: str, name: str) -> float:
        return self.prior_category_wins.get(category_id, {}).get(name, 0) or 0

    def recent_penalty_level(self, category_id: str, name: str) -> float:
        return self.recent_winner_penalty.get(category_id, {}).get(name, 0) or 0

    def is_overdue(self, category_id: str, name: str) -> bool:
        return bool(self.overdue_narrative_boost.get(category_id, {}).get(name, 0))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ExperienceConfig":
        with Path(path).open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)


__all__ = [
    "Candidate",
    "Category",
    "NormalizedWeights",
    "ScoreResult",
    "Projection",
    "ExperienceConfig",
]
