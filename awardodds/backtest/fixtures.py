"""Historical ceremony fixtures for the backtest.

The bundled fixture (data/oscar_history.json) covers film years 1999-2023
with six categories each. Feature values are reconstructed pre-ceremony
estimates; `nominated` / `winner` are the real outcomes.

Schema:
    {"schema": 1, "note": str, "years": [
        {"year": int, "ceremony": int, "categories": {
            "<category_id>": {"nominees": int, "winnerBase": float,
                              "contenders": [{title, studio, precursor,
                                              history, buzz, strength,
                                              nominated, winner}, ...]}}}]}
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from awardodds.model.records import sanitize_strength
from awardodds.model.types import Candidate
from awardodds.shared.enums import Strength

DEFAULT_HISTORY_PATH = Path(__file__).resolve().parent / "data" / "oscar_history.json"


class HistoricalContender(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    studio: str = ""
    precursor: float
    history: float
    buzz: float
    strength: Strength = Strength.LOW
    nominated: bool = False
    winner: bool = False

    @field_validator("strength", mode="before")
    @classmethod
    def _sanitize_strength(cls, v: Any) -> Strength:
        return sanitize_strength(v)

    def to_candidate(self) -> Candidate:
        return Candidate(
            title=self.title,
            studio=self.studio,
            precursor=self.precursor,
            history=self.history,
            buzz=self.buzz,
            strength=self.strength,
            nominated=self.nominated,
            winner=self.winner,
        )


class HistoricalCategory(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nominees: int = Field(ge=0)
    winner_base: float = Field(alias="winnerBase", ge=0)
    contenders: List[HistoricalContender] = Field(default_factory=list)


class HistoricalYear(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    ceremony: int
    categories: Dict[str, HistoricalCategory] = Field(default_factory=dict)


class HistoryFixture(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_version: int = Field(default=1, alias="schema")
    note: str = ""
    years: List[HistoricalYear]

    @property
    def year_range(self) -> Dict[str, int]:
        years = [y.year for y in self.years]
        if not years:
            return {"from": 0, "to": 0}
        return {"from": min(years), "to": max(years)}


def load_history(path: Optional[Union[str, Path]] = None) -> HistoryFixture:
    """Load and validate a history fixture.

    Raises:
        FileNotFoundError: path does not exist
        pydantic.ValidationError: file does not match the schema
    """
    p = Path(path) if path is not None else DEFAULT_HISTORY_PATH
    return HistoryFixture.model_validate_json(p.read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def default_history() -> HistoryFixture:
    """The bundled fixture, parsed once per process."""
    return load_history()


__all__ = [
    "DEFAULT_HISTORY_PATH",
    "HistoricalContender",
    "HistoricalCategory",
    "HistoricalYear",
    "HistoryFixture",
    "load_history",
    "default_history",
]
