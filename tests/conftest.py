"""Shared fixtures for awardodds tests."""

from __future__ import annotations

from typing import List

import pytest

from awardodds.model.types import Candidate, Category, ExperienceConfig, NormalizedWeights
from awardodds.shared.enums import Strength


@pytest.fixture
def default_weights() -> NormalizedWeights:
    """Default session weights 58/30/12."""
    return NormalizedWeights.from_raw(58, 30, 12)


@pytest.fixture
def picture_candidates() -> List[Candidate]:
    """Twelve Best Picture contenders, strongest first."""
    return [
        Candidate(
            title=f"Film {i}",
            studio=f"Studio {i}",
            precursor=95 - i * 7,
            history=90 - i * 5,
            buzz=85 - i * 4,
            strength=Strength.HIGH if i < 3 else (Strength.MEDIUM if i < 8 else Strength.LOW),
        )
        for i in range(12)
    ]


@pytest.fixture
def picture_category(picture_candidates) -> Category:
    return Category(id="picture", name="Best Picture", nominees=10, winner_base=0.16, candidates=picture_candidates)


@pytest.fixture
def actor_category() -> Category:
    """Best Actor with a mix of first-timers and past winners."""
    return Category(
        id="actor",
        name="Best Actor",
        nominees=5,
        winner_base=0.25,
        candidates=[
            Candidate("Cillian Murphy", "Oppenheimer", 92, 80, 78, Strength.HIGH),
            Candidate("Paul Giamatti", "The Holdovers", 85, 76, 70, Strength.HIGH),
            Candidate("Bradley Cooper", "Maestro", 70, 72, 60, Strength.MEDIUM),
            Candidate("Jeffrey Wright", "American Fiction", 66, 62, 55, Strength.MEDIUM),
            Candidate("Colman Domingo", "Rustin", 64, 60, 58, Strength.MEDIUM),
            Candidate("Leonardo DiCaprio", "Killers of the Flower Moon", 58, 74, 64, Strength.LOW),
        ],
    )


@pytest.fixture
def experience() -> ExperienceConfig:
    return ExperienceConfig(
        prior_category_wins={"actor": {"Leonardo DiCaprio": 1}},
        recent_winner_penalty={"actor": {"Leonardo DiCaprio": 0.5}},
        overdue_narrative_boost={"actor": {"Paul Giamatti": 1}},
    )
