"""Award category catalog and display helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from awardodds.model.types import Category
from awardodds.shared.enums import PERSON_CATEGORIES, CategoryId


@dataclass(frozen=True)
class CategoryDefinition:
    id: str
    name: str
    nominees: int
    winner_base: float


CATEGORY_DEFINITIONS: List[CategoryDefinition] = [
    CategoryDefinition("picture", "Best Picture", 10, 0.16),
    CategoryDefinition("director", "Best Director", 5, 0.24),
    CategoryDefinition("actor", "Best Actor", 5, 0.25),
    CategoryDefinition("actress", "Best Actress", 5, 0.24),
    CategoryDefinition("supporting-actor", "Best Supporting Actor", 5, 0.23),
    CategoryDefinition("supporting-actress", "Best Supporting Actress", 5, 0.23),
    CategoryDefinition("original-screenplay", "Best Original Screenplay", 5, 0.22),
    CategoryDefinition("adapted-screenplay", "Best Adapted Screenplay", 5, 0.22),
    CategoryDefinition("animated-feature", "Best Animated Feature Film", 5, 0.2),
    CategoryDefinition("international-feature", "Best International Feature Film", 5, 0.2),
    CategoryDefinition("documentary-feature", "Best Documentary Feature Film", 5, 0.2),
    CategoryDefinition("documentary-short", "Best Documentary Short Film", 5, 0.18),
    CategoryDefinition("live-action-short", "Best Live Action Short Film", 5, 0.18),
    CategoryDefinition("animated-short", "Best Animated Short Film", 5, 0.18),
    CategoryDefinition("original-score", "Best Original Score", 5, 0.21),
    CategoryDefinition("original-song", "Best Original Song", 5, 0.2),
    CategoryDefinition("sound", "Best Sound", 5, 0.2),
    CategoryDefinition("production-design", "Best Production Design", 5, 0.2),
    CategoryDefinition("cinematography", "Best Cinematography", 5, 0.2),
    CategoryDefinition("makeup-hairstyling", "Best Makeup and Hairstyling", 5, 0.19),
    CategoryDefinition("costume-design", "Best Costume Design", 5, 0.19),
    CategoryDefinition("film-editing", "Best Film Editing", 5, 0.21),
    CategoryDefinition("visual-effects", "Best Visual Effects", 5, 0.2),
    CategoryDefinition("casting", "Best Casting", 5, 0.19),
]

CATEGORY_BY_ID: Dict[str, CategoryDefinition] = {d.id: d for d in CATEGORY_DEFINITIONS}


def create_categories() -> List[Category]:
    """Fresh, empty Category objects for every catalog entry."""
    return [
        Category(id=d.id, name=d.name, nominees=d.nominees, winner_base=d.winner_base)
        for d in CATEGORY_DEFINITIONS
    ]


def is_person_category(category_id: str) -> bool:
    return category_id in PERSON_CATEGORIES


def display_limit(category_id: str) -> int:
    """How many top candidates are shown (and rebalanced) for a category."""
    return 10 if category_id == CategoryId.PICTURE.value else 5


def display_title(category_id: str, title: str, studio: str) -> str:
    if not is_person_category(category_id):
        return title
    return f"{title} ({studio})"


__all__ = [
    "CategoryDefinition",
    "CATEGORY_DEFINITIONS",
    "CATEGORY_BY_ID",
    "create_categories",
    "is_person_category",
    "display_limit",
    "display_title",
]
