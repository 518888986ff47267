from __future__ import annotations

from enum import Enum


class Strength(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class CategoryId(str, Enum):
    PICTURE = "picture"
    DIRECTOR = "director"
    ACTOR = "actor"
    ACTRESS = "actress"
    SUPPORTING_ACTOR = "supporting-actor"
    SUPPORTING_ACTRESS = "supporting-actress"


# Categories honoring a person rather than a film.
PERSON_CATEGORIES = frozenset(
    {
        CategoryId.DIRECTOR.value,
        CategoryId.ACTOR.value,
        CategoryId.ACTRESS.value,
        CategoryId.SUPPORTING_ACTOR.value,
        CategoryId.SUPPORTING_ACTRESS.value,
    }
)


__all__ = ["Strength", "CategoryId", "PERSON_CATEGORIES"]
