"""Domain model: candidates, categories, weights and the category catalog."""

from awardodds.model.types import (
    Candidate,
    Category,
    ExperienceConfig,
    NormalizedWeights,
    Projection,
    ScoreResult,
)
from awardodds.model.catalog import CATEGORY_DEFINITIONS, create_categories
from awardodds.model.records import normalize_weights, parse_candidate_record, sanitize_strength

__all__ = [
    "Candidate",
    "Category",
    "ExperienceConfig",
    "NormalizedWeights",
    "Projection",
    "ScoreResult",
    "CATEGORY_DEFINITIONS",
    "create_categories",
    "normalize_weights",
    "parse_candidate_record",
    "sanitize_strength",
]
