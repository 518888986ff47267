"""Tests for ExperienceConfig lookups and YAML loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from awardodds.model.types import ExperienceConfig


class TestExperienceConfig:
    def test_lookups_default_to_zero(self):
        config = ExperienceConfig()
        assert config.prior_wins("actor", "Anyone") == 0
        assert config.recent_penalty_level("actor", "Anyone") == 0
        assert config.is_overdue("actor", "Anyone") is False

    def test_lookups(self, experience):
        assert experience.prior_wins("actor", "Leonardo DiCaprio") == 1
        assert experience.recent_penalty_level("actor", "Leonardo DiCaprio") == 0.5
        assert experience.is_overdue("actor", "Paul Giamatti") is True
        # Tables are per category
        assert experience.prior_wins("director", "Leonardo DiCaprio") == 0

    def test_frozen(self, experience):
        with pytest.raises(ValidationError):
            experience.prior_category_wins = {}

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "experience.yaml"
        path.write_text(
            "prior_category_wins:\n"
            "  actress:\n"
            "    Emma Stone: 1\n"
            "overdue_narrative_boost:\n"
            "  supporting-actor:\n"
            "    Robert Downey Jr.: 1\n",
            encoding="utf-8",
        )
        config = ExperienceConfig.from_yaml(path)
        assert config.prior_wins("actress", "Emma Stone") == 1
        assert config.is_overdue("supporting-actor", "Robert Downey Jr.")
        assert config.recent_winner_penalty == {}

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ExperienceConfig.from_yaml(path) == ExperienceConfig()
