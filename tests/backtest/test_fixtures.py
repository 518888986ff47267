"""Tests for backtest/fixtures.py - historical fixture loading."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from awardodds.backtest.fixtures import DEFAULT_HISTORY_PATH, HistoryFixture, default_history, load_history
from awardodds.shared.enums import CategoryId, Strength


@pytest.fixture(scope="module")
def history() -> HistoryFixture:
    return load_history()


class TestBundledFixture:
    """Shape of the bundled 1999-2023 history."""

    def test_bundled_file_exists(self):
        assert DEFAULT_HISTORY_PATH.exists()

    def test_twenty_five_years(self, history):
        assert len(history.years) == 25
        assert history.year_range == {"from": 1999, "to": 2023}
        assert [y.year for y in history.years] == list(range(1999, 2024))

    def test_ceremony_numbers(self, history):
        for year in history.years:
            assert year.ceremony == year.year - 1927

    def test_six_categories_each(self, history):
        expected = {c.value for c in CategoryId}
        for year in history.years:
            assert set(year.categories) == expected

    def test_one_winner_who_was_nominated(self, history):
        for year in history.years:
            for category_id, category in year.categories.items():
                winners = [c for c in category.contenders if c.winner]
                assert len(winners) == 1, (year.year, category_id)
                assert winners[0].nominated

    def test_snubs_included(self, history):
        """Every category also lists contenders that were not nominated."""
        for year in history.years:
            for category in year.categories.values():
                assert any(not c.nominated for c in category.contenders)

    def test_features_in_range(self, history):
        for year in history.years:
            for category in year.categories.values():
                for c in category.contenders:
                    assert 0 <= c.precursor <= 100
                    assert 0 <= c.history <= 100
                    assert 0 <= c.buzz <= 100

    def test_american_beauty(self, history):
        picture = history.years[0].categories["picture"]
        winner = next(c for c in picture.contenders if c.winner)
        assert winner.title == "American Beauty"
        assert picture.nominees == 5
        assert picture.winner_base == 0.16

    def test_expanded_best_picture_field(self, history):
        by_year = {y.year: y for y in history.years}
        assert by_year[2008].categories["picture"].nominees == 5
        assert by_year[2009].categories["picture"].nominees == 10

    def test_default_history_cached(self):
        assert default_history() is default_history()


class TestLoadHistory:
    def _write(self, tmp_path, payload):
        path = tmp_path / "history.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def test_custom_fixture(self, tmp_path):
        path = self._write(
            tmp_path,
            {
                "schema": 1,
                "years": [
                    {
                        "year": 2030,
                        "ceremony": 103,
                        "categories": {
                            "picture": {
                                "nominees": 1,
                                "winnerBase": 0.2,
                                "contenders": [
                                    {"title": "A", "precursor": 90, "history": 80, "buzz": 70, "strength": "Mega",
                                     "nominated": True, "winner": True}
                                ],
                            }
                        },
                    }
                ],
            },
        )
        history = load_history(path)
        contender = history.years[0].categories["picture"].contenders[0]
        assert contender.strength is Strength.LOW
        assert contender.studio == ""
        assert history.year_range == {"from": 2030, "to": 2030}

        candidate = contender.to_candidate()
        assert candidate.title == "A"
        assert candidate.nominated is True
        assert candidate.winner is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_history(tmp_path / "nope.json")

    def test_malformed_fixture(self, tmp_path):
        path = self._write(tmp_path, {"years": [{"year": "soon", "categories": {}}]})
        with pytest.raises(ValidationError):
            load_history(path)

    def test_negative_nominees_rejected(self, tmp_path):
        path = self._write(
            tmp_path,
            {"years": [{"year": 2030, "ceremony": 103, "categories": {"actor": {"nominees": -1, "winnerBase": 0.2}}}]},
        )
        with pytest.raises(ValidationError):
            load_history(path)

    def test_empty_years_range(self):
        assert HistoryFixture(years=[]).year_range == {"from": 0, "to": 0}
