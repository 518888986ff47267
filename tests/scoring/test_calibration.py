"""Tests for scoring/calibration.py - odds calibration."""

from __future__ import annotations

import pytest

from awardodds.scoring.calibration import nomination_odds, winner_odds

BAD_INPUTS = [None, "abc", float("nan"), float("inf"), float("-inf"), -5.0, 0.0]


class TestNominationOdds:
    def test_share_scale_uplift(self):
        # 0.4 / 1.0 * 100 * 0.5 * 1.14
        assert nomination_odds(0.4, 1.0, 0.5) == pytest.approx(22.8)

    def test_total_floored_at_one(self):
        """Totals below 1 divide by 1."""
        assert nomination_odds(0.4, 0.5, 1.0) == pytest.approx(45.6)
        assert nomination_odds(0.4, 0.0, 1.0) == pytest.approx(45.6)

    def test_clamped_to_max(self):
        assert nomination_odds(5.0, 5.0, 2.0) == 99.0

    def test_clamped_to_min(self):
        assert nomination_odds(0.001, 10.0, 0.5) == 0.6

    @pytest.mark.parametrize("bad", BAD_INPUTS)
    def test_bad_inputs_stay_in_bounds(self, bad):
        for args in [(bad, 1.0, 1.0), (0.5, bad, 1.0), (0.5, 1.0, bad), (bad, bad, bad)]:
            assert 0.6 <= nomination_odds(*args) <= 99.0

    @pytest.mark.parametrize("scale", [None, 0, "x", float("nan")])
    def test_scale_falls_back_to_one(self, scale):
        assert nomination_odds(0.4, 1.0, scale) == pytest.approx(nomination_odds(0.4, 1.0, 1.0))

    def test_custom_bounds(self):
        assert nomination_odds(0.9, 1.0, 1.0, uplift=1.0, min_odds=1.0, max_odds=50.0) == 50.0


class TestWinnerOdds:
    def test_blend(self):
        # (50 + 40*0.25) / 1.25 * 1.2
        assert winner_odds(0.5, 1.0, 40.0, 0.25) == pytest.approx(57.6)

    def test_zero_base_is_share_only(self):
        assert winner_odds(0.2, 1.0, 90.0, 0.0) == pytest.approx(24.0)

    def test_higher_nomination_raises_winner(self):
        low = winner_odds(0.2, 1.0, 20.0, 0.24)
        high = winner_odds(0.2, 1.0, 80.0, 0.24)
        assert high > low

    def test_denominator_never_zero(self):
        """winner_base -1 would divide by zero; the denominator falls back to 1."""
        assert winner_odds(0.5, 1.0, 10.0, -1.0) == pytest.approx(48.0)

    def test_clamped_to_max(self):
        assert winner_odds(1.0, 1.0, 99.0, 0.25) == 92.0

    @pytest.mark.parametrize("bad", BAD_INPUTS)
    def test_bad_inputs_stay_in_bounds(self, bad):
        for args in [(bad, 1.0, 50.0, 0.2), (0.5, bad, 50.0, 0.2), (0.5, 1.0, bad, 0.2), (0.5, 1.0, 50.0, bad)]:
            assert 0.4 <= winner_odds(*args) <= 92.0

    def test_all_missing_is_min(self):
        assert winner_odds(None, None, None, None) == 0.4
