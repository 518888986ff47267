"""Tests for the backtest command line (python -m awardodds.backtest)."""

from __future__ import annotations

import json
import logging

import pytest

from awardodds.backtest.__main__ import main
from awardodds.config.settings import CONFIG_ENV_VAR
from awardodds.shared.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("AWARDODDS_SCORING_KERNEL", raising=False)
    monkeypatch.delenv("AWARDODDS_HISTORY_PATH", raising=False)
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


class TestMain:
    def test_json_output(self, capsys):
        assert main(["--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["years_backtested"] == 25
        assert len(data["by_year"]) == 150
        assert data["weights"]["precursor"] == pytest.approx(0.58)

    def test_custom_weights(self, capsys):
        main(["--precursor", "1", "--history", "1", "--buzz", "2", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["weights"] == pytest.approx({"precursor": 0.25, "history": 0.25, "buzz": 0.5})

    def test_summary_table(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Backtest 1999-2023 (25 years, 150 rows)" in out
        assert "overall" in out
        for category_id in ["picture", "director", "supporting-actress"]:
            assert category_id in out

    def test_verbose_vector_kernel(self, capsys):
        assert main(["--kernel", "vector", "-v"]) == 0
        out = capsys.readouterr().out
        assert "pred=American Beauty actual=American Beauty" in out

    def test_custom_fixture(self, capsys, tmp_path):
        path = tmp_path / "history.json"
        path.write_text(
            json.dumps(
                {
                    "years": [
                        {
                            "year": 2030,
                            "ceremony": 103,
                            "categories": {
                                "picture": {
                                    "nominees": 1,
                                    "winnerBase": 0.16,
                                    "contenders": [
                                        {"title": "Only", "precursor": 80, "history": 80, "buzz": 80,
                                         "nominated": True, "winner": True}
                                    ],
                                }
                            },
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )
        main(["--fixture", str(path), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["year_range"] == {"from": 2030, "to": 2030}
        assert data["overall"]["winner_accuracy_pct"] == 100.0

    def test_unknown_kernel_rejected(self):
        with pytest.raises(SystemExit):
            main(["--kernel", "gpu"])
