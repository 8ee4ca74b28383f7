"""
Tests for standings reports.
"""

import json

import pandas as pd
import pytest

from tourney import report
from tourney.config import STANDINGS_COLUMNS
from tourney.report import process_tournament, standings_to_frame, summarize
from tourney.stats.engine import compute_statistics
from tourney.stats.models import Match, Statistics, Tournament


@pytest.fixture
def statistics():
    tournament = Tournament(matches=[Match(1, 2, 3, 1), Match(3, 4, 2, 2)])
    return compute_statistics(tournament)


class TestStandingsToFrame:
    """Tests for standings_to_frame."""

    def test_columns_and_order(self, statistics):
        df = standings_to_frame(statistics)
        assert list(df.columns) == STANDINGS_COLUMNS
        assert df['player_id'].tolist() == [1, 3, 4, 2]
        assert df['position'].tolist() == [1, 2, 3, 4]
        assert df['points'].tolist() == [3, 1, 1, 0]

    def test_empty(self):
        df = standings_to_frame(Statistics())
        assert df.empty
        assert list(df.columns) == STANDINGS_COLUMNS


class TestSummarize:
    """Tests for summarize."""

    def test_highlights(self, statistics):
        summary = summarize(statistics)
        assert summary['top_scorer_id'] == 1
        assert summary['top_scorer_goals'] == 3
        assert summary['best_defense_id'] == 1
        assert summary['highest_goal_match'] == "1 3 x 1 2"

    def test_empty(self):
        summary = summarize(Statistics())
        assert summary['top_scorer_id'] is None
        assert summary['highest_goal_match'] is None


class TestProcessTournament:
    """Tests for process_tournament CSV export."""

    def test_writes_standings_csv(self, tmp_path):
        json_path = tmp_path / "tournament_1.json"
        json_path.write_text(json.dumps({
            "tournamentType": "GROUP",
            "champion": 1,
            "matches": [
                {"player1Id": 1, "player2Id": 2, "score1": 2, "score2": 0},
                {"player1Id": 3, "player2Id": 4},
            ],
        }), encoding="utf-8")
        out = tmp_path / "out"

        df = process_tournament(json_path, output_folder=out)

        files = list(out.glob("tournament_1_standings_*.csv"))
        assert len(files) == 1
        written = pd.read_csv(files[0])
        assert written['player_id'].tolist() == df['player_id'].tolist() == [1, 3, 4, 2]

    def test_strict_excludes_unplayed(self, tmp_path):
        json_path = tmp_path / "tournament_2.json"
        json_path.write_text(json.dumps({
            "matches": [
                {"player1Id": 1, "player2Id": 2, "score1": 2, "score2": 0},
                {"player1Id": 3, "player2Id": 4},
            ],
        }), encoding="utf-8")

        df = process_tournament(json_path, output_prefix="cup", output_folder=tmp_path, strict=True)

        assert df['player_id'].tolist() == [1, 2]
        assert len(list(tmp_path.glob("cup_standings_*.csv"))) == 1

    def test_removes_stale_exports(self, tmp_path):
        json_path = tmp_path / "tournament_3.json"
        json_path.write_text(json.dumps({"matches": []}), encoding="utf-8")
        stale = tmp_path / "tournament_3_standings_20000101.csv"
        stale.write_text("old", encoding="utf-8")

        process_tournament(json_path, output_folder=tmp_path)

        assert not stale.exists()
        assert len(list(tmp_path.glob("tournament_3_standings_*.csv"))) == 1


class TestMain:
    """Tests for the batch runner over INPUT_FOLDER."""

    @pytest.fixture
    def folders(self, tmp_path, monkeypatch):
        input_folder = tmp_path / "raw"
        output_folder = tmp_path / "processed"
        input_folder.mkdir()
        monkeypatch.setattr("tourney.report.INPUT_FOLDER", input_folder)
        monkeypatch.setattr("tourney.report.OUTPUT_FOLDER", output_folder)
        return input_folder, output_folder

    def test_empty_folder(self, folders):
        assert report.main() == {}

    def test_skips_invalid_documents(self, folders):
        input_folder, output_folder = folders
        (input_folder / "tournament_1.json").write_text(json.dumps({
            "matches": [{"player1Id": 1, "player2Id": 2, "score1": 1, "score2": 0}],
        }), encoding="utf-8")
        (input_folder / "tournament_2.json").write_text("{bad", encoding="utf-8")
        (input_folder / "notes.json").write_text("{}", encoding="utf-8")

        results = report.main()

        assert list(results) == ["tournament_1"]
        assert results["tournament_1"]['player_id'].tolist() == [1, 2]
        assert len(list(output_folder.glob("tournament_1_standings_*.csv"))) == 1
        assert not list(output_folder.glob("tournament_2_standings_*.csv"))
