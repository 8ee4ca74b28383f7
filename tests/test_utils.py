"""
Tests for shared utilities.
"""

import logging

import pandas as pd
import pytest

from tourney.utils import (
    atomic_write_csv,
    cleanup_old_files,
    setup_logging,
    validate_input_size,
    validate_tournament_type,
)


class TestValidateTournamentType:
    """Tests for validate_tournament_type."""

    def test_accepts_upper(self):
        assert validate_tournament_type("GROUP") == "GROUP"

    def test_normalizes_case_and_whitespace(self):
        assert validate_tournament_type(" eliminatory ") == "ELIMINATORY"

    def test_rejects_unknown(self):
        with pytest.raises(ValueError, match="Allowed values: ELIMINATORY, GROUP"):
            validate_tournament_type("league")


class TestValidateInputSize:
    """Tests for validate_input_size."""

    def test_within_limit(self):
        validate_input_size("abc", 3)

    def test_over_limit(self):
        with pytest.raises(ValueError, match="Input too large"):
            validate_input_size("abcd", 3)


class TestFileOperations:
    """Tests for atomic_write_csv and cleanup_old_files."""

    def test_atomic_write_creates_parent(self, tmp_path):
        path = tmp_path / "nested" / "out.csv"
        atomic_write_csv(pd.DataFrame({'a': [1, 2]}), path, index=False)
        assert pd.read_csv(path)['a'].tolist() == [1, 2]
        assert list(path.parent.glob("*.csv")) == [path]

    def test_cleanup_keeps_file(self, tmp_path):
        keep = tmp_path / "x_standings_2.csv"
        old = tmp_path / "x_standings_1.csv"
        other = tmp_path / "y_standings_1.csv"
        for f in (keep, old, other):
            f.write_text("", encoding="utf-8")

        deleted = cleanup_old_files("x_standings_*.csv", keep_file=keep, folder=tmp_path)

        assert deleted == [old]
        assert keep.exists() and other.exists()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_single_handler(self):
        logger = setup_logging("tourney.test_single_handler")
        setup_logging("tourney.test_single_handler")
        assert len(logger.handlers) == 1

    def test_level(self):
        logger = setup_logging("tourney.test_level", level=logging.DEBUG)
        assert logger.level == logging.DEBUG
