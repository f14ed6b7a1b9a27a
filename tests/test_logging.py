"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest

from gender_condition.conditions import match_for_gender
from gender_condition.errors import InvalidConditionValueError
from gender_condition.logging import ROOT_LOGGER, reset_logging, setup_logging


class TestSetupLogging:
    """Tests for the rotating log files."""

    def test_creates_log_files(self, tmp_path: Path) -> None:
        """Test that both log files are created in the log directory."""
        setup_logging(log_dir=tmp_path)

        assert (tmp_path / "gender-condition.log").exists()
        assert (tmp_path / "gender-condition-error.log").exists()

    def test_level(self, tmp_path: Path) -> None:
        """Test that the package logger gets the requested level."""
        logger = setup_logging(log_dir=tmp_path, log_level="debug")
        assert logger.name == ROOT_LOGGER
        assert logger.level == logging.DEBUG

    def test_rejected_value_is_logged(self, tmp_path: Path, mr_facade, translator) -> None:
        """Test that validation failures reach the activity log only."""
        setup_logging(log_dir=tmp_path)
        condition = match_for_gender(mr_facade, translator)
        with pytest.raises(InvalidConditionValueError):
            condition.set_validators("==", "robot")

        activity = (tmp_path / "gender-condition.log").read_text()
        errors = (tmp_path / "gender-condition-error.log").read_text()
        assert "rejected value 'robot'" in activity
        assert errors == ""

    def test_evaluation_logged_at_debug(self, tmp_path: Path, mr_facade, translator) -> None:
        """Test that evaluations are logged when DEBUG is enabled."""
        setup_logging(log_dir=tmp_path, log_level="DEBUG")
        match_for_gender(mr_facade, translator).set_validators("==", "man").is_matching()

        activity = (tmp_path / "gender-condition.log").read_text()
        assert "MatchForGender: 'man' == 'man' -> True" in activity

    def test_errors_go_to_error_log(self, tmp_path: Path) -> None:
        """Test that ERROR records are written to the error log."""
        setup_logging(log_dir=tmp_path)
        logging.getLogger(f"{ROOT_LOGGER}.tests").error("boom")

        assert "boom" in (tmp_path / "gender-condition-error.log").read_text()
        assert "boom" in (tmp_path / "gender-condition.log").read_text()

    def test_setup_twice_does_not_duplicate(self, tmp_path: Path) -> None:
        """Test that re-initialising replaces handlers."""
        setup_logging(log_dir=tmp_path)
        logger = setup_logging(log_dir=tmp_path)
        assert len(logger.handlers) == 2

    def test_reset(self, tmp_path: Path) -> None:
        """Test that reset removes the handlers."""
        logger = setup_logging(log_dir=tmp_path)
        reset_logging()
        assert logger.handlers == []
