# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for command-line selection parsing.

Covers defaults, short and long flags, last-one-wins, help handling, and every
way a command line can be wrong.
"""

import pytest

from aocrun.config.schema import DEFAULT_YEAR
from aocrun.harness.selection import (
    HelpRequested,
    SelectionError,
    help_text,
    parse_selection,
)


class TestDefaults:
    def test_no_arguments_selects_everything_in_default_year(self) -> None:
        args = parse_selection([])
        assert args.criteria.year == DEFAULT_YEAR
        assert args.criteria.day is None
        assert args.criteria.part is None
        assert args.config_path is None
        assert args.log_level is None
        assert not args.list_only


class TestFlags:
    def test_short_flags(self) -> None:
        criteria = parse_selection(["-y", "2024", "-d", "5", "-p", "2"]).criteria
        assert (criteria.year, criteria.day, criteria.part) == (2024, 5, 2)

    def test_long_flags(self) -> None:
        criteria = parse_selection(["--year", "2024", "--day", "5", "--part", "1"]).criteria
        assert (criteria.year, criteria.day, criteria.part) == (2024, 5, 1)

    def test_last_occurrence_wins(self) -> None:
        criteria = parse_selection(["-d", "3", "--day", "7", "-d", "9"]).criteria
        assert criteria.day == 9

    def test_ambient_options(self) -> None:
        args = parse_selection(["--config", "c.yaml", "--log-level", "DEBUG", "--list"])
        assert args.config_path == "c.yaml"
        assert args.log_level == "DEBUG"
        assert args.list_only


class TestHelp:
    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_flag(self, flag: str) -> None:
        with pytest.raises(HelpRequested):
            parse_selection([flag])

    def test_help_stops_parsing(self) -> None:
        with pytest.raises(HelpRequested):
            parse_selection(["-d", "1", "-h", "--bogus"])

    def test_help_text_lists_options_and_examples(self) -> None:
        text = help_text()
        for option in ("--year", "--day", "--part", "--help"):
            assert option in text
        assert "Examples:" in text


class TestErrors:
    @pytest.mark.parametrize(
        "argv",
        [
            ["--bogus"],
            ["extra"],
            ["-y"],
            ["-d", "1", "--day"],
            ["-p"],
            ["-y", "twenty"],
            ["-d", "1.5"],
            ["--ye", "2024"],
            ["--log-level", "LOUD"],
            ["--bogus", "-h"],
            ["-y2024"],
            ["--day=5"],
            ["--year=2024"],
            ["-d", "-h"],
            ["--config", "--list"],
        ],
    )
    def test_malformed_command_lines(self, argv: list[str]) -> None:
        with pytest.raises(SelectionError):
            parse_selection(argv)

    @pytest.mark.parametrize(
        "argv",
        [["-p", "3"], ["-p", "0"], ["-d", "0"], ["-d", "26"], ["-y", "1999"]],
    )
    def test_out_of_range_values(self, argv: list[str]) -> None:
        with pytest.raises(SelectionError, match=r"--(part|day|year)"):
            parse_selection(argv)

    def test_error_before_help_is_reported(self) -> None:
        with pytest.raises(SelectionError):
            parse_selection(["-y", "abc", "-h"])

    def test_first_problem_wins_over_later_help(self) -> None:
        with pytest.raises(SelectionError, match="--bogus"):
            parse_selection(["-d", "1", "--bogus", "-h"])

    def test_help_before_problem_wins(self) -> None:
        with pytest.raises(HelpRequested):
            parse_selection(["--help", "-y2024", "--day=5"])

    def test_negative_value_is_a_range_error_not_a_flag(self) -> None:
        with pytest.raises(SelectionError, match="--day"):
            parse_selection(["-d", "-5"])
