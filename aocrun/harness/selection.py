# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Command-line selection parsing.

Turns argv into a validated SelectionCriteria (plus the handful of ambient
options the CLI needs). Two outcomes are not a selection at all:

  - HelpRequested: `-h/--help` was given. Parsing stops right there, tokens
    after it are not looked at. The CLI prints usage and exits 0.
  - SelectionError: a flag is missing its value, a value is not an integer or
    is out of range, or a token is not recognised. The CLI prints the error
    and usage and exits 1.

Tokens are checked strictly left to right before argparse sees them, so
whichever of help or an error comes first decides the outcome: `-h --bogus`
is help, `--bogus -h` is an error. Every flag and its value are separate
tokens. `-y2024`, `--day=5` and abbreviations like `--ye` are unknown tokens.
Repeated flags are allowed and the last one wins.
"""

import argparse
from dataclasses import dataclass
from typing import Any, NoReturn, Optional, Sequence

from pydantic import ValidationError

from aocrun.config.schema import DEFAULT_YEAR, SelectionCriteria

PROG = "aocrun"

_EPILOG = f"""\
Examples:
  {PROG}                            # Run all days of {DEFAULT_YEAR}
  {PROG} -y 2025 -d 1               # Run day 1 of 2025
  {PROG} --year 2024 --day 5 -p 2   # Run 2024 day 5 part 2
  {PROG} -d 10                      # Run day 10 of {DEFAULT_YEAR} (default year)
"""

_HELP_FLAGS = frozenset({"-h", "--help"})
_INT_FLAGS = frozenset({"-y", "--year", "-d", "--day", "-p", "--part"})
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VALUE_FLAGS = _INT_FLAGS | {"--config", "--log-level"}
_SWITCH_FLAGS = frozenset({"--list"})
_KNOWN_FLAGS = _HELP_FLAGS | _VALUE_FLAGS | _SWITCH_FLAGS


class SelectionError(Exception):
    """The command line could not be turned into a selection."""


class HelpRequested(Exception):
    """`-h/--help` was given."""


@dataclass(frozen=True)
class CliArguments:
    """Everything the CLI resolved from argv."""

    criteria: SelectionCriteria
    config_path: Optional[str] = None
    log_level: Optional[str] = None
    list_only: bool = False


class _SelectionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and calling sys.exit."""

    def error(self, message: str) -> NoReturn:
        raise SelectionError(message)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> NoReturn:  # type: ignore[no-untyped-def]
        raise HelpRequested()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Also used to render the help text."""
    parser = _SelectionParser(
        prog=PROG,
        description="Advent of Code solution runner.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-y",
        "--year",
        type=int,
        default=DEFAULT_YEAR,
        metavar="YEAR",
        help=f"Specify year (default: {DEFAULT_YEAR})",
    )
    parser.add_argument(
        "-d",
        "--day",
        type=int,
        default=None,
        metavar="DAY",
        help="Specify day (1-25, default: all days)",
    )
    parser.add_argument(
        "-p",
        "--part",
        type=int,
        default=None,
        metavar="PART",
        help="Specify part (1-2, default: both parts)",
    )
    parser.add_argument(
        "-h",
        "--help",
        action=_HelpAction,
        help="Show this help message",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="PATH",
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=_LOG_LEVELS,
        help="Set the logging verbosity level (overrides the config file).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_only",
        help="List registered solutions for the selected year and exit.",
    )
    return parser


def help_text() -> str:
    return build_parser().format_help()


def _scan_tokens(argv: Sequence[str]) -> None:
    """
    Walk argv once, left to right, and stop at the first help flag or problem.

    argparse on its own collects unknown tokens until the end and accepts
    attached values (`-y2024`, `--year=2024`), so a bad token followed by
    `-h` would turn into help. This pass settles that before argparse runs.
    Values are checked here too, so `-y abc -h` is an error and not help.

    Raises:
        HelpRequested: `-h/--help` came before any problem.
        SelectionError: The first bad token.
    """
    tokens = list(argv)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token in _HELP_FLAGS:
            raise HelpRequested()
        if token not in _KNOWN_FLAGS:
            raise SelectionError(f"unrecognized argument: {token}")
        index += 1
        if token not in _VALUE_FLAGS:
            continue

        if index >= len(tokens) or tokens[index] in _KNOWN_FLAGS:
            raise SelectionError(f"argument {token}: expected one argument")
        value = tokens[index]
        if token in _INT_FLAGS:
            try:
                int(value)
            except ValueError:
                raise SelectionError(f"argument {token}: invalid int value: '{value}'") from None
        elif token == "--log-level" and value not in _LOG_LEVELS:
            raise SelectionError(
                f"argument {token}: invalid choice: '{value}' (choose from {', '.join(_LOG_LEVELS)})"
            )
        index += 1


def _format_validation_error(err: ValidationError) -> str:
    problems = []
    for issue in err.errors():
        field_name = str(issue["loc"][0]) if issue["loc"] else "selection"
        problems.append(f"--{field_name}: {issue['msg']}")
    return "; ".join(problems)


def parse_selection(argv: Sequence[str]) -> CliArguments:
    """
    Parse command-line tokens into CliArguments.

    Args:
        argv: The arguments after the program name.

    Returns:
        The validated selection and ambient options.

    Raises:
        HelpRequested: `-h/--help` was reached.
        SelectionError: Anything about argv is wrong.
    """
    _scan_tokens(argv)
    parser = build_parser()
    namespace = parser.parse_args(list(argv))

    try:
        criteria = SelectionCriteria(year=namespace.year, day=namespace.day, part=namespace.part)
    except ValidationError as err:
        raise SelectionError(_format_validation_error(err)) from err

    return CliArguments(
        criteria=criteria,
        config_path=namespace.config,
        log_level=namespace.log_level,
        list_only=namespace.list_only,
    )
