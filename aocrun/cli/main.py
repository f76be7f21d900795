# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for aocrun.

Usage:
    aocrun                          # every registered day of the default year
    aocrun -y 2025 -d 1             # one day, both parts
    aocrun --year 2024 --day 5 -p 2
    aocrun --config configs/aocrun.yaml --log-level DEBUG

Exit codes (see exit_codes.py): 0 on success or `--help`, 1 on a bad command
line, 2 on a bad config file, 3 if the run itself blew up.
"""

import sys
from typing import Optional, Sequence, TextIO

import httpx

from aocrun.cli.commands import handle_run
from aocrun.cli.exit_codes import SUCCESS, USER_ERROR
from aocrun.harness.registry import SolutionRegistry
from aocrun.harness.selection import HelpRequested, SelectionError, help_text, parse_selection


def run_cli(
    argv: Optional[Sequence[str]] = None,
    registry: Optional[SolutionRegistry] = None,
    transport: Optional[httpx.BaseTransport] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Parse argv, run, and return the exit code.

    The keyword arguments let tests drive the whole program in-process with
    their own registry, a mock HTTP transport and captured streams.
    """
    out = stdout if stdout is not None else sys.stdout
    err_out = stderr if stderr is not None else sys.stderr

    try:
        args = parse_selection(sys.argv[1:] if argv is None else argv)
    except HelpRequested:
        out.write(help_text())
        return SUCCESS
    except SelectionError as err:
        err_out.write(f"Error: {err}\n\n")
        err_out.write(help_text())
        return USER_ERROR

    return handle_run(args, registry=registry, transport=transport, stdout=out)


def main() -> None:
    """Console script entrypoint (pyproject.toml's [project.scripts])."""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
