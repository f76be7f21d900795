# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Command handlers for the aocrun CLI.

`handle_run` is the whole program once argv has been parsed: load config,
bootstrap logging, run the selection, print the table. Diagnostics go through
the structured logger (stderr); the banner and the results table are the only
things written to stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import httpx

from aocrun.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS
from aocrun.config.exceptions import ConfigError
from aocrun.config.loader import load_config
from aocrun.config.schema import AocRunConfig, SelectionCriteria, default_config
from aocrun.harness.registry import SolutionRegistry
from aocrun.harness.reporting import render_table
from aocrun.harness.runner import run_selection
from aocrun.harness.selection import CliArguments
from aocrun.inputs.cache import InputCache, build_http_client
from aocrun.runtime.bootstrap import bootstrap

BANNER = "Advent of Code - Python Solutions\n================================\n"


def _load_and_bootstrap(args: CliArguments) -> tuple[int, Optional[AocRunConfig], logging.Logger]:
    """
    The shared setup: load config (if one was given), then bootstrap logging.

    Returns a tuple of (exit_code, config, logger). If exit_code is not SUCCESS,
    the caller should return it immediately.
    """
    if args.config_path is None:
        config = default_config()
        return SUCCESS, config, bootstrap(config.global_config, args.log_level)

    try:
        config = load_config(Path(args.config_path))
    except ConfigError as err:
        logger = bootstrap(default_config().global_config, args.log_level)
        logger.error(
            "Configuration error",
            extra={"config": args.config_path, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    return SUCCESS, config, bootstrap(config.global_config, args.log_level)


def format_listing(criteria: SelectionCriteria, registry: SolutionRegistry) -> str:
    """Registered days for the selected year, one line."""
    days = registry.days(criteria.year)
    if not days:
        known = ", ".join(str(year) for year in registry.years()) or "none"
        return f"No solutions registered for {criteria.year} (registered years: {known})\n"
    return f"Registered days for {criteria.year}: {', '.join(str(day) for day in days)}\n"


def handle_run(
    args: CliArguments,
    registry: Optional[SolutionRegistry] = None,
    transport: Optional[httpx.BaseTransport] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Run the selected solutions and print the results table.

    Args:
        args: Parsed command line.
        registry: Solutions to choose from. Defaults to every shipped solution.
        transport: HTTP transport override for input downloads (tests).
        stdout: Where the banner and table go. Defaults to sys.stdout.
    """
    out = stdout if stdout is not None else sys.stdout

    exit_code, config, logger = _load_and_bootstrap(args)
    if exit_code != SUCCESS or config is None:
        return exit_code

    if registry is None:
        from aocrun.solutions import build_registry

        registry = build_registry()

    try:
        criteria = args.criteria

        if args.list_only:
            out.write(format_listing(criteria, registry))
            return SUCCESS

        out.write(BANNER)
        out.write(criteria.describe() + "\n")
        logger.info(
            "Run started",
            extra={"year": criteria.year, "day": criteria.day, "part": criteria.part},
        )

        with build_http_client(config.inputs, transport=transport) as client:
            cache = InputCache(config.inputs, client)
            results = run_selection(criteria, registry, cache)

        out.write("\n")
        out.write(render_table(results))
        logger.info("Run finished", extra={"results": len(results)})
        return SUCCESS

    except Exception as err:
        logger.error("Run failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR
