# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for aocrun tests.

Fixtures here are available to every test file automatically. Nothing in the
suite touches the network: HTTP goes through `httpx.MockTransport`.
"""

import logging
import textwrap
from pathlib import Path
from typing import Callable, Iterator

import httpx
import pytest

from aocrun.config.schema import InputsConfig
from aocrun.harness.registry import SolutionRegistry
from aocrun.logging.logger import PACKAGE_LOGGER

SAMPLE_INPUT = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """
    Undo whatever bootstrap() did to the package logger.

    CLI tests configure it with a handler bound to that test's captured
    stderr; later tests must start from a clean, propagating logger so
    caplog sees their records.
    """
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """The smallest config file that passes schema validation."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """A config file that's valid YAML but fails schema validation (missing required field)."""
    config_content = textwrap.dedent("""\
        global:
          log_level: "INFO"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file


@pytest.fixture()
def secrets_file(tmp_path: Path) -> Path:
    """A secrets file holding a usable session cookie."""
    path = tmp_path / ".env"
    path.write_text("# local secrets\nAOC_SESSION=abc123\n", encoding="utf-8")
    return path


@pytest.fixture()
def inputs_config(tmp_path: Path, secrets_file: Path) -> InputsConfig:
    """Input settings rooted in a temp directory."""
    return InputsConfig(
        root=str(tmp_path),
        secrets_file=str(secrets_file),
        base_url="https://aoc.test",
    )


class RecordingHandler:
    """MockTransport handler that records requests and replays a fixed response."""

    def __init__(self, status_code: int = 200, body: bytes = SAMPLE_INPUT.encode("utf-8")) -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)


@pytest.fixture()
def recording_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture()
def make_registry() -> Callable[..., SolutionRegistry]:
    """
    Build a sealed registry from (year, day) pairs.

    Part 1 answers `p1:<year>/<day>`, part 2 answers `p2:<year>/<day>`, so
    tests can tell exactly which function produced a result.
    """

    def _make(*keys: tuple[int, int]) -> SolutionRegistry:
        registry = SolutionRegistry()
        for year, day in keys:
            registry.register(
                year,
                day,
                lambda text, y=year, d=day: f"p1:{y}/{d}",
                lambda text, y=year, d=day: f"p2:{y}/{d}",
            )
        return registry.seal()

    return _make
