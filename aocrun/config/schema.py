# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for aocrun.

Two kinds of configuration live here:
  - the optional YAML file (`--config`), which controls logging and where
    puzzle inputs come from and are cached
  - the run selection (year / day / part) parsed from the command line

Every model is a frozen pydantic model. Once the CLI has resolved what to run
and how, nothing downstream is allowed to change it.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_VERSION = "1.0.0"
DEFAULT_YEAR = 2025
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class GlobalConfig(BaseModel):
    """
    Cross-cutting settings: schema version and logging.

    The `--log-level` flag takes precedence over `log_level` when both are given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}")
        return upper


class InputsConfig(BaseModel):
    """
    Where puzzle inputs are cached and how they are fetched when missing.

    The cache path for a (year, day) is `root / path_template.format(year=..., day=...)`.
    A relative `secrets_file` is resolved against `root` as well.
    The template is the only thing that decides the file layout, so it must
    mention both fields or two different days would collide on one file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    root: str = Field(
        default=".",
        description="Directory the path template is resolved against",
    )
    path_template: str = Field(
        default="inputs/{year}/day_{day:02d}.txt",
        description="str.format template for the per-day cache file",
    )
    secrets_file: str = Field(
        default=".env",
        description="KEY=value file holding the session cookie, relative to root unless absolute",
    )
    session_key: str = Field(
        default="AOC_SESSION",
        min_length=1,
        description="Key in the secrets file whose value is the session cookie",
    )
    base_url: str = Field(
        default="https://adventofcode.com",
        description="Remote source; inputs live at <base_url>/<year>/day/<day>/input",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Timeout for the single input download attempt",
    )
    user_agent: str = Field(
        default="aocrun/0.1.0",
        description="User-Agent header sent with input downloads",
    )

    @field_validator("path_template")
    @classmethod
    def template_names_year_and_day(cls, value: str) -> str:
        if "{year" not in value or "{day" not in value:
            raise ValueError("path_template must reference both {year} and {day}")
        try:
            value.format(year=DEFAULT_YEAR, day=1)
        except (KeyError, IndexError, ValueError) as err:
            raise ValueError(f"path_template is not a valid format string: {err}") from err
        return value

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class AocRunConfig(BaseModel):
    """
    Top-level config container, one section per concern.

    A YAML file needs at least the `global:` section; `inputs:` falls back to
    the defaults above when it is left out.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    inputs: InputsConfig = Field(default_factory=InputsConfig)


def default_config() -> AocRunConfig:
    """The configuration used when no `--config` file is given."""
    return AocRunConfig.model_validate({"global": {"config_version": DEFAULT_CONFIG_VERSION}})


class SelectionCriteria(BaseModel):
    """
    Which solutions to run. `None` for day or part is the wildcard.

    Year is always concrete; it defaults to the current event.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    year: int = Field(default=DEFAULT_YEAR, ge=2015, description="Event year")
    day: Optional[Annotated[int, Field(ge=1, le=25)]] = Field(
        default=None, description="Puzzle day, None for all"
    )
    part: Optional[Annotated[int, Field(ge=1, le=2)]] = Field(
        default=None, description="Puzzle part, None for both"
    )

    def matches(self, year: int, day: int) -> bool:
        """True if a registered (year, day) falls inside this selection."""
        if year != self.year:
            return False
        return self.day is None or day == self.day

    def includes_part(self, part: int) -> bool:
        return self.part is None or self.part == part

    def describe(self) -> str:
        """One-line human summary, used for the run banner."""
        if self.day is None:
            return f"Running all available solutions for year {self.year}"
        text = f"Running Year {self.year} Day {self.day}"
        if self.part is not None:
            text += f" Part {self.part}"
        return text
