# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Reads the optional `--config` YAML file into an AocRunConfig.

The file has a `global:` section (config version, log level, log file) and an
optional `inputs:` section (cache root and path template, secrets file,
download source). See configs/aocrun.yaml for a complete example.

A bad file is reported before any input is fetched or any solution runs, and
the CLI exits with CONFIG_ERROR. Once a file was named on the command line
nothing falls back to the built-in defaults.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from aocrun.config.exceptions import ConfigLoadError, ConfigValidationError
from aocrun.config.schema import AocRunConfig


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Parse the config file into a dict of sections.

    Raises:
        ConfigLoadError: Missing or unreadable file, broken YAML, or a
            top level that is not a mapping of sections.
    """
    if not config_path.exists():
        raise ConfigLoadError(f"aocrun config not found: {config_path}")

    if not config_path.is_file():
        raise ConfigLoadError(f"aocrun config path is a directory, not a file: {config_path}")

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read aocrun config {config_path}: {err}") from err

    try:
        sections = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"aocrun config {config_path} is not valid YAML: {err}") from err

    if not isinstance(sections, dict):
        raise ConfigLoadError(
            f"aocrun config {config_path} must map section names (global, inputs) "
            f"to settings, got {type(sections).__name__}"
        )

    return sections


def load_config(config_path: Path) -> AocRunConfig:
    """
    Load the `--config` file.

    Raises:
        ConfigLoadError: The file could not be read or parsed.
        ConfigValidationError: A section or setting is missing, unknown, or
            has a bad value (for example a path template without `{day}`).
    """
    sections = _read_yaml_file(config_path)

    try:
        return AocRunConfig.model_validate(sections)
    except ValidationError as err:
        raise ConfigValidationError(f"Invalid settings in aocrun config {config_path}:\n{err}") from err
