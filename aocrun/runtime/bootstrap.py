# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for aocrun.

The one-time setup that happens before any solution runs:
  1. Validate the environment (Python version)
  2. Configure the package logger (level, optional log file)
  3. Log a startup line with the environment details
"""

import logging
from pathlib import Path
from typing import Optional

from aocrun.config.schema import GlobalConfig
from aocrun.logging.logger import PACKAGE_LOGGER, get_logger
from aocrun.runtime.environment import check_minimum_python, get_system_info


def bootstrap(config: GlobalConfig, log_level_override: Optional[str] = None) -> logging.Logger:
    """
    Run the bootstrap sequence.

    Args:
        config: The validated global configuration.
        log_level_override: Level from the command line; wins over the config file.

    Returns:
        The configured `aocrun` package logger.
    """
    check_minimum_python()

    log_file = None
    if config.log_file is not None:
        log_file = Path(config.log_file)

    logger = get_logger(
        PACKAGE_LOGGER,
        log_level=log_level_override or config.log_level,
        log_file=log_file,
    )

    system_info = get_system_info()
    logger.debug(
        "aocrun bootstrap complete",
        extra={
            "python_version": system_info.python_version,
            "implementation": system_info.implementation,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
        },
    )
    return logger
