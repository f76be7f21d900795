# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Session cookie loading.

Puzzle inputs are personal, so downloading one needs the account's session
cookie. It lives in a local KEY=value secrets file (`.env` by default, see
`.env.example`):

    # comment
    AOC_SESSION=53616c7465645f5f...

A missing cookie is a normal state, not an error: inputs that are already
cached keep working, and the ones that are not get skipped with a warning.
That is why `load_credential` never raises for absent files or keys.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SESSION_KEY = "AOC_SESSION"
PLACEHOLDER_TOKEN = "your_session_cookie_here"


@dataclass(frozen=True)
class Credential:
    """An opaque session token. Empty means "fetching is unavailable"."""

    token: str = ""

    @property
    def available(self) -> bool:
        return bool(self.token)

    def __repr__(self) -> str:
        # Keep the cookie out of logs and tracebacks.
        return f"Credential(available={self.available})"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1].strip()
    return value


def _find_value(lines: list[str], key: str) -> str | None:
    """Return the value of the first `key=...` line, or None if there is none."""
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        name, sep, value = line.partition("=")
        if sep and name.strip() == key:
            return _unquote(value.strip())
    return None


def load_credential(secrets_file: Path, key: str = DEFAULT_SESSION_KEY) -> Credential:
    """
    Read the session cookie from a KEY=value secrets file.

    Blank lines and `#` comments are skipped. The first line whose key matches
    wins; its value is trimmed and a single pair of surrounding quotes is
    dropped. If the file is missing or unreadable, the key is absent, or the
    value is empty or still the placeholder from `.env.example`, an empty
    Credential comes back and a warning is logged.

    Args:
        secrets_file: Path to the secrets file.
        key: Name of the entry holding the cookie.

    Returns:
        The Credential, possibly empty.
    """
    try:
        lines = secrets_file.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        logger.warning(
            "Secrets file not found, cannot fetch inputs automatically. "
            "Copy .env.example to .env and add your session cookie.",
            extra={"secrets_file": str(secrets_file)},
        )
        return Credential()
    except (OSError, UnicodeDecodeError) as err:
        logger.warning(
            "Could not read secrets file",
            extra={"secrets_file": str(secrets_file), "error": str(err)},
        )
        return Credential()

    value = _find_value(lines, key)
    if value is None:
        logger.warning(
            "Session key not found in secrets file",
            extra={"secrets_file": str(secrets_file), "key": key},
        )
        return Credential()

    if not value or value == PLACEHOLDER_TOKEN:
        logger.warning(
            "Session key is not configured in secrets file",
            extra={"secrets_file": str(secrets_file), "key": key},
        )
        return Credential()

    logger.debug("Session cookie loaded", extra={"secrets_file": str(secrets_file)})
    return Credential(token=value)
