# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Puzzle input cache.

`InputCache.ensure` is the only way the harness gets a puzzle input:

  1. If the cache file exists, its content is returned. The network is never
     touched for a cached day, and the file is never refreshed or overwritten.
  2. Otherwise the session cookie is loaded (once per cache instance). Without
     one there is nothing to do but report it and move on.
  3. Otherwise exactly one authenticated GET is made. Redirects are followed,
     nothing is retried.
  4. A 200 response body is written verbatim to the cache path and returned.

Every failure along the way (no cookie, transport error, non-200 status,
unwritable or unreadable file) is logged and reported as `ok=False`. A single
day's input problem must never take the rest of the run down with it.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import httpx

from aocrun.config.schema import InputsConfig
from aocrun.inputs.credentials import Credential, load_credential
from aocrun.utils.filesystem import atomic_write_bytes, safe_read

logger = logging.getLogger(__name__)

NOT_AVAILABLE_STATUS = 404
BAD_SESSION_STATUSES = frozenset({400})


def build_http_client(settings: InputsConfig, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """
    Create the HTTP client used for input downloads.

    One client is shared by the whole run. `transport` exists so tests can
    plug in `httpx.MockTransport` instead of touching the network.
    """
    return httpx.Client(
        timeout=settings.timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )


def _describe_status(status_code: int, day: int) -> str:
    if status_code == NOT_AVAILABLE_STATUS:
        return f"Day {day} input not yet available"
    if status_code in BAD_SESSION_STATUSES or status_code >= 500:
        return "Invalid session cookie or server error"
    return "Unexpected response from input server"


class InputCache:
    """
    File-backed cache of puzzle inputs with download-on-miss.

    Args:
        settings: Where files go and where they come from.
        client: HTTP client for downloads, see `build_http_client`.
        credential_loader: Returns the session cookie. Defaults to reading
            `secrets_path()`. Called at most once per instance, and only
            when a download is actually needed.
    """

    def __init__(
        self,
        settings: InputsConfig,
        client: httpx.Client,
        credential_loader: Optional[Callable[[], Credential]] = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._credential_loader = credential_loader or self._load_from_secrets_file
        self._credential: Optional[Credential] = None

    def secrets_path(self) -> Path:
        """The secrets file, resolved against the same root as the cache files."""
        return Path(self._settings.root) / self._settings.secrets_file

    def _load_from_secrets_file(self) -> Credential:
        return load_credential(self.secrets_path(), self._settings.session_key)

    @property
    def credential(self) -> Credential:
        if self._credential is None:
            self._credential = self._credential_loader()
        return self._credential

    def path_for(self, year: int, day: int) -> Path:
        """Deterministic cache location for a (year, day)."""
        relative = self._settings.path_template.format(year=year, day=day)
        return Path(self._settings.root) / relative

    def url_for(self, year: int, day: int) -> str:
        return f"{self._settings.base_url}/{year}/day/{day}/input"

    def ensure(self, year: int, day: int, path: Optional[Path] = None) -> tuple[str, bool]:
        """
        Return the input for (year, day), downloading and caching it if needed.

        Args:
            year: Event year.
            day: Puzzle day.
            path: Cache file location. Defaults to `path_for(year, day)`.

        Returns:
            `(content, True)` on success, `("", False)` on any failure.
        """
        if path is None:
            path = self.path_for(year, day)

        if path.exists():
            return self._read_cached(year, day, path)

        credential = self.credential
        if not credential.available:
            logger.warning(
                "Cannot fetch input: no valid session cookie",
                extra={"year": year, "day": day, "path": str(path)},
            )
            return "", False

        return self._fetch(year, day, path, credential)

    def _read_cached(self, year: int, day: int, path: Path) -> tuple[str, bool]:
        try:
            content = safe_read(path)
        except (OSError, UnicodeDecodeError) as err:
            logger.warning(
                "Could not read cached input",
                extra={"year": year, "day": day, "path": str(path), "error": str(err)},
            )
            return "", False

        logger.debug("Input file already exists", extra={"year": year, "day": day, "path": str(path)})
        return content, True

    def _fetch(self, year: int, day: int, path: Path, credential: Credential) -> tuple[str, bool]:
        url = self.url_for(year, day)
        logger.info("Fetching input", extra={"year": year, "day": day, "url": url})

        try:
            response = self._client.get(url, headers={"Cookie": f"session={credential.token}"})
        except httpx.HTTPError as err:
            logger.error(
                "Input request failed",
                extra={"year": year, "day": day, "url": url, "error": str(err)},
            )
            return "", False

        if response.status_code != 200:
            logger.error(
                "HTTP request failed",
                extra={
                    "year": year,
                    "day": day,
                    "status": response.status_code,
                    "reason": _describe_status(response.status_code, day),
                },
            )
            return "", False

        body = response.content
        try:
            content = body.decode("utf-8")
        except UnicodeDecodeError as err:
            logger.error(
                "Input response is not valid UTF-8 text",
                extra={"year": year, "day": day, "error": str(err)},
            )
            return "", False

        try:
            atomic_write_bytes(path, body)
        except OSError as err:
            logger.error(
                "Failed to save input file",
                extra={"year": year, "day": day, "path": str(path), "error": str(err)},
            )
            return "", False

        logger.info(
            "Successfully fetched input",
            extra={"year": year, "day": day, "path": str(path), "bytes": len(body)},
        )
        return content, True
