"""Persistence helpers for the Single Responsibility vignette.

Why this lives in adapters:
- Files and URLs are infrastructure details.
- `PersistenceManager` has no idea what a `Journal` is. All it knows is that
  the object handed in renders itself with `str()`. Music players, slot
  machines, anything with a text form can reuse it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.interfaces.persistable import Persistable

logger = logging.getLogger(__name__)


class PersistenceManager:
    """Save/load text renderings of objects."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def preprocess(self, obj: Persistable) -> Persistable:
        """Pre-persistence hook. Subclasses may redact or reformat."""

        return obj

    def save_to_file(self, obj: Persistable, file_name: Path | str) -> Path:
        """Write `str(obj)` to `file_name` in one synchronous write (UTF-8).

        Errors (permissions, bad paths) propagate to the caller.
        """

        output_path = Path(file_name)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        content = str(self.preprocess(obj))
        output_path.write_text(content, encoding="utf-8")
        logger.info("Saved %d chars to %s", len(content), output_path)
        return output_path

    def load_from_file(self, file_name: Path | str) -> str:
        path = Path(file_name)
        content = path.read_text(encoding="utf-8")
        logger.info("Loaded %d chars from %s", len(content), path)
        return content

    def load_from_url(self, url: str, *, client: httpx.Client | None = None) -> str:
        """Fetch a text rendering over HTTP.

        Raises `httpx.HTTPStatusError` on non-2xx responses.
        """

        if client is None:
            with build_client(self._settings) as owned:
                return self._fetch(owned, url)
        return self._fetch(client, url)

    @staticmethod
    def _fetch(client: httpx.Client, url: str) -> str:
        response = client.get(url)
        response.raise_for_status()
        logger.info("Loaded %d chars from %s", len(response.text), url)
        return response.text
