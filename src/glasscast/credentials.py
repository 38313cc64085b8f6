"""Bearer token storage.

The token is the only secret glasscast keeps.  Platform keychains are
plugged in by implementing :class:`CredentialStore`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Single-slot secret storage."""

    def put(self, secret: str) -> None:
        ...

    def get(self) -> str | None:
        ...

    def delete(self) -> None:
        ...


class MemoryCredentialStore:
    """Process-local credential store."""

    def __init__(self, secret: str | None = None) -> None:
        self._secret = secret

    def put(self, secret: str) -> None:
        self._secret = secret

    def get(self) -> str | None:
        return self._secret

    def delete(self) -> None:
        self._secret = None


class FileCredentialStore:
    """Credential store backed by a single owner-only (``0600``) file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def put(self, secret: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(secret)
        _logger.debug("Stored credential in %s", self._path)

    def get(self) -> str | None:
        try:
            secret = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return secret or None

    def delete(self) -> None:
        self._path.unlink(missing_ok=True)
