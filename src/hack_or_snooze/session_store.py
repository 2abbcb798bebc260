from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("hack_or_snooze")


@dataclass(frozen=True)
class Credentials:
    token: str
    username: str


class SessionStore(ABC):
    """Abstract base class for somewhere to keep the signed-in credentials."""

    @abstractmethod
    def load(self) -> Optional[Credentials]:
        """Return the stored credentials, or None if nothing is stored."""
        pass

    @abstractmethod
    def save(self, credentials: Credentials) -> None:
        """Replace the stored credentials."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored credentials."""
        pass


class MemorySessionStore(SessionStore):
    def __init__(self, credentials: Optional[Credentials] = None):
        self.credentials = credentials

    def load(self) -> Optional[Credentials]:
        return self.credentials

    def save(self, credentials: Credentials) -> None:
        self.credentials = credentials

    def clear(self) -> None:
        self.credentials = None


class FileSessionStore(SessionStore):
    """Keeps ``token`` and ``username`` in a small JSON file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Optional[Credentials]:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (IOError, json.JSONDecodeError) as e:
            logger.warning("Failed to read session file %s: %s", self.path, e)
            return None

        token = data.get("token") if isinstance(data, dict) else None
        username = data.get("username") if isinstance(data, dict) else None
        if not token or not username:
            logger.debug("Session file %s holds no credentials", self.path)
            return None
        return Credentials(token=token, username=username)

    def save(self, credentials: Credentials) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        # owner-only from creation; the token is a bearer credential
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # O_CREAT mode does not apply to a file that already exists
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump({"token": credentials.token, "username": credentials.username}, f)
        logger.info("Saved session for %s to %s", credentials.username, self.path)

    def clear(self) -> None:
        try:
            os.unlink(self.path)
            logger.info("Removed session file %s", self.path)
        except FileNotFoundError:
            pass
