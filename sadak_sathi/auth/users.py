"""Simulated user credential backend.

Stands in for a real authentication server. It is deliberately NOT backed by
the spreadsheet so the user tabs never serve as a password source. Every call
sleeps for ``auth_latency_sec`` to mimic a network round-trip and returns a
``{"success": ..., ...}`` envelope like the HTTP API it imitates.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from sadak_sathi.config.settings import SETTINGS

logger = logging.getLogger(__name__)

ROLES = ("guest", "admin", "superadmin", "user")

DEMO_PASSWORD = "password123"


@dataclass
class StoredUser:
    email: str
    password: str
    role: str


def default_users() -> List[StoredUser]:
    return [
        StoredUser("superadmin@app.com", DEMO_PASSWORD, "superadmin"),
        StoredUser("admin@app.com", DEMO_PASSWORD, "admin"),
        StoredUser("user@app.com", DEMO_PASSWORD, "user"),
    ]


class UserStore:
    """In-memory credential store with simulated latency."""

    def __init__(
        self,
        users: Optional[Iterable[StoredUser]] = None,
        latency_sec: float | None = None,
    ):
        self._users = list(users) if users is not None else default_users()
        self._latency = SETTINGS.auth_latency_sec if latency_sec is None else latency_sec

    def _delay(self) -> None:
        if self._latency > 0:
            time.sleep(self._latency)

    def _find(self, email: str) -> Optional[StoredUser]:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def login(self, email: str, password: str) -> Dict[str, Any]:
        self._delay()
        user = self._find(email)
        if user and user.password == password:
            logger.info("Login succeeded for %s (%s)", email, user.role)
            return {"success": True, "user": {"email": user.email, "role": user.role}}
        logger.info("Login rejected for %s", email)
        return {"success": False, "error": "Invalid email or password."}

    def find_user_by_email(self, email: str) -> Dict[str, Any]:
        self._delay()
        if self._find(email):
            return {"success": True}
        return {"success": False, "error": "No account found with that email address."}

    def reset_password(self, email: str, new_password: str) -> Dict[str, Any]:
        self._delay()
        user = self._find(email)
        if user:
            user.password = new_password
            logger.info("Password reset for %s", email)
            return {"success": True}
        return {"success": False, "error": "An unknown error occurred."}
