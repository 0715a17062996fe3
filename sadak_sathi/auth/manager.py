"""Login and password-reset flow.

This module centralizes the state behind the login screen: which of the four
views is showing (``login``, ``forgot``, ``otp``, ``reset_success``), the
fields typed so far, and the last error message. The Streamlit UI renders a
:class:`LoginFlow` and forwards button presses to it; the flow talks to the
simulated :class:`~sadak_sathi.auth.users.UserStore`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from sadak_sathi.auth.users import UserStore

logger = logging.getLogger(__name__)

# One-time password accepted by the demo reset flow
DEMO_OTP = "123456"

MIN_PASSWORD_LENGTH = 8

LOGIN_VIEWS = ("login", "forgot", "otp", "reset_success")


# ---------------------------------------------------------------------------
# Session identity / permissions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AuthStatus:
    logged_in: bool
    role: Optional[str]
    user_email: Optional[str]

    @classmethod
    def logged_out(cls) -> "AuthStatus":
        return cls(logged_in=False, role=None, user_email=None)


def can_show_settings(role: Optional[str]) -> bool:
    """Admins and super admins get the settings panel."""
    return role in ("admin", "superadmin")


def can_manage_users(role: Optional[str]) -> bool:
    return role == "superadmin"


def visible_sections(auth: AuthStatus, chat_enabled: bool) -> List[str]:
    """Sidebar sections offered to *auth*, in navigation order."""
    sections = ["Road/Bridge Status"]
    if can_manage_users(auth.role):
        sections.append("User Management")
    if chat_enabled:
        sections.append("AI Assistant")
    if can_show_settings(auth.role):
        sections.append("Settings")
    return sections


def validate_new_password(new_password: str, confirm_password: str) -> Optional[str]:
    """Return an error message, or ``None`` when the new password is acceptable."""
    if new_password != confirm_password:
        return "Passwords do not match."
    if len(new_password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
    return None


# ---------------------------------------------------------------------------
# Login screen state machine
# ---------------------------------------------------------------------------

class LoginFlow:
    """State of the login screen across reruns."""

    def __init__(self, store: Optional[UserStore] = None):
        self.store = store or UserStore()
        self.view = "login"
        self.email = ""
        self.error = ""
        self.otp_verified = False

    def _clear_reset_state(self) -> None:
        self.otp_verified = False

    def login(self, email: str, password: str) -> Optional[AuthStatus]:
        """Return the new identity on success; otherwise set :attr:`error`."""
        self.error = ""
        self.email = email
        result = self.store.login(email, password)
        if result["success"]:
            user = result["user"]
            return AuthStatus(logged_in=True, role=user["role"], user_email=user["email"])
        self.error = result["error"]
        return None

    def show_forgot(self) -> None:
        self.error = ""
        self.view = "forgot"

    def request_reset(self, email: str) -> bool:
        """Send (pretend) an OTP to *email* and move to the OTP view."""
        self.error = ""
        self.email = email
        result = self.store.find_user_by_email(email)
        if not result["success"]:
            self.error = result["error"]
            return False

        logger.info("Password reset requested for %s", email)
        self._clear_reset_state()
        self.view = "otp"
        return True

    def verify_otp(self, code: str) -> bool:
        self.error = ""
        if code == DEMO_OTP:
            self.otp_verified = True
            return True
        self.error = f"Invalid OTP code. Please use {DEMO_OTP} for this demo."
        return False

    def reset_password(self, new_password: str, confirm_password: str) -> bool:
        self.error = ""
        if self.view != "otp" or not self.otp_verified:
            self.error = "Please verify the OTP code first."
            return False

        problem = validate_new_password(new_password, confirm_password)
        if problem:
            self.error = problem
            return False

        result = self.store.reset_password(self.email, new_password)
        if not result["success"]:
            self.error = result["error"]
            return False

        logger.info("Password has been successfully reset for %s", self.email)
        self.view = "reset_success"
        return True

    def back_to_login(self) -> None:
        self.email = ""
        self.error = ""
        self._clear_reset_state()
        self.view = "login"
