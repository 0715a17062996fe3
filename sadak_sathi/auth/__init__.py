"""Authentication helpers.

This sub-package exposes the login flow and the simulated user store via::

    from sadak_sathi.auth import LoginFlow, UserStore
"""

from importlib import import_module
from typing import Any

_EXPORTS = {
    "UserStore": "sadak_sathi.auth.users",
    "StoredUser": "sadak_sathi.auth.users",
    "ROLES": "sadak_sathi.auth.users",
    "AuthStatus": "sadak_sathi.auth.manager",
    "LoginFlow": "sadak_sathi.auth.manager",
    "DEMO_OTP": "sadak_sathi.auth.manager",
    "can_show_settings": "sadak_sathi.auth.manager",
    "can_manage_users": "sadak_sathi.auth.manager",
    "visible_sections": "sadak_sathi.auth.manager",
    "validate_new_password": "sadak_sathi.auth.manager",
}


def __getattr__(name: str) -> Any:  # noqa: D401
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    mod = import_module(_EXPORTS[name])
    value = getattr(mod, name)
    globals()[name] = value  # cache
    return value


__all__ = list(_EXPORTS)
