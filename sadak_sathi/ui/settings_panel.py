"""Streamlit UI for the settings panel.

Super admins get the full control set; admins get a read-only notice. The
panel edits the session's :class:`~sadak_sathi.helpers.app_settings.AppSettings`.
"""
from __future__ import annotations

import streamlit as st

from sadak_sathi.auth.manager import AuthStatus
from sadak_sathi.helpers.app_settings import AppSettings, Credential


def get_app_settings() -> AppSettings:
    if "app_settings" not in st.session_state:
        st.session_state.app_settings = AppSettings()
    return st.session_state.app_settings


def _credential_rows(items: list[Credential], masked: bool, key_prefix: str, on_remove) -> None:
    if not items:
        st.caption("Nothing stored yet.")
    for item in items:
        col_name, col_value, col_action = st.columns([2, 3, 1])
        col_name.markdown(f"**{item.name}**")
        col_value.text_input(
            item.name,
            value=item.display_value(masked),
            type="password" if masked else "default",
            disabled=True,
            label_visibility="collapsed",
            key=f"{key_prefix}_value_{item.id}",
        )
        if col_action.button("Remove", key=f"{key_prefix}_remove_{item.id}"):
            on_remove(item.id)
            st.rerun()


def _render_super_admin(settings: AppSettings) -> None:
    st.subheader("Super Admin Controls")

    st.markdown("#### UI Customization")
    color = st.color_picker("Background Color", value=settings.background_color)
    if color != settings.background_color:
        settings.set_background_color(color)
        st.rerun()

    st.markdown("#### AI Features")
    enabled = st.toggle("Enable AI Chat Assistant", value=settings.is_chat_enabled)
    if enabled != settings.is_chat_enabled:
        settings.is_chat_enabled = enabled
        st.rerun()

    st.markdown("#### API Key Management")
    st.warning(
        "**Security Warning:** Never expose API keys on the frontend. This UI is for "
        "demonstration only. Use a secure backend to store and use keys."
    )
    def _remove_api_key(credential_id: int) -> None:
        settings.remove_api_key(credential_id)
        # The assistant picks its key when it is created
        st.session_state.pop("chat_session", None)

    _credential_rows(settings.api_keys, True, "api", _remove_api_key)
    with st.form("add_api_key", clear_on_submit=True):
        col_name, col_value = st.columns(2)
        name = col_name.text_input("API Name (e.g., Gemini)")
        value = col_value.text_input("API Key Value", type="password")
        if st.form_submit_button("Add Key"):
            if settings.add_api_key(name, value):
                st.session_state.pop("chat_session", None)
                st.rerun()
            st.error("Both a name and a value are required.")

    st.markdown("#### Google Sheet IDs")
    _credential_rows(settings.sheet_ids, False, "sheet", settings.remove_sheet_id)
    with st.form("add_sheet_id", clear_on_submit=True):
        col_name, col_value = st.columns(2)
        name = col_name.text_input("Sheet Name (e.g., Main Data)")
        value = col_value.text_input("Sheet ID Value")
        if st.form_submit_button("Add Sheet ID"):
            if settings.add_sheet_id(name, value):
                st.rerun()
            st.error("Both a name and a value are required.")


def _render_admin() -> None:
    st.subheader("Admin Settings")
    st.write("You have limited administrative access.")
    st.write("View reports and manage user-submitted content.")


def render_settings_panel(auth: AuthStatus, on_logout) -> None:
    """Render settings for *auth*'s role, with a logout footer."""
    st.header("⚙️ Settings")
    settings = get_app_settings()

    if auth.role == "superadmin":
        _render_super_admin(settings)
    elif auth.role == "admin":
        _render_admin()

    st.divider()
    col_who, col_logout = st.columns([3, 1])
    col_who.markdown(f"Logged in as: **{auth.role}**")
    if col_logout.button("Logout", key="settings_logout"):
        on_logout()
        st.rerun()
