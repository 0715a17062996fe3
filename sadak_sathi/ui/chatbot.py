"""Streamlit UI for the AI assistant - chat and route planning."""
from __future__ import annotations

from datetime import datetime

import streamlit as st

from sadak_sathi.config.settings import SETTINGS
from sadak_sathi.helpers.app_settings import AppSettings
from sadak_sathi.helpers.chat import ChatSession
from sadak_sathi.llms import get_client
from sadak_sathi.ui.dashboard import road_records


def _get_session(app_settings: AppSettings) -> ChatSession:
    if "chat_session" not in st.session_state:
        api_key = SETTINGS.gemini_api_key or app_settings.api_key_for("gemini")
        st.session_state.chat_session = ChatSession(
            road_records(), lambda: get_client("gemini", api_key)
        )
    return st.session_state.chat_session


def render_chatbot(app_settings: AppSettings) -> None:
    """Render the assistant; hidden entirely when disabled in settings."""
    if not app_settings.is_chat_enabled:
        return

    st.header("🤖 AI Assistant")
    session = _get_session(app_settings)

    if not session.ready:
        st.info(
            "The assistant needs live road and bridge data and a Gemini API key "
            "(GEMINI_API_KEY, or a key named 'Gemini' in settings)."
        )

    for message in session.messages:
        with st.chat_message("user" if message.sender == "user" else "assistant"):
            st.write(message.text)

    if user_input := st.chat_input("Ask about roads...", disabled=not session.ready):
        with st.spinner("Thinking..."):
            session.send(user_input)
        st.rerun()

    with st.expander("🗺️ Plan a route"):
        with st.form("route_form"):
            col_from, col_to = st.columns(2)
            origin = col_from.text_input("From")
            destination = col_to.text_input("To")
            submitted = st.form_submit_button("Plan route", disabled=not session.ready)
        if submitted:
            with st.spinner("Planning..."):
                reply = session.plan_route(origin, destination)
            if reply is None:
                st.warning("Enter both a starting point and a destination.")
            else:
                st.rerun()

    col_clear, col_export, _ = st.columns([1, 1, 2])
    with col_clear:
        if st.button("🗑️ Clear Chat", help="Clear conversation history"):
            session.clear()
            st.rerun()
    with col_export:
        st.download_button(
            "💾 Export Chat",
            session.export(),
            file_name=f"chat_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json",
            mime="application/json",
        )
