import logging

import streamlit as st

from sadak_sathi.auth.manager import AuthStatus, visible_sections

# UI modules
from sadak_sathi.ui.chatbot import render_chatbot
from sadak_sathi.ui.dashboard import render_status_dashboard, render_user_management
from sadak_sathi.ui.login import logout, render_login
from sadak_sathi.ui.settings_panel import get_app_settings, render_settings_panel

logging.basicConfig(level=logging.INFO)


def _apply_background(color: str) -> None:
    st.markdown(
        f"""
    <style>
    .stApp {{
        background-color: {color};
    }}
    .main-header {{
        padding: 1rem 1.5rem;
        border-radius: 8px;
        margin-bottom: 1.5rem;
        border-left: 4px solid #d62828;
        background: rgba(248, 249, 250, 0.85);
    }}
    .main-header h1 {{
        color: #333;
        margin: 0;
        font-size: 2rem;
        font-weight: 600;
    }}
    </style>
    """,
        unsafe_allow_html=True,
    )


def main():
    st.set_page_config(
        page_title="Sadak Sathi",
        page_icon="🛣️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    auth = st.session_state.get("auth") or AuthStatus.logged_out()
    if not auth.logged_in:
        render_login()
        return

    app_settings = get_app_settings()
    _apply_background(app_settings.background_color)

    st.markdown(
        """
    <div class="main-header">
        <h1>🛣️ Sadak Sathi</h1>
    </div>
    """,
        unsafe_allow_html=True,
    )

    with st.sidebar:
        st.markdown(f"**{auth.user_email}**")
        st.caption(f"Role: {auth.role}")
        section = st.radio("Navigate", visible_sections(auth, app_settings.is_chat_enabled))
        st.divider()
        if st.button("Logout", use_container_width=True):
            logout()
            st.rerun()

    # Route to appropriate section
    if section == "Road/Bridge Status":
        render_status_dashboard()
    elif section == "User Management":
        render_user_management()
    elif section == "AI Assistant":
        render_chatbot(app_settings)
    elif section == "Settings":
        render_settings_panel(auth, logout)


if __name__ == "__main__":
    main()
