"""Streamlit UI for the login screen.

Renders whichever of the four login views the session's
:class:`~sadak_sathi.auth.manager.LoginFlow` is on. All decisions live in the
flow object; this module only draws forms and forwards submissions.
"""
from __future__ import annotations

import streamlit as st

from sadak_sathi.auth.manager import DEMO_OTP, AuthStatus, LoginFlow
from sadak_sathi.auth.users import DEMO_PASSWORD, UserStore


def _get_flow() -> LoginFlow:
    # The store outlives the flow so a reset password survives logout
    if "user_store" not in st.session_state:
        st.session_state.user_store = UserStore()
    if "login_flow" not in st.session_state:
        st.session_state.login_flow = LoginFlow(st.session_state.user_store)
    return st.session_state.login_flow


def _show_error(flow: LoginFlow) -> None:
    if flow.error:
        st.error(flow.error)


def _back_link(flow: LoginFlow, key: str) -> None:
    if st.button("Back to Login", key=key):
        flow.back_to_login()
        st.rerun()


def _render_login(flow: LoginFlow) -> None:
    st.subheader("Welcome Back")
    _show_error(flow)

    with st.form("login_form"):
        email = st.text_input("Email", value=flow.email)
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login", use_container_width=True)

    if submitted:
        with st.spinner("Logging in..."):
            status = flow.login(email.strip(), password)
        if status:
            st.session_state.auth = status
            del st.session_state["login_flow"]
        st.rerun()

    if st.button("Forgot Password?"):
        flow.show_forgot()
        st.rerun()

    with st.expander("Demo credentials"):
        st.markdown(
            f"""
- Super Admin: `superadmin@app.com`
- Admin: `admin@app.com`
- User: `user@app.com`
- Initial Password: `{DEMO_PASSWORD}`
"""
        )


def _render_forgot(flow: LoginFlow) -> None:
    st.subheader("Reset Password")
    st.write("Enter your email to receive a one-time password (OTP).")
    _show_error(flow)

    with st.form("forgot_form"):
        email = st.text_input("Email", value=flow.email)
        submitted = st.form_submit_button("Send OTP", use_container_width=True)

    if submitted:
        with st.spinner("Sending..."):
            flow.request_reset(email.strip())
        st.rerun()

    _back_link(flow, "forgot_back")


def _render_otp(flow: LoginFlow) -> None:
    st.subheader("Reset Password")
    _show_error(flow)

    if not flow.otp_verified:
        st.write("An OTP has been sent to your email. For this demo, please use the code below.")
        st.info(f"Demo OTP Code: `{DEMO_OTP}`")
        with st.form("otp_form"):
            code = st.text_input("OTP Code")
            submitted = st.form_submit_button("Verify OTP", use_container_width=True)
        if submitted:
            flow.verify_otp(code.strip())
            st.rerun()
    else:
        st.success("OTP Verified. Please set your new password.")
        with st.form("new_password_form"):
            new_password = st.text_input("New Password", type="password")
            confirm_password = st.text_input("Confirm Password", type="password")
            submitted = st.form_submit_button("Reset Password", use_container_width=True)
        if submitted:
            with st.spinner("Resetting..."):
                flow.reset_password(new_password, confirm_password)
            st.rerun()

    _back_link(flow, "otp_back")


def _render_reset_success(flow: LoginFlow) -> None:
    st.subheader("Password Reset Successful!")
    st.write("Your password has been changed. You can now log in with your new password.")
    _back_link(flow, "success_back")


def render_login() -> None:
    """Render the login screen for a logged-out session."""
    st.title("🛣️ Sadak Sathi")
    flow = _get_flow()

    _, col_form, _ = st.columns([1, 2, 1])
    with col_form:
        if flow.view == "login":
            _render_login(flow)
        elif flow.view == "forgot":
            _render_forgot(flow)
        elif flow.view == "otp":
            _render_otp(flow)
        elif flow.view == "reset_success":
            _render_reset_success(flow)


def logout() -> None:
    """Forget the session identity and everything loaded under it."""
    for key in ("road_result", "user_result", "chat_session", "app_settings"):
        st.session_state.pop(key, None)
    st.session_state.auth = AuthStatus.logged_out()
