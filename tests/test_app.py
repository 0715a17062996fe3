from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def test_logged_out_session_sees_login():
    at = AppTest.from_file(APP, default_timeout=30).run()
    assert not at.exception
    assert [s.value for s in at.subheader] == ["Welcome Back"]


def test_forgot_password_switches_view():
    at = AppTest.from_file(APP, default_timeout=30).run()
    _button(at, "Forgot Password?").click().run()
    assert not at.exception
    assert [s.value for s in at.subheader] == ["Reset Password"]
    assert at.session_state["login_flow"].view == "forgot"
