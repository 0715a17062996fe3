"""Streamlit UI for the road/bridge status table and user directory."""
from __future__ import annotations

from typing import Any, Dict, List

import streamlit as st

from sadak_sathi.helpers.status import (
    STATUS_FILTERS,
    STATUS_LABELS,
    filter_records,
    records_frame,
    status_counts,
    users_frame,
)
from sadak_sathi.sheets import SheetClient


def load_road_data(force: bool = False) -> Dict[str, Any]:
    """Fetch road/bridge rows once per session (or again when *force*)."""
    if force or "road_result" not in st.session_state:
        with st.spinner("Loading live data from Google Sheets..."):
            st.session_state["road_result"] = SheetClient().get_road_and_bridge_data()
        # The assistant is grounded in this data; rebuild it on the next visit
        st.session_state.pop("chat_session", None)
    return st.session_state["road_result"]


def road_records() -> List[Dict[str, Any]]:
    result = load_road_data()
    return result["data"] if result["success"] else []


def render_status_dashboard() -> None:
    """Render search, status filter and the combined road/bridge table."""
    col_title, col_refresh = st.columns([4, 1])
    with col_title:
        st.header("Road/Bridge Status")
    with col_refresh:
        refresh = st.button("🔄 Refresh", help="Reload live data")

    result = load_road_data(force=refresh)
    if not result["success"]:
        st.error(result["error"])
        return

    records = result["data"]

    search_term = st.text_input("Search by name...", key="status_search")
    status_filter = st.radio(
        "Status",
        [key for key in STATUS_FILTERS if key != "all"] + ["all"],
        format_func=lambda key: STATUS_LABELS[key],
        index=3,
        horizontal=True,
        key="status_filter",
    )

    counts = status_counts(records)
    cols = st.columns(len(STATUS_FILTERS))
    for col, key in zip(cols, ("all", "blocked", "one-lane", "resumed")):
        col.metric(STATUS_LABELS[key], counts[key])

    filtered = filter_records(records, status_filter, search_term)
    if not filtered:
        st.info("No roads or bridges match the current filter.")
        return

    st.dataframe(records_frame(filtered), use_container_width=True, hide_index=True)
    st.caption(f"Showing {len(filtered)} of {len(records)} entries")


def render_user_management() -> None:
    """Render the spreadsheet-backed user directory (super admins only)."""
    st.header("User Management")

    reload = st.button("🔄 Reload users")
    if reload or "user_result" not in st.session_state:
        with st.spinner("Loading users from Google Sheets..."):
            st.session_state["user_result"] = SheetClient().get_admin_and_user_data()

    result = st.session_state["user_result"]
    if not result["success"]:
        st.error(result["error"])
        return

    users = result["data"]
    if not users:
        st.info("No users found in the spreadsheet.")
        return

    st.dataframe(users_frame(users), use_container_width=True, hide_index=True)
    st.caption(f"{len(users)} accounts")
