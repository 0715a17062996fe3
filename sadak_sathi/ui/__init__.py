"""UI components for the Streamlit app.

Each module inside `ui` focuses purely on presentation / user interaction
logic, delegating data access and decisions to the `helpers`, `auth` and
`sheets` packages.
"""
