"""Common helper utilities used across the Streamlit app.

The helpers package holds side-effect-free business logic (filtering, the
settings model, the chat session) that the UI layer or the CLI can call.
"""
