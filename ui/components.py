import streamlit as st

from core.context import use_translation


def page_title(title: str) -> None:
    """Render a translated section heading."""
    st.header(use_translation().t(title), anchor=False)
    st.divider()
