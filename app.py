import streamlit as st

from core.context import i18n_provider, use_translation
from core.coverage import coverage_frame, coverage_summary
from core.i18n import load_translations_dir
from core.logging_config import setup_logging
from core.presets import DEMO_LANGUAGES, TRANSLATIONS_DIR
from core.version import __version__
from ui.trending import render_trending


def render_coverage():
    """Expander with per-language translation coverage."""
    i18n = use_translation()
    with st.expander(i18n.t("Translation coverage")):
        st.dataframe(coverage_summary(i18n))
        if st.checkbox("Show all keys", key="coverage_all_keys"):
            st.dataframe(coverage_frame(i18n))


def render_landing():
    i18n_provider(DEMO_LANGUAGES, load_translations_dir(TRANSLATIONS_DIR))
    render_trending()
    render_coverage()


def main():
    setup_logging()
    st.set_page_config(page_title="Trending Posts", layout="wide")
    st.caption(f"v{__version__}")
    render_landing()


if __name__ == "__main__":
    main()
