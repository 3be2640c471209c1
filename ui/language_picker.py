import streamlit as st

from core.context import use_translation
from core.presets import FALLBACK_FLAG, LANGUAGE_FLAGS


def language_label(lang: str) -> str:
    """Flag plus language code, e.g. ``🇫🇷 fr``."""
    return f"{LANGUAGE_FLAGS.get(lang, FALLBACK_FLAG)} {lang}"


def _on_language_change(key: str) -> None:
    use_translation().set_translation_language(st.session_state[key])


def render_language_picker(label: str = "Select Language", key: str = "i18n_language"):
    """Selectbox over the supported languages; returns the current language.

    The widget value follows the shared state, so switches made elsewhere
    (``switch_language``, a button) show up in the picker on the next run.
    """
    i18n = use_translation()
    options = list(i18n.supported_languages)
    kwargs = {}
    if i18n.current_language in options:
        if st.session_state.get(key) != i18n.current_language:
            st.session_state[key] = i18n.current_language
    else:
        # unsupported language: show no selection
        st.session_state.pop(key, None)
        kwargs["index"] = None
    st.selectbox(
        i18n.t(label),
        options,
        format_func=language_label,
        key=key,
        on_change=_on_language_change,
        args=(key,),
        **kwargs,
    )
    return i18n.current_language
