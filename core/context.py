"""Session-scoped i18n context for Streamlit render functions.

The provider stores one :class:`I18nState` in ``st.session_state`` so every
render function in the script can reach it without threading it through
arguments. The state is created on the first run of a session and reused on
each rerun; a language switch followed by a rerun re-renders every consumer.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

import streamlit as st

from core.i18n import I18nState

logger = logging.getLogger(__name__)

SESSION_KEY = "i18n_state"


class I18nContextError(RuntimeError):
    """Raised when a consumer asks for translations without a provider."""


def i18n_provider(
    supported_languages: Optional[Iterable[str]] = None,
    translations: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> I18nState:
    """Mount the i18n context for this session and return the shared state."""
    state = st.session_state.get(SESSION_KEY)
    if state is None:
        state = I18nState(supported_languages, translations)
        st.session_state[SESSION_KEY] = state
        logger.info("Mounted i18n provider: %r", state)
    return state


def use_translation() -> I18nState:
    """Return the shared state mounted by :func:`i18n_provider`."""
    state = st.session_state.get(SESSION_KEY)
    if state is None:
        raise I18nContextError("No I18n context provided")
    return state


def t(key: str) -> str:
    """Translate ``key`` with the mounted context."""
    return use_translation().t(key)


def switch_language(lang: str, rerun: bool = True) -> None:
    """Switch the active language and re-render the app."""
    use_translation().set_translation_language(lang)
    if rerun:
        st.rerun()


def unmount_provider() -> None:
    if st.session_state.pop(SESSION_KEY, None) is not None:
        logger.info("Unmounted i18n provider")
