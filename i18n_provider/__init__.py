"""Internationalization context for Streamlit apps.

Mount the provider once near the top of the script and translate anywhere
below it::

    from i18n_provider import i18n_provider, use_translation

    i18n_provider(["en", "fr"], {"fr": {"Trending Posts": "Articles Tendances"}})
    st.header(use_translation().t("Trending Posts"))
"""

from core.context import (
    I18nContextError,
    i18n_provider,
    switch_language,
    t,
    unmount_provider,
    use_translation,
)
from core.i18n import I18nConfig, I18nState, load_translations, load_translations_dir
from core.version import __version__

__all__ = [
    "I18nConfig",
    "I18nContextError",
    "I18nState",
    "__version__",
    "i18n_provider",
    "load_translations",
    "load_translations_dir",
    "switch_language",
    "t",
    "unmount_provider",
    "use_translation",
]
