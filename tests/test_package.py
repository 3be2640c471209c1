import logging

import i18n_provider
from core.logging_config import HANDLER_NAME, LOGGING_LEVELS, setup_logging


def test_public_api():
    state = i18n_provider.I18nState(["en", "fr"], {"fr": {"Go To Blog": "Aller au blog"}})
    state.set_translation_language("fr")
    assert state.t("Go To Blog") == "Aller au blog"
    assert i18n_provider.__version__
    assert issubclass(i18n_provider.I18nContextError, RuntimeError)


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert added[0].get_name() == HANDLER_NAME
        assert logging.getLogger("streamlit").level == LOGGING_LEVELS["streamlit"]
        assert logging.getLogger("core").level == logging.INFO
    finally:
        root.setLevel(level)
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
