import pytest
from streamlit.testing.v1 import AppTest

from core.context import SESSION_KEY, I18nContextError, use_translation


def landing_app():
    import streamlit as st
    from core.context import i18n_provider, use_translation

    i18n_provider(["en", "fr"], {"fr": {"Trending Posts": "Articles Tendances"}})
    st.header(use_translation().t("Trending Posts"))


def switch_app():
    import streamlit as st
    from core.context import i18n_provider, switch_language, t

    i18n_provider(["en", "fr"], {"fr": {"Trending Posts": "Articles Tendances"}})
    st.markdown(t("Trending Posts"))
    if st.button("Français", key="to_fr"):
        switch_language("fr")


def no_provider_app():
    from core.context import use_translation

    use_translation()


def unmount_app():
    import streamlit as st
    from core.context import i18n_provider, unmount_provider

    i18n_provider(["en", "fr"])
    if st.button("Unmount", key="unmount"):
        unmount_provider()


def test_use_translation_without_provider_raises():
    with pytest.raises(I18nContextError):
        use_translation()


def test_provider_renders_current_language():
    at = AppTest.from_function(landing_app)
    at.run()
    assert not at.exception
    assert at.header[0].value == "Trending Posts"
    assert at.session_state[SESSION_KEY].current_language == "en"


def test_provider_state_survives_reruns():
    at = AppTest.from_function(landing_app)
    at.run()
    state = at.session_state[SESSION_KEY]
    state.set_translation_language("fr")
    at.run()
    assert at.session_state[SESSION_KEY] is state
    assert at.header[0].value == "Articles Tendances"


def test_switch_language_rerenders_earlier_consumers():
    at = AppTest.from_function(switch_app)
    at.run()
    assert at.markdown[0].value == "Trending Posts"
    at.button(key="to_fr").click().run()
    assert not at.exception
    assert at.markdown[0].value == "Articles Tendances"
    assert at.session_state[SESSION_KEY].current_language == "fr"


def test_consumer_without_provider_reports_error():
    at = AppTest.from_function(no_provider_app)
    at.run()
    assert "No I18n context provided" in at.exception[0].value


def test_unmount_discards_state():
    at = AppTest.from_function(unmount_app)
    at.run()
    assert SESSION_KEY in at.session_state
    at.button(key="unmount").click().run()
    assert SESSION_KEY not in at.session_state
