"""Translation store: supported languages, translation table and ``t``."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from core.presets import DEFAULT_LANGUAGE, DEFAULT_SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

TranslationTable = Dict[str, Dict[str, str]]


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


class I18nConfig(BaseModel):
    """Construction-time configuration for an :class:`I18nState`."""

    supported_languages: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SUPPORTED_LANGUAGES)
    )
    translations: TranslationTable = Field(default_factory=dict)

    @field_validator("supported_languages", mode="before")
    @classmethod
    def _dedupe_languages(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return list(dict.fromkeys(value))
        return value

    @field_validator("translations", mode="before")
    @classmethod
    def _narrow_payloads(cls, value: Any) -> Any:
        # JSON-like payloads may carry numbers or nested values as leaves
        if not isinstance(value, Mapping):
            return value
        narrowed: Dict[str, Any] = {}
        for lang, table in value.items():
            if isinstance(table, Mapping):
                narrowed[lang] = {str(k): _as_text(v) for k, v in table.items()}
            else:
                logger.warning(
                    "Ignoring translations for '%s': expected a mapping, got %s",
                    lang,
                    type(table).__name__,
                )
                narrowed[lang] = {}
        return narrowed


class I18nState:
    """Language-scoped string lookup shared by every consumer of a provider.

    ``current_language`` starts at the first supported language (``"en"``
    when none are given) and can be overwritten with any code. ``t`` never
    fails: a key without a translation in the current language comes back
    unchanged.
    """

    def __init__(
        self,
        supported_languages: Optional[Iterable[str]] = None,
        translations: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> None:
        config = I18nConfig(
            supported_languages=(
                list(supported_languages)
                if supported_languages is not None
                else list(DEFAULT_SUPPORTED_LANGUAGES)
            ),
            translations=dict(translations or {}),
        )
        self._supported = tuple(config.supported_languages)
        self._translations: TranslationTable = config.translations
        self.current_language: str = (
            self._supported[0] if self._supported else DEFAULT_LANGUAGE
        )

    @classmethod
    def from_config(cls, config: I18nConfig) -> "I18nState":
        return cls(config.supported_languages, config.translations)

    @property
    def supported_languages(self) -> tuple:
        return self._supported

    @property
    def translations(self) -> TranslationTable:
        """Return a copy of the translation table."""
        return {lang: dict(table) for lang, table in self._translations.items()}

    def is_supported(self, lang: str) -> bool:
        return lang in self._supported

    def set_translation_language(self, lang: str) -> None:
        """Make ``lang`` the current language.

        Codes outside ``supported_languages`` are accepted as-is; ``t`` then
        falls back to the untranslated keys.
        """
        if lang not in self._supported:
            logger.warning(
                "Switching to unsupported language '%s' (supported: %s)",
                lang,
                ", ".join(self._supported),
            )
        if lang != self.current_language:
            logger.info("Translation language: %s -> %s", self.current_language, lang)
        self.current_language = lang

    def t(self, key: str) -> str:
        """Translate ``key`` into the current language."""
        table = self._translations.get(self.current_language)
        if table is not None and key in table:
            return table[key]
        logger.debug("Missing translation for '%s' [%s]", key, self.current_language)
        return key

    def __repr__(self) -> str:
        return (
            f"I18nState(current_language={self.current_language!r}, "
            f"supported_languages={list(self._supported)!r})"
        )


@lru_cache()
def _read_translations(path: str) -> TranslationTable:
    file = Path(path)
    try:
        with file.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Translation file not found: %s", file)
        return {}
    return I18nConfig(translations=data).translations


@lru_cache()
def _read_translations_dir(directory) -> TranslationTable:
    translations: Dict[str, Any] = {}
    for path in sorted(Path(directory).glob("*.json")):
        with path.open("r", encoding="utf-8") as f:
            translations[path.stem] = json.load(f)
    if not translations:
        logger.warning("No translation files found in %s", directory)
    return I18nConfig(translations=translations).translations


def _copy_table(table: TranslationTable) -> TranslationTable:
    return {lang: dict(strings) for lang, strings in table.items()}


def load_translations(path: str) -> TranslationTable:
    """Load a ``{lang: {key: value}}`` table from a JSON file.

    Files are read once per path; each call returns a fresh copy.
    """
    return _copy_table(_read_translations(str(path)))


def load_translations_dir(directory) -> TranslationTable:
    """Load one ``<lang>.json`` table per language from ``directory``."""
    return _copy_table(_read_translations_dir(Path(directory)))
