"""Translation coverage helpers."""
from __future__ import annotations

from typing import Dict, List

import pandas as pd

from core.i18n import I18nState


def _all_keys(state: I18nState) -> List[str]:
    keys = set()
    for table in state.translations.values():
        keys.update(table)
    return sorted(keys)


def missing_translations(state: I18nState) -> Dict[str, List[str]]:
    """Keys known in any language but missing from each supported language."""
    keys = _all_keys(state)
    tables = state.translations
    return {
        lang: [k for k in keys if k not in tables.get(lang, {})]
        for lang in state.supported_languages
    }


def coverage_frame(state: I18nState) -> pd.DataFrame:
    """Boolean key x language grid of which translations exist."""
    keys = _all_keys(state)
    tables = state.translations
    data = {
        lang: [k in tables.get(lang, {}) for k in keys]
        for lang in state.supported_languages
    }
    frame = pd.DataFrame(data, index=pd.Index(keys, name="key"), dtype=bool)
    return frame.reindex(columns=list(state.supported_languages))


def coverage_summary(state: I18nState) -> pd.DataFrame:
    """Per-language counts of translated and missing keys."""
    frame = coverage_frame(state)
    total = len(frame.index)
    translated = frame.sum(axis=0).astype(int)
    summary = pd.DataFrame(
        {
            "translated": translated,
            "missing": total - translated,
        }
    )
    summary["coverage_pct"] = (
        (summary["translated"] / total * 100).round(1) if total else 100.0
    )
    summary.index.name = "language"
    return summary
