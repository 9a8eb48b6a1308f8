# bible_callout/references/translations.py
"""
Translation catalog.

Languages and their translations, in the shape bolls.life publishes them:
[{"language": "English", "translations": [{"short_name": "KJV", "full_name": ...}]}]
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

import yaml

from ..config import CalloutSettings

DEFAULT_TRANSLATIONS_FILE = os.path.join(
    os.path.dirname(os.path.dirname(__file__)),
    'data',
    'translations.yml'
)


@dataclass(frozen=True)
class Translation:
    short_name: str
    full_name: str = ""


@dataclass(frozen=True)
class Language:
    language: str
    translations: Tuple[Translation, ...] = ()


def languages_from_list(data: Iterable[dict]) -> List[Language]:
    """Build Language objects from parsed JSON/YAML data."""
    return [
        Language(
            language=str(item["language"]),
            translations=tuple(
                Translation(
                    short_name=str(t["short_name"]),
                    full_name=str(t.get("full_name", "")),
                )
                for t in item.get("translations") or ()
            ),
        )
        for item in data
    ]


@lru_cache(maxsize=1)
def load_languages() -> Tuple[Language, ...]:
    """Load the bundled language list."""
    with open(DEFAULT_TRANSLATIONS_FILE, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return tuple(languages_from_list(data.get("languages", [])))


def find_translation(
    short_name: str, languages: Optional[Iterable[Language]] = None
) -> Optional[Translation]:
    """Find a translation by code (case-insensitive)."""
    short_name = short_name.lower()
    for language in languages if languages is not None else load_languages():
        for translation in language.translations:
            if translation.short_name.lower() == short_name:
                return translation
    return None


def enabled_translations(
    settings: CalloutSettings, languages: Optional[Iterable[Language]] = None
) -> List[Translation]:
    """
    Translations the user has enabled, across all languages, sorted by code.

    These are the code-block tags a host registers callout processors for.
    Unknown codes are skipped.
    """
    selected = set(settings.selected_translations)
    found = {}
    for language in languages if languages is not None else load_languages():
        for translation in language.translations:
            if translation.short_name in selected:
                found.setdefault(translation.short_name, translation)
    return sorted(found.values(), key=lambda t: t.short_name.lower())


def available_translations(
    settings: CalloutSettings, languages: Optional[Iterable[Language]] = None
) -> List[Translation]:
    """Translations of the selected language that are not enabled yet."""
    selected = set(settings.selected_translations)
    for language in languages if languages is not None else load_languages():
        if language.language == settings.selected_language:
            return sorted(
                (t for t in language.translations if t.short_name not in selected),
                key=lambda t: t.short_name.lower(),
            )
    return []
