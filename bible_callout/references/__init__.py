# bible_callout/references/__init__.py
"""
Scripture reference resolution and retrieval.

This package provides:
- BookCatalog / BookCatalogEntry: Static book list (names, aliases, chapters)
- Reference / ReferenceResolver: Parse "John 3:16-18" into a validated reference
- Verse / select_verses: Chapter data and verse-span selection
- BollsClient: Default chapter retrieval from bolls.life
- Translation catalog helpers
"""

from .errors import (
    BibleCalloutError,
    ParseError,
    InvalidVerseRangeError,
    UnknownBookError,
    InvalidChapterError,
    FetchError,
    EmptyChapterError,
    VerseNotFoundError,
)
from .books import (
    BookCatalog,
    BookCatalogEntry,
    load_catalog,
    reload_catalog,
    normalize_book_name,
)
from .reference_parser import (
    Reference,
    ReferenceResolver,
    parse_reference,
    is_valid_reference,
)
from .verse_selection import (
    Verse,
    ChapterVerses,
    find_verse,
    iter_verses,
    select_verses,
    to_chapter_verses,
)
from .translations import (
    Language,
    Translation,
    load_languages,
    find_translation,
    enabled_translations,
    available_translations,
)
from .bolls_client import BollsClient

__all__ = [
    # Errors
    "BibleCalloutError",
    "ParseError",
    "InvalidVerseRangeError",
    "UnknownBookError",
    "InvalidChapterError",
    "FetchError",
    "EmptyChapterError",
    "VerseNotFoundError",
    # Catalog
    "BookCatalog",
    "BookCatalogEntry",
    "load_catalog",
    "reload_catalog",
    "normalize_book_name",
    # Reference parsing
    "Reference",
    "ReferenceResolver",
    "parse_reference",
    "is_valid_reference",
    # Verses
    "Verse",
    "ChapterVerses",
    "find_verse",
    "iter_verses",
    "select_verses",
    "to_chapter_verses",
    # Translations
    "Language",
    "Translation",
    "load_languages",
    "find_translation",
    "enabled_translations",
    "available_translations",
    # bolls.life
    "BollsClient",
]
