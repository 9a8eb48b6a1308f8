"""
bible_callout: scripture callouts for note-taking hosts.

Example:
    from bible_callout import ReferenceResolver, VerseCache, build_callout

    resolver = ReferenceResolver()
    cache = VerseCache()

    callout = await build_callout("NIV", "John 3:16-18", resolver, cache)
    print(callout.title)      # "NIV - John 3"
"""

from .references import (
    BibleCalloutError,
    ParseError,
    InvalidVerseRangeError,
    UnknownBookError,
    InvalidChapterError,
    FetchError,
    EmptyChapterError,
    VerseNotFoundError,
    BookCatalog,
    BookCatalogEntry,
    load_catalog,
    Reference,
    ReferenceResolver,
    parse_reference,
    Verse,
    ChapterVerses,
    iter_verses,
    select_verses,
    BollsClient,
)
from .cache import VerseCache
from .callout import Callout, build_callout, build_code_block
from .config import CalloutSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "BibleCalloutError",
    "ParseError",
    "InvalidVerseRangeError",
    "UnknownBookError",
    "InvalidChapterError",
    "FetchError",
    "EmptyChapterError",
    "VerseNotFoundError",
    "BookCatalog",
    "BookCatalogEntry",
    "load_catalog",
    "Reference",
    "ReferenceResolver",
    "parse_reference",
    "Verse",
    "ChapterVerses",
    "iter_verses",
    "select_verses",
    "BollsClient",
    "VerseCache",
    "Callout",
    "build_callout",
    "build_code_block",
    "CalloutSettings",
    "load_settings",
]
