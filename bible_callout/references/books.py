# bible_callout/references/books.py
"""
Static book catalog.

The catalog is an ordered list of books; a book's 1-based id is its
position + 1, which matches the numbering used by bolls.life. The
bundled catalog lives in data/books.yml and can be replaced with the
BIBLE_CALLOUT_BOOKS_FILE environment variable.
"""

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_BOOKS_FILE = os.path.join(
    os.path.dirname(os.path.dirname(__file__)),
    'data',
    'books.yml'
)


@dataclass(frozen=True)
class BookCatalogEntry:
    """
    A single book of the catalog.

    Attributes:
        name: Canonical book name (e.g., "Genesis", "1 John")
        aliases: Alternative names, matched case-insensitively
        chapters: Number of chapters in the book
    """
    name: str
    aliases: Tuple[str, ...] = ()
    chapters: int = 1


def normalize_book_name(name: str) -> str:
    """
    Normalize a book token for catalog lookup.

    Lowercases, removes periods and collapses whitespace:
    "1  Cor." -> "1 cor"
    """
    key = name.lower().replace(".", "").strip()
    return re.sub(r'\s+', ' ', key)


class BookCatalog:
    """
    Read-only, ordered collection of books.

    Usage:
        catalog = BookCatalog([
            BookCatalogEntry("Genesis", ("gen",), 50),
            BookCatalogEntry("Exodus", ("ex",), 40),
        ])

        book_id, entry = catalog.find("gen")   # (1, Genesis)
        catalog.get(2).name                    # "Exodus"
    """

    def __init__(self, entries: Iterable[BookCatalogEntry], version: str = "1"):
        self.entries: Tuple[BookCatalogEntry, ...] = tuple(entries)
        self.version = str(version)
        self._index: Dict[str, int] = {}

        for position, entry in enumerate(self.entries):
            if entry.chapters < 1:
                raise ValueError(f"Book {entry.name} must have at least one chapter")
            for token in (entry.name, *entry.aliases):
                key = normalize_book_name(token)
                if key in self._index:
                    other = self.entries[self._index[key]].name
                    raise ValueError(
                        f"Duplicate book name or alias '{token}' ({entry.name} / {other})"
                    )
                self._index[key] = position

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[BookCatalogEntry]:
        return iter(self.entries)

    def find(self, token: str) -> Optional[Tuple[int, BookCatalogEntry]]:
        """
        Look up a book by name or alias.

        Args:
            token: Book name as written by the user ("Gen.", "1 john", "I John")

        Returns:
            (book_id, entry) tuple, or None if nothing matches
        """
        key = normalize_book_name(token)
        position = self._index.get(key)

        # "1 john" may only be listed as "1john"
        if position is None:
            position = self._index.get(key.replace(" ", ""))

        if position is None:
            return None
        return position + 1, self.entries[position]

    def get(self, book_id: int) -> BookCatalogEntry:
        """Return the entry for a 1-based book id."""
        if book_id < 1 or book_id > len(self.entries):
            raise IndexError(f"Book id {book_id} out of range 1-{len(self.entries)}")
        return self.entries[book_id - 1]

    @classmethod
    def from_dict(cls, data: dict) -> "BookCatalog":
        """Build a catalog from parsed YAML data ({"version": ..., "books": [...]})."""
        entries = [
            BookCatalogEntry(
                name=str(book["name"]),
                aliases=tuple(str(alias) for alias in book.get("aliases") or ()),
                chapters=int(book["chapters"]),
            )
            for book in data.get("books", [])
        ]
        return cls(entries, version=data.get("version", "1"))


@lru_cache(maxsize=None)
def load_catalog(path: Optional[str] = None) -> BookCatalog:
    """
    Load the book catalog from YAML (once per path).

    Args:
        path: Catalog file. Defaults to BIBLE_CALLOUT_BOOKS_FILE or the
              bundled data/books.yml.

    Returns:
        BookCatalog
    """
    path = path or os.getenv("BIBLE_CALLOUT_BOOKS_FILE") or DEFAULT_BOOKS_FILE

    with open(path, 'r', encoding='utf-8') as f:
        catalog = BookCatalog.from_dict(yaml.safe_load(f) or {})

    logger.debug(f"Loaded book catalog v{catalog.version} ({len(catalog)} books) from {path}")
    return catalog


def reload_catalog(path: Optional[str] = None) -> BookCatalog:
    """Clear cache and reload the catalog."""
    load_catalog.cache_clear()
    return load_catalog(path)
