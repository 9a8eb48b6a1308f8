# bible_callout/references/reference_parser.py
"""
Scripture reference parser.

Turns the text of a callout code block into a validated Reference:
- Chapter: "Psalm 23"
- Single verse: "John 3:16"
- Verse range: "Genesis 1:1-3"
- Numbered books: "1 John 3:16", "1John 3:16", "I John 3:16"
- Abbreviations: "Gen. 1:1", "1 Cor 13:4-7"
- Multi-word names: "Song of Solomon 2:1"
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from .books import BookCatalog, BookCatalogEntry, load_catalog
from .errors import (
    BibleCalloutError,
    InvalidChapterError,
    InvalidVerseRangeError,
    ParseError,
    UnknownBookError,
)

# Optional leading numeral, a book name of one or more words, the chapter,
# then optionally ":verse" or ":start-end". A word separator must be followed
# by letters, so it never overlaps the whitespace before the chapter.
REFERENCE_PATTERN = re.compile(
    r'^(\d?\s*[^\W\d_]+(?:[.\s]+[^\W\d_]+)*\.?)\s+(\d+)'
    r'(?::(\d+)(?:\s*[-–—]\s*(\d+))?)?$'
)


@dataclass(frozen=True)
class Reference:
    """
    A resolved, validated address of a chapter or verse span.

    Attributes:
        translation: Translation code (e.g., "NIV")
        book_id: 1-based position of the book in the catalog
        book: Catalog entry of the book
        chapter: Chapter number (1..book.chapters)
        verse_start: First verse, or None for the whole chapter
        verse_count: Number of verses from verse_start (ignored without it)
        catalog: Catalog book_id and book are checked against (bundled if None)
    """
    translation: str
    book_id: int
    book: BookCatalogEntry
    chapter: int
    verse_start: Optional[int] = None
    verse_count: int = 1
    catalog: Optional[BookCatalog] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        catalog = self.catalog if self.catalog is not None else load_catalog()
        if not 1 <= self.book_id <= len(catalog) or catalog.get(self.book_id) != self.book:
            raise ValueError(
                f"Book id {self.book_id} does not match {self.book.name} in the catalog"
            )
        if self.chapter < 1 or self.chapter > self.book.chapters:
            raise InvalidChapterError(self.book.name, self.chapter, self.book.chapters)
        if self.verse_start is not None and self.verse_start < 1:
            raise InvalidVerseRangeError(self.verse_start)
        if self.verse_count < 1:
            raise InvalidVerseRangeError(
                self.verse_start or 1,
                (self.verse_start or 1) + self.verse_count - 1,
            )

    @property
    def book_name(self) -> str:
        return self.book.name

    @property
    def key(self) -> str:
        """Cache key: translation, book and chapter (verses excluded)."""
        return f"{self.translation}-{self.book.name}-{self.chapter}"

    @property
    def is_chapter(self) -> bool:
        return self.verse_start is None

    @property
    def verse_end(self) -> Optional[int]:
        if self.verse_start is None:
            return None
        return self.verse_start + self.verse_count - 1

    @property
    def normalized(self) -> str:
        """Return normalized reference string ("John 3:16-18")."""
        if self.verse_start is None:
            return f"{self.book.name} {self.chapter}"
        if self.verse_count > 1:
            return f"{self.book.name} {self.chapter}:{self.verse_start}-{self.verse_end}"
        return f"{self.book.name} {self.chapter}:{self.verse_start}"

    def __str__(self) -> str:
        return f"{self.translation} - {self.book.name} {self.chapter}"

    @classmethod
    def parse(
        cls, translation: str, text: str, catalog: Optional[BookCatalog] = None
    ) -> "Reference":
        """Parse citation text against the given (or bundled) catalog."""
        return ReferenceResolver(catalog).parse(translation, text)


class ReferenceResolver:
    """
    Resolves citation text into References against a book catalog.

    Usage:
        resolver = ReferenceResolver()          # bundled catalog
        ref = resolver.parse("NIV", "John 3:16-18")
        ref.book_id, ref.verse_start, ref.verse_count   # (43, 16, 3)
    """

    def __init__(self, catalog: Optional[BookCatalog] = None):
        self.catalog = catalog if catalog is not None else load_catalog()

    def resolve(
        self,
        translation: str,
        book: str,
        chapter: int,
        verse_start: Optional[int] = None,
        verse_count: int = 1,
    ) -> Reference:
        """
        Build a Reference from already-split parts.

        Raises:
            UnknownBookError: If the book matches no name or alias
            InvalidChapterError: If the chapter is out of range for the book
            InvalidVerseRangeError: If the verse span is empty or starts at 0
        """
        found = self.catalog.find(book)
        if found is None:
            raise UnknownBookError(book.strip())

        book_id, entry = found
        return Reference(
            translation=translation,
            book_id=book_id,
            book=entry,
            chapter=chapter,
            verse_start=verse_start,
            verse_count=verse_count,
            catalog=self.catalog,
        )

    def parse(self, translation: str, text: str) -> Reference:
        """
        Parse a citation such as "John 3:16-18".

        Args:
            translation: Translation code the block was tagged with
            text: Citation text

        Returns:
            Reference

        Raises:
            ParseError: If the text does not look like a reference
            UnknownBookError: If the book is not in the catalog
            InvalidChapterError: If the chapter does not exist in the book
            InvalidVerseRangeError: If a range ends before it starts
        """
        match = REFERENCE_PATTERN.match((text or "").strip())
        if not match:
            raise ParseError("Invalid reference format")

        book, chapter, start, end = match.groups()

        if start is None:
            return self.resolve(translation, book, int(chapter))
        if end is None:
            return self.resolve(translation, book, int(chapter), int(start))

        # A reversed range yields a count < 1, rejected by Reference
        return self.resolve(
            translation, book, int(chapter), int(start), int(end) - int(start) + 1
        )


def parse_reference(
    translation: str, text: str, catalog: Optional[BookCatalog] = None
) -> Reference:
    """Parse citation text with the bundled (or given) catalog."""
    return ReferenceResolver(catalog).parse(translation, text)


def is_valid_reference(text: str, catalog: Optional[BookCatalog] = None) -> bool:
    """
    Check if a string is a valid scripture reference.

    Args:
        text: String to check

    Returns:
        True if valid reference, False otherwise
    """
    try:
        ReferenceResolver(catalog).parse("", text)
    except BibleCalloutError:
        return False
    return True
