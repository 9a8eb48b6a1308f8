# bible_callout/references/errors.py
"""
Error taxonomy for reference resolution and verse retrieval.

Messages are written to be shown to the user as-is (they replace the
"Loading..." placeholder in a rendered callout).
"""

from typing import Optional


class BibleCalloutError(Exception):
    """Base exception for all bible_callout errors."""
    pass


class ParseError(BibleCalloutError):
    """Raised when citation text does not match the reference grammar."""
    pass


class InvalidVerseRangeError(ParseError):
    """Raised when a verse number is zero or a range ends before it starts."""

    def __init__(self, start: int, end: Optional[int] = None):
        self.start = start
        self.end = end
        if end is None:
            message = f"Invalid verse number {start}"
        else:
            message = f"Invalid verse range {start}-{end}"
        super().__init__(message)


class UnknownBookError(BibleCalloutError):
    """Raised when the book token matches no catalog name or alias."""

    def __init__(self, book: str):
        self.book = book
        super().__init__(f"Invalid book name: {book}")


class InvalidChapterError(BibleCalloutError):
    """Raised when a chapter is outside [1, chapter count] for its book."""

    def __init__(self, book: str, chapter: int, max_chapter: int):
        self.book = book
        self.chapter = chapter
        self.max_chapter = max_chapter
        super().__init__(
            f"Invalid chapter number: {book} has {max_chapter} "
            f"chapter{'s' if max_chapter != 1 else ''}, got {chapter}"
        )


class FetchError(BibleCalloutError):
    """Raised when the text-retrieval collaborator fails."""
    pass


class EmptyChapterError(BibleCalloutError):
    """Raised when retrieval succeeded but returned no verses."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("No verses found")


class VerseNotFoundError(BibleCalloutError):
    """Raised when a requested verse number is absent from the chapter data."""

    def __init__(self, verse: int):
        self.verse = verse
        super().__init__(f"Could not find verse {verse}")
