# bible_callout/references/verse_selection.py
"""
Verse data and verse-span selection.

A chapter is a tuple of Verse objects in source order. Verse numbers are
usually 1..N at offsets 0..N-1, but sources occasionally skip or merge
verses, so lookups always match on Verse.number.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .errors import FetchError, VerseNotFoundError

LINE_BREAK = "<br/>"


@dataclass(frozen=True)
class Verse:
    """A single verse. Text may contain <br/> line-break markers."""
    number: int
    text: str

    @property
    def lines(self) -> List[str]:
        """Split the text at line-break markers."""
        return self.text.split(LINE_BREAK)

    @classmethod
    def from_dict(cls, data: Any) -> "Verse":
        """
        Build a Verse from a retrieval payload item ({"verse": 16, "text": "..."}).

        Raises:
            FetchError: If the item is not a verse object
        """
        if isinstance(data, Verse):
            return data
        try:
            number = int(data["verse"])
            text = data["text"]
        except (KeyError, TypeError, ValueError) as e:
            raise FetchError(f"Malformed verse data: {data!r}") from e
        if not isinstance(text, str):
            raise FetchError(f"Malformed verse text for verse {number}")
        return cls(number=number, text=text)


ChapterVerses = Tuple[Verse, ...]


def to_chapter_verses(items: Iterable[Any]) -> ChapterVerses:
    """Convert a retrieval payload into ChapterVerses."""
    if items is None or isinstance(items, (str, bytes, dict)):
        raise FetchError(f"Expected a list of verses, got {type(items).__name__}")
    return tuple(Verse.from_dict(item) for item in items)


def find_verse(chapter: ChapterVerses, number: int) -> Optional[Verse]:
    """Return the verse with the given number, or None."""
    # Fast path: verse N normally sits at offset N-1
    if 0 < number <= len(chapter) and chapter[number - 1].number == number:
        return chapter[number - 1]
    for verse in chapter:
        if verse.number == number:
            return verse
    return None


def iter_verses(
    chapter: ChapterVerses,
    verse_start: Optional[int] = None,
    verse_count: int = 1,
) -> Iterator[Verse]:
    """
    Yield the verses of a span, or of the whole chapter.

    Stops at the first missing verse: the verses before the gap are
    yielded, then VerseNotFoundError is raised naming the missing number.

    Args:
        chapter: Verses of the chapter
        verse_start: First verse number, or None for every verse in order
        verse_count: Number of consecutive verse numbers to yield

    Raises:
        VerseNotFoundError: If a requested verse number is not in the chapter
    """
    if verse_start is None:
        yield from chapter
        return

    for offset in range(verse_count):
        verse = find_verse(chapter, verse_start + offset)
        if verse is None:
            raise VerseNotFoundError(verse_start + offset)
        yield verse


def select_verses(
    chapter: ChapterVerses,
    verse_start: Optional[int] = None,
    verse_count: int = 1,
) -> Tuple[List[Verse], Optional[VerseNotFoundError]]:
    """
    Collect a span, returning the verses found before any gap and the error.

    Returns:
        (verses, error) where error is None when the whole span was found
    """
    verses: List[Verse] = []
    try:
        for verse in iter_verses(chapter, verse_start, verse_count):
            verses.append(verse)
    except VerseNotFoundError as e:
        return verses, e
    return verses, None
