# bible_callout/callout.py
"""
Callout content for code blocks tagged with a translation code.

A host renders a block such as

    ```NIV
    John 3:16-18
    ```

as a quote callout. This module produces the data for it (title, verses,
error message); building the actual UI is left to the host.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .cache.verse_cache import VerseCache
from .config import DEFAULT_SELECTION
from .references.errors import BibleCalloutError
from .references.reference_parser import Reference, ReferenceResolver
from .references.verse_selection import Verse, select_verses

logger = logging.getLogger(__name__)


@dataclass
class Callout:
    """
    Rendered content of one code block.

    Attributes:
        title: "NIV - John 3" on success, "NIV - Error" on failure
        verses: Verses to show, in order
        error: Message shown after the verses (or alone), if any
        reference: Resolved reference, when parsing succeeded
    """
    title: str
    verses: List[Verse] = field(default_factory=list)
    error: Optional[str] = None
    reference: Optional[Reference] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_code_block(translation: str, selection: str) -> Tuple[str, int, int]:
    """
    Wrap selected text in a code block tagged with the translation.

    Args:
        translation: Translation code used as the block language
        selection: Selected citation text; blank selections use "Genesis 1:1"

    Returns:
        (block_text, start, end) where start/end are the offsets of the
        citation inside block_text, so the host can reselect it
    """
    if not selection.strip():
        selection = DEFAULT_SELECTION

    opening = f"```{translation}\n"
    block = f"{opening}{selection}\n```"
    return block, len(opening), len(opening) + len(selection)


async def build_callout(
    translation: str,
    source: str,
    resolver: ReferenceResolver,
    cache: VerseCache,
) -> Callout:
    """
    Resolve a code block's citation and load its verses.

    Never raises for reference or retrieval problems: those end up in
    Callout.error. A gap inside a verse range keeps the verses before it.
    """
    try:
        reference = resolver.parse(translation, source)
        chapter = await cache.get_verses(reference)
    except BibleCalloutError as e:
        logger.info(f"Callout for '{source.strip()}' ({translation}) failed: {e}")
        return Callout(title=f"{translation} - Error", error=str(e))

    verses, missing = select_verses(chapter, reference.verse_start, reference.verse_count)

    return Callout(
        title=str(reference),
        verses=verses,
        error=str(missing) if missing else None,
        reference=reference,
    )
