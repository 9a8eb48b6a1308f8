# bible_callout/cache/verse_cache.py
"""
Verse Cache

Keeps whole chapters keyed by translation + book + chapter so each chapter
is fetched once per cache instance. Entries are never expired: chapter
text is static and the working set is small.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Union

from ..references.bolls_client import BollsClient
from ..references.errors import EmptyChapterError, FetchError
from ..references.reference_parser import Reference
from ..references.verse_selection import ChapterVerses, to_chapter_verses

logger = logging.getLogger(__name__)

# (translation, book_id, chapter) -> verses, sync or async
Fetcher = Callable[[str, int, int], Union[Iterable[Any], Awaitable[Iterable[Any]]]]


def _is_async(fetcher: Fetcher) -> bool:
    return inspect.iscoroutinefunction(fetcher) or inspect.iscoroutinefunction(
        getattr(fetcher, "__call__", None)
    )


class VerseCache:
    """
    Chapter cache in front of a text-retrieval collaborator.

    Usage:
        cache = VerseCache(BollsClient())
        verses = await cache.get_verses(Reference.parse("NIV", "John 3:16"))

    With dedupe=True, concurrent misses for the same chapter share a single
    pending fetch. With dedupe=False every miss fetches and the first stored
    entry is kept (entries for a key are interchangeable).
    """

    def __init__(self, fetcher: Optional[Fetcher] = None, dedupe: bool = True):
        self.fetcher = fetcher if fetcher is not None else BollsClient()
        self.dedupe = dedupe
        self._entries: Dict[str, ChapterVerses] = {}
        self._pending: Dict[str, "asyncio.Future[ChapterVerses]"] = {}
        self._hits = 0
        self._misses = 0
        self._fetches = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    async def get_verses(self, reference: Reference) -> ChapterVerses:
        """
        Return every verse of the reference's chapter.

        Args:
            reference: Resolved reference (verse fields are ignored)

        Returns:
            ChapterVerses

        Raises:
            FetchError: If the collaborator fails or returns malformed data
            EmptyChapterError: If the collaborator returns no verses
        """
        key = reference.key

        cached = self._entries.get(key)
        if cached is not None:
            self._hits += 1
            return cached

        self._misses += 1

        if not self.dedupe:
            return await self._fetch(reference)

        pending = self._pending.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(reference))
            self._pending[key] = pending
            pending.add_done_callback(lambda fut: self._fetch_done(key, fut))
        else:
            logger.debug(f"Joining pending fetch for {key}")

        # Cancelling one waiter must not cancel the shared fetch
        return await asyncio.shield(pending)

    def _fetch_done(self, key: str, fut: "asyncio.Future[ChapterVerses]") -> None:
        self._pending.pop(key, None)
        # Every waiter may have been cancelled; mark the failure as retrieved
        if not fut.cancelled():
            fut.exception()

    async def _fetch(self, reference: Reference) -> ChapterVerses:
        key = reference.key
        self._fetches += 1
        logger.info(f"Fetching {key}")

        try:
            if _is_async(self.fetcher):
                raw = self.fetcher(
                    reference.translation, reference.book_id, reference.chapter
                )
            else:
                raw = await asyncio.to_thread(
                    self.fetcher,
                    reference.translation,
                    reference.book_id,
                    reference.chapter,
                )
            # Plain callables may still hand back a coroutine
            if inspect.isawaitable(raw):
                raw = await raw
            verses = to_chapter_verses(raw)
        except FetchError as e:
            logger.warning(f"Failed to fetch {key}: {e}")
            raise
        except Exception as e:
            logger.warning(f"Failed to fetch {key}: {e}")
            raise FetchError("Failed to fetch data") from e

        if not verses:
            raise EmptyChapterError(key)

        # First store wins; a concurrent duplicate fetch returns the stored entry
        stored = self._entries.setdefault(key, verses)
        logger.debug(f"Cached {key} ({len(stored)} verses)")
        return stored

    def get_stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "fetches": self._fetches,
            "pending": len(self._pending),
        }
