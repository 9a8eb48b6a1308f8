# bible_callout/references/bolls_client.py
"""
bolls.life API client.

Default text-retrieval collaborator for VerseCache. Fetches whole chapters
(API documentation at https://bolls.life/api/).
"""

import logging
from typing import List, Optional

import requests

from ..config import BOLLS_BASE_URL, REQUEST_TIMEOUT
from .errors import FetchError
from .translations import Language, languages_from_list
from .verse_selection import ChapterVerses, to_chapter_verses

logger = logging.getLogger(__name__)


class BollsClient:
    """
    Client for the bolls.life API.

    Usage:
        client = BollsClient()

        verses = client.get_text("NIV", 43, 3)
        print(verses[15].text)

        languages = client.get_translations()
    """

    TEXT_PATH = "/get-text/{translation}/{book_id}/{chapter}/"
    TRANSLATIONS_PATH = "/static/bolls/app/views/languages.json"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.base_url = (base_url or BOLLS_BASE_URL).rstrip("/")
        self._request_timeout = timeout or REQUEST_TIMEOUT

    def __call__(self, translation: str, book_id: int, chapter: int) -> ChapterVerses:
        return self.get_text(translation, book_id, chapter)

    def _get_json(self, path: str):
        url = f"{self.base_url}{path}"
        # One request per call; a failed chapter is retried by the next lookup
        try:
            response = requests.get(url, timeout=self._request_timeout)
            response.raise_for_status()
        except requests.Timeout as e:
            logger.warning(f"Request to {url} timed out after {self._request_timeout}s")
            raise FetchError(f"Request to {url} timed out") from e
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise FetchError(f"Request to {url} failed") from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON from {url}: {e}")
            raise FetchError(f"Invalid response from {url}") from e

    def get_text(self, translation: str, book_id: int, chapter: int) -> ChapterVerses:
        """
        Fetch every verse of a chapter.

        Args:
            translation: Translation code (e.g., "NIV")
            book_id: 1-based book number
            chapter: Chapter number

        Returns:
            ChapterVerses in source order

        Raises:
            FetchError: On network failure or a malformed payload
        """
        path = self.TEXT_PATH.format(
            translation=translation, book_id=book_id, chapter=chapter
        )
        verses = to_chapter_verses(self._get_json(path))
        logger.debug(f"Fetched {len(verses)} verses for {translation}/{book_id}/{chapter}")
        return verses

    def get_translations(self) -> List[Language]:
        """Fetch the full language/translation list."""
        data = self._get_json(self.TRANSLATIONS_PATH)
        try:
            return languages_from_list(data)
        except (KeyError, TypeError) as e:
            raise FetchError("Malformed translations list") from e
