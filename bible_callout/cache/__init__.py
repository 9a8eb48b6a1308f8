"""
Cache Services

Chapter-level verse cache in front of the retrieval collaborator.
"""

from .verse_cache import VerseCache

__all__ = ["VerseCache"]
