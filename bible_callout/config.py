# bible_callout/config.py
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load .env
load_dotenv()

# ---- ENV VALUES ----
BOLLS_BASE_URL = os.getenv("BOLLS_BASE_URL", "https://bolls.life")
REQUEST_TIMEOUT = int(os.getenv("BIBLE_CALLOUT_TIMEOUT", "15"))

DEFAULT_LANGUAGE = "English"
DEFAULT_TRANSLATIONS = ["NIV", "KJV", "NKJV"]

# Inserted when the insert command runs with nothing selected
DEFAULT_SELECTION = "Genesis 1:1"


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class CalloutSettings:
    """User-selected language and enabled translation codes."""
    selected_language: str = DEFAULT_LANGUAGE
    selected_translations: List[str] = field(
        default_factory=lambda: list(DEFAULT_TRANSLATIONS)
    )


def load_settings() -> CalloutSettings:
    """Build settings from BIBLE_CALLOUT_LANGUAGE / BIBLE_CALLOUT_TRANSLATIONS."""
    translations = os.getenv("BIBLE_CALLOUT_TRANSLATIONS")
    return CalloutSettings(
        selected_language=os.getenv("BIBLE_CALLOUT_LANGUAGE", DEFAULT_LANGUAGE),
        selected_translations=(
            _split_list(translations) if translations else list(DEFAULT_TRANSLATIONS)
        ),
    )
