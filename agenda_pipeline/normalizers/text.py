"""Text and link normalization for scraped schedule markup."""

import re
from typing import Optional

from agenda_pipeline.config import BASE_URL

# UTF-8 NBSP read back as Latin-1 leaves a stray "Â" in front of the space
STRAY_NBSP_MARKER = "Â"

# Right single quote (U+2019) read back as cp1252
MOJIBAKE_APOSTROPHE = "â€™"

WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Clean encoding artifacts and collapse whitespace."""
    text = text.replace(STRAY_NBSP_MARKER, "")
    text = text.replace(MOJIBAKE_APOSTROPHE, "'")
    return WHITESPACE_RE.sub(" ", text).strip()


def resolve_link(link: Optional[str]) -> Optional[str]:
    """Anchor site-relative links at the conference site.

    Absolute URLs and other schemes (mailto:, #anchors) pass through.
    """
    if link and link.startswith("/"):
        return BASE_URL + link
    return link
