"""Content metrics for a generated article."""

import re
from dataclasses import dataclass
from typing import Final

TARGET_WORDS: Final[int] = 1200
TARGET_HEADINGS: Final[int] = 6

_HEADING = re.compile(r"^#{1,3}\s", re.MULTILINE)


@dataclass(frozen=True)
class ContentMetrics:
    word_count: int
    heading_count: int
    score: int


def compute_metrics(text: str) -> ContentMetrics | None:
    """Word count, H1-H3 count and a 0-100 depth score.

    Half the score comes from reaching 1200 words, half from six headings.

    Examples:
        >>> compute_metrics("# Título\\n\\nTexto")
        ContentMetrics(word_count=3, heading_count=1, score=8)
        >>> compute_metrics("") is None
        True
    """
    if not text or not text.strip():
        return None

    word_count = len(text.split())
    heading_count = len(_HEADING.findall(text))
    raw_score = (word_count / TARGET_WORDS) * 50 + (heading_count / TARGET_HEADINGS) * 50
    score = min(100, int(raw_score + 0.5))

    return ContentMetrics(word_count=word_count, heading_count=heading_count, score=score)
