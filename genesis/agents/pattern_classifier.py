"""Pattern Classifier - Heuristic tagging of competing result titles.

Each category is an independent predicate, so one title can carry several
tags ("Top 10 Melhores Cafés: Guia Completo" is list, how_to and
superlative at once).

Example:
    >>> matches = classify_titles(["Como fazer café", "10 cafés", "Qual café?"])
    >>> [(m.category, m.count) for m in matches]
    [('list', 1), ('how_to', 1), ('question', 1), ('superlative', 0)]
"""

import re
from dataclasses import dataclass
from typing import Final, Iterable

MAX_EXAMPLES: Final[int] = 2


@dataclass(frozen=True)
class TitleCategory:
    """A named membership test over a title."""

    name: str
    pattern: re.Pattern

    def matches(self, title: str) -> bool:
        return self.pattern.search(title) is not None


@dataclass(frozen=True)
class PatternMatch:
    """Aggregated membership for one category.

    Attributes:
        category: Category name
        count: Number of titles carrying the tag
        examples: Up to two member titles, in input order
    """

    category: str
    count: int
    examples: tuple[str, ...]


# Declaration order is the tiebreak when counts are equal
TITLE_CATEGORIES: Final[tuple[TitleCategory, ...]] = (
    TitleCategory("list", re.compile(r"^\d+|\btop\s+\d+|\bmelhores\s+\d+", re.IGNORECASE)),
    TitleCategory("how_to", re.compile(r"\b(?:como|guia|tutorial|passo a passo)\b", re.IGNORECASE)),
    TitleCategory("question", re.compile(r"\?|\b(?:por que|qual|quando|onde)\b", re.IGNORECASE)),
    TitleCategory(
        "superlative",
        re.compile(r"completo|definitivo|essencial|absoluto", re.IGNORECASE),
    ),
)


def tag_title(title: str) -> frozenset[str]:
    """Return every category a title belongs to.

    Examples:
        >>> sorted(tag_title("Guia Completo: Qual o melhor café?"))
        ['how_to', 'question', 'superlative']
        >>> tag_title("Cafeteria no centro")
        frozenset()
    """
    return frozenset(category.name for category in TITLE_CATEGORIES if category.matches(title))


def classify_titles(titles: Iterable[str]) -> tuple[PatternMatch, ...]:
    """Bucket titles into categories ranked by member count.

    Pure deterministic function. Every category appears in the output,
    including those with no members.

    Args:
        titles: Result titles in ranking order

    Returns:
        PatternMatch per category, sorted by descending count. Ties keep
        TITLE_CATEGORIES order (sorted() is stable).
    """
    titles = [title for title in titles if title]

    matches = []
    for category in TITLE_CATEGORIES:
        members = [title for title in titles if category.matches(title)]
        matches.append(
            PatternMatch(
                category=category.name,
                count=len(members),
                examples=tuple(members[:MAX_EXAMPLES]),
            )
        )

    return tuple(sorted(matches, key=lambda match: match.count, reverse=True))
