"""Gap Detector - Finds questions the ranking pages do not answer.

Scoring is lexical: a question's qualifying words (longer than three
characters) are looked up as substrings of the lowercased coverage corpus.
Gaps are returned in input order, not ranked by severity.
"""

import re
from dataclasses import dataclass
from typing import Final, Iterable

from genesis.integrations.search.normalizer import RelatedQuestion, SearchResult

MAX_MISSING_FAQS: Final[int] = 5
MAX_SHALLOW_TOPICS: Final[int] = 3
COVERAGE_THRESHOLD: Final[float] = 0.3
MIN_TOKEN_LENGTH: Final[int] = 4
SHALLOW_SNIPPET_LENGTH: Final[int] = 120

_NON_WORD = re.compile(r"\W+")


@dataclass(frozen=True)
class ShallowTopic:
    """A ranking result whose snippet suggests thin coverage."""

    title: str
    snippet_length: int


def _qualifying_tokens(question: str) -> list[str]:
    """Split a question into lowercase tokens longer than three characters.

    Examples:
        >>> _qualifying_tokens("Quanto custa um café especial?")
        ['quanto', 'custa', 'café', 'especial']
    """
    return [token for token in _NON_WORD.split(question.lower()) if len(token) >= MIN_TOKEN_LENGTH]


def coverage_score(question: str, corpus: str) -> tuple[int, int]:
    """Return (covered, total) qualifying tokens of a question against a corpus.

    The corpus must already be lowercased.
    """
    tokens = _qualifying_tokens(question)
    covered = sum(1 for token in tokens if token in corpus)
    return covered, len(tokens)


def is_gap(question: str, corpus: str) -> bool:
    """A question is a gap when less than 30% of its qualifying tokens are covered.

    Questions without qualifying tokens are never gaps (0 < 0 is false).
    """
    covered, total = coverage_score(question, corpus)
    return covered < COVERAGE_THRESHOLD * total


def _question_text(candidate) -> str:
    if isinstance(candidate, RelatedQuestion):
        return candidate.question
    if isinstance(candidate, dict):
        return candidate.get("question") or ""
    return str(candidate or "")


def find_coverage_gaps(
    candidate_questions: Iterable | None,
    coverage_text: Iterable[str],
    *,
    limit: int = MAX_MISSING_FAQS,
) -> tuple[str, ...]:
    """Return the candidate questions insufficiently covered by the text.

    Args:
        candidate_questions: RelatedQuestion objects (dicts with a "question"
            key and plain strings are accepted too). None means no candidates.
        coverage_text: Snippets or paragraphs that form the coverage corpus
        limit: Maximum number of gaps returned

    Returns:
        Up to ``limit`` gap questions, in input order

    Examples:
        >>> find_coverage_gaps([RelatedQuestion("Quanto custa um café especial?")], [])
        ('Quanto custa um café especial?',)
        >>> find_coverage_gaps(None, ["qualquer texto"])
        ()
    """
    if not candidate_questions:
        return ()

    if limit < 0:
        raise ValueError("limit cannot be negative")

    corpus = " ".join(text for text in coverage_text if text).lower()

    gaps = []
    for candidate in candidate_questions:
        if len(gaps) >= limit:
            break
        question = _question_text(candidate)
        if question and is_gap(question, corpus):
            gaps.append(question)

    return tuple(gaps)


def identify_shallow_topics(
    results: Iterable[SearchResult] | None,
    *,
    limit: int = MAX_SHALLOW_TOPICS,
) -> tuple[ShallowTopic, ...]:
    """Return the results with a thin snippet, in ranking order.

    A snippet shorter than 120 characters is taken as a sign the page
    covers the topic superficially. Results without a snippet are ignored.
    """
    shallow = [
        ShallowTopic(title=result.title, snippet_length=len(result.snippet))
        for result in (results or ())
        if result.snippet and len(result.snippet) < SHALLOW_SNIPPET_LENGTH
    ]
    return tuple(shallow[:limit])
