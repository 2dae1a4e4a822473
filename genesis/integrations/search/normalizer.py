"""Search result normalization.

Pure data transformation layer that converts a raw SerpAPI payload into
immutable records. Malformed or missing fields degrade to empty values
instead of raising.

NO classification, scoring, or gap analysis happens here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """One organic search result."""

    title: str
    snippet: str
    link: str


@dataclass(frozen=True)
class RelatedQuestion:
    """A "people also ask" question."""

    question: str


@dataclass(frozen=True)
class SerpResponse:
    """Normalized search payload.

    Attributes:
        organic_results: Organic results in ranking order
        related_questions: "People also ask" entries
        related_searches: Related query strings
    """

    organic_results: tuple[SearchResult, ...] = ()
    related_questions: tuple[RelatedQuestion, ...] = ()
    related_searches: tuple[str, ...] = ()


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_organic_results(results) -> tuple[SearchResult, ...]:
    """Normalize the organic_results array.

    Entries that are not objects or have no title are skipped. A missing
    snippet or link becomes an empty string.

    Examples:
        >>> normalize_organic_results([{"title": "A", "snippet": "s", "link": "https://a"}])
        (SearchResult(title='A', snippet='s', link='https://a'),)
        >>> normalize_organic_results(None)
        ()
    """
    if not isinstance(results, list):
        return ()

    normalized = []
    for raw_result in results:
        if not isinstance(raw_result, dict):
            continue

        title = _text(raw_result.get("title"))
        if not title:
            continue

        normalized.append(
            SearchResult(
                title=title,
                snippet=_text(raw_result.get("snippet")),
                link=_text(raw_result.get("link")),
            )
        )

    return tuple(normalized)


def normalize_related_questions(questions) -> tuple[RelatedQuestion, ...]:
    """Normalize the related_questions array, dropping blank questions."""
    if not isinstance(questions, list):
        return ()

    return tuple(
        RelatedQuestion(question=_text(raw.get("question")))
        for raw in questions
        if isinstance(raw, dict) and _text(raw.get("question"))
    )


def normalize_related_searches(searches) -> tuple[str, ...]:
    """Normalize the related_searches array to its query strings."""
    if not isinstance(searches, list):
        return ()

    return tuple(
        _text(raw.get("query"))
        for raw in searches
        if isinstance(raw, dict) and _text(raw.get("query"))
    )


def normalize_serp(payload: dict) -> SerpResponse:
    """Normalize a raw SerpAPI payload.

    Args:
        payload: Raw JSON object returned by search_serp

    Returns:
        SerpResponse with every section normalized

    Raises:
        ValueError: If payload is not a dict
    """
    if not isinstance(payload, dict):
        raise ValueError("Payload must be a dict")

    return SerpResponse(
        organic_results=normalize_organic_results(payload.get("organic_results")),
        related_questions=normalize_related_questions(payload.get("related_questions")),
        related_searches=normalize_related_searches(payload.get("related_searches")),
    )
