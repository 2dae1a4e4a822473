"""SERP Analyzer - Builds the competitive blueprint for a topic.

Fetches the search results page for a topic once, then derives title
patterns, length norms, content gaps and shallow competitors from it.
Blueprints are memoized in a BlueprintCache owned by the caller.

Example:
    >>> cache = BlueprintCache(max_entries=32)
    >>> blueprint = await build_blueprint("café especial", cache=cache)
    >>> blueprint.missing_faqs
    ('Quanto custa um café especial?',)
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from typing import Awaitable, Callable, Final

import httpx

from genesis.agents.gap_detector import (
    ShallowTopic,
    find_coverage_gaps,
    identify_shallow_topics,
)
from genesis.agents.pattern_classifier import PatternMatch, classify_titles
from genesis.errors import SerpAnalysisError
from genesis.integrations.search.normalizer import SearchResult, normalize_serp
from genesis.integrations.search.serpapi_client import search_serp
from genesis.utils.config import get_settings

logger = logging.getLogger(__name__)

SAMPLE_SIZE: Final[int] = 10
MAX_PEOPLE_ALSO_ASK: Final[int] = 8
MAX_RELATED_SEARCHES: Final[int] = 10
DEFAULT_TITLE_LENGTH: Final[int] = 60
DEFAULT_SNIPPET_LENGTH: Final[int] = 155

# Static vocabulary, not learned from the results
CTA_PHRASES: Final[tuple[str, ...]] = ("Confira agora", "Saiba mais", "Veja o guia")
POWER_WORDS: Final[tuple[str, ...]] = ("Definitivo", "Completo", "Grátis", "2025", "Fácil")
COMMON_SECTIONS: Final[tuple[str, ...]] = ("Introdução", "Vantagens", "Passo a Passo", "Conclusão")
ESTIMATED_WORDS: Final[int] = 1500

SearchFn = Callable[[str], Awaitable[dict]]


@dataclass(frozen=True)
class LengthStats:
    """Character length statistics for a sample of strings."""

    min: int
    max: int
    avg: int


@dataclass(frozen=True)
class StructuralOutline:
    """Section norms observed among competitors."""

    common_sections: tuple[str, ...]
    estimated_words: int


@dataclass(frozen=True)
class RawSerpData:
    """The raw material the blueprint was derived from."""

    top_titles: tuple[str, ...]
    top_snippets: tuple[str, ...]
    results: tuple[SearchResult, ...]
    people_also_ask: tuple[str, ...]
    related_searches: tuple[str, ...]


@dataclass(frozen=True)
class Blueprint:
    """Structured summary of what ranks for a topic.

    Attributes:
        topic: Topic the blueprint was built for
        title_patterns: Ranked title categories
        title_length_stats: Title length norms of the top results
        snippet_length_stats: Snippet length norms of the top results
        cta_phrases: Call-to-action phrases for meta descriptions
        power_words: Vocabulary to favor in titles and copy
        missing_faqs: Up to five related questions the snippets do not answer
        shallow_topics: Up to three results with thin snippets
        structural_outline: Common sections and target depth
        raw_results: Source data
    """

    topic: str
    title_patterns: tuple[PatternMatch, ...]
    title_length_stats: LengthStats
    snippet_length_stats: LengthStats
    cta_phrases: tuple[str, ...]
    power_words: tuple[str, ...]
    missing_faqs: tuple[str, ...]
    shallow_topics: tuple[ShallowTopic, ...]
    structural_outline: StructuralOutline
    raw_results: RawSerpData


class BlueprintCache:
    """LRU memo of blueprints by topic.

    Keys are the exact topic string unless ``normalize_keys`` is set, in
    which case case and runs of whitespace are collapsed. There is no TTL;
    the least recently used topic is evicted past ``max_entries``.
    """

    def __init__(self, max_entries: int = 128, *, normalize_keys: bool = False):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self.normalize_keys = normalize_keys
        self._entries: OrderedDict[str, Blueprint] = OrderedDict()

    @classmethod
    def from_settings(cls) -> "BlueprintCache":
        settings = get_settings()
        return cls(
            settings.BLUEPRINT_CACHE_SIZE,
            normalize_keys=settings.BLUEPRINT_CACHE_NORMALIZE_KEYS,
        )

    def key_for(self, topic: str) -> str:
        """Cache key for a topic.

        Examples:
            >>> BlueprintCache().key_for(" Café  Especial ")
            ' Café  Especial '
            >>> BlueprintCache(normalize_keys=True).key_for(" Café  Especial ")
            'café especial'
        """
        if not self.normalize_keys:
            return topic
        return re.sub(r"\s+", " ", topic).strip().casefold()

    def get(self, topic: str) -> Blueprint | None:
        key = self.key_for(topic)
        blueprint = self._entries.get(key)
        if blueprint is not None:
            self._entries.move_to_end(key)
        return blueprint

    def set(self, topic: str, blueprint: Blueprint) -> None:
        key = self.key_for(topic)
        self._entries[key] = blueprint
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted blueprint for topic '%s'", evicted)

    def __contains__(self, topic: str) -> bool:
        return self.key_for(topic) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


def _length_stats(samples: list[str], default_avg: int) -> LengthStats:
    """Min/max/avg character length; fallbacks when there are no samples.

    Examples:
        >>> _length_stats(["abc", "abcde"], 60)
        LengthStats(min=3, max=5, avg=4)
        >>> _length_stats([], 155)
        LengthStats(min=0, max=0, avg=155)
    """
    if not samples:
        return LengthStats(min=0, max=0, avg=default_avg)

    lengths = [len(sample) for sample in samples]
    # Half-up rounding, matching how the averages are displayed
    avg = int(sum(lengths) / len(lengths) + 0.5)
    return LengthStats(min=min(lengths), max=max(lengths), avg=avg)


def assemble_blueprint(topic: str, payload: dict) -> Blueprint:
    """Derive a Blueprint from a raw search payload.

    Pure function; no network and no cache access.

    Args:
        topic: Topic the payload was fetched for
        payload: Raw SerpAPI JSON object

    Returns:
        Blueprint for the topic

    Raises:
        ValueError: If payload is not a dict
    """
    serp = normalize_serp(payload)
    sample = serp.organic_results[:SAMPLE_SIZE]
    titles = [result.title for result in sample]
    snippets = [result.snippet for result in sample]

    return Blueprint(
        topic=topic,
        title_patterns=classify_titles(titles),
        title_length_stats=_length_stats(titles, DEFAULT_TITLE_LENGTH),
        snippet_length_stats=_length_stats([s for s in snippets if s], DEFAULT_SNIPPET_LENGTH),
        cta_phrases=CTA_PHRASES,
        power_words=POWER_WORDS,
        missing_faqs=find_coverage_gaps(serp.related_questions, snippets),
        shallow_topics=identify_shallow_topics(serp.organic_results),
        structural_outline=StructuralOutline(
            common_sections=COMMON_SECTIONS,
            estimated_words=ESTIMATED_WORDS,
        ),
        raw_results=RawSerpData(
            top_titles=tuple(titles),
            top_snippets=tuple(snippets),
            results=serp.organic_results,
            people_also_ask=tuple(q.question for q in serp.related_questions[:MAX_PEOPLE_ALSO_ASK]),
            related_searches=serp.related_searches[:MAX_RELATED_SEARCHES],
        ),
    )


async def build_blueprint(
    topic: str,
    *,
    cache: BlueprintCache | None = None,
    search: SearchFn | None = None,
) -> Blueprint:
    """Build (or reuse) the competitive blueprint for a topic.

    Args:
        topic: Topic exactly as the user typed it
        cache: Optional memo; consulted first and filled on success
        search: Coroutine returning the raw search payload for a query.
            Defaults to search_serp.

    Returns:
        Blueprint for the topic

    Raises:
        ValueError: If topic is empty
        ConfigurationError: If the search API key is missing
        SerpAnalysisError: If the search call or its payload failed.
            Not retried here; the caller reports "analysis unavailable".
    """
    if not topic or not topic.strip():
        raise ValueError("topic cannot be empty")

    if cache is not None:
        cached = cache.get(topic)
        if cached is not None:
            logger.info("Blueprint cache hit", extra={"extra_fields": {"topic": topic}})
            return cached

    try:
        payload = await (search or search_serp)(topic)
        blueprint = assemble_blueprint(topic, payload)
    except (httpx.HTTPError, ValueError) as e:
        logger.error("SERP analysis failed for '%s': %s: %s", topic, type(e).__name__, e)
        status = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
        raise SerpAnalysisError(
            f"SERP analysis failed: {type(e).__name__}: {e}", topic, status_code=status
        ) from e

    if cache is not None:
        cache.set(topic, blueprint)

    logger.info(
        "Blueprint built",
        extra={
            "extra_fields": {
                "topic": topic,
                "results": len(blueprint.raw_results.results),
                "missing_faqs": len(blueprint.missing_faqs),
            }
        },
    )
    return blueprint
