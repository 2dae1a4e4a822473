"""Search source client and payload normalization."""

from genesis.integrations.search.normalizer import (
    RelatedQuestion,
    SearchResult,
    SerpResponse,
    normalize_serp,
)
from genesis.integrations.search.serpapi_client import search_serp

__all__ = [
    "RelatedQuestion",
    "SearchResult",
    "SerpResponse",
    "normalize_serp",
    "search_serp",
]
