"""SerpAPI search client.

Provides the raw search payload (organic results, related questions,
related searches) for a topic.
"""

import httpx

from genesis.errors import ConfigurationError
from genesis.utils.config import get_settings


async def search_serp(query: str, *, num: int | None = None) -> dict:
    """Perform a localized web search through SerpAPI.

    Args:
        query: Search query string (the raw topic)
        num: Number of organic results to request. Defaults to SERP_NUM_RESULTS.

    Returns:
        Raw SerpAPI JSON payload

    Raises:
        ValueError: If query is empty or the body is not valid JSON
        ConfigurationError: If SERPAPI_API_KEY is not set
        httpx.HTTPError: If the API request fails
    """
    if not query or not query.strip():
        raise ValueError("Query cannot be empty")

    settings = get_settings()
    api_key = settings.get_serpapi_api_key()
    if not api_key:
        raise ConfigurationError("SERPAPI_API_KEY is not set", setting="SERPAPI_API_KEY")

    params = {
        "engine": settings.SERP_ENGINE,
        "q": query,
        "api_key": api_key,
        "num": num or settings.SERP_NUM_RESULTS,
        "gl": settings.SERP_COUNTRY,
        "hl": settings.SERP_LANGUAGE,
    }

    async with httpx.AsyncClient() as client:
        response = await client.get(
            settings.SERPAPI_ENDPOINT,
            params=params,
            timeout=float(settings.API_TIMEOUT),
        )
        response.raise_for_status()
        data = response.json()  # httpx.json() is synchronous, raises ValueError on bad JSON

    if not isinstance(data, dict):
        raise ValueError("SerpAPI returned a non-object payload")

    return data
