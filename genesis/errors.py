"""Error taxonomy for the generation pipeline.

- ConfigurationError: a required secret or setting is missing. Reported by the
  workflow as a structured failure, never a crash.
- NetworkError: transport failure or a non-retryable HTTP status from an
  external service (search, generation, WordPress).
- RateLimitError: HTTP 429 that survived every backoff attempt.
- SerpAnalysisError: the search call failed, so no blueprint can be built.
"""

import time
from typing import Optional


class GenesisError(Exception):
    """Base exception carrying optional workflow id and context."""

    def __init__(self, message: str, workflow_id: Optional[str] = None, **context):
        """Initialize error with context.

        Args:
            message: Error message
            workflow_id: ID of the generation run where the error occurred
            **context: Additional context information
        """
        super().__init__(message)
        self.workflow_id = workflow_id
        self.context = context
        self.timestamp = time.time()

    def __str__(self):
        """String representation with workflow ID if available."""
        base = super().__str__()
        if self.workflow_id:
            return f"[{self.workflow_id}] {base}"
        return base


class ConfigurationError(GenesisError):
    """A required setting (usually an API key) is not configured."""

    def __init__(self, message: str, setting: Optional[str] = None, **context):
        super().__init__(message, **context)
        self.setting = setting


class NetworkError(GenesisError):
    """Error when calling an external API."""

    def __init__(
        self,
        message: str,
        api_name: str,
        status_code: Optional[int] = None,
        workflow_id: Optional[str] = None,
        **context,
    ):
        """Initialize API error.

        Args:
            message: Error message
            api_name: Name of API that failed
            status_code: HTTP status code if applicable
            workflow_id: ID of workflow
            **context: Additional context
        """
        super().__init__(message, workflow_id, **context)
        self.api_name = api_name
        self.status_code = status_code


class RateLimitError(NetworkError):
    """Rate limiting persisted through every retry attempt."""

    def __init__(self, message: str, api_name: str, attempts: int, **context):
        super().__init__(message, api_name, status_code=429, **context)
        self.attempts = attempts


class SerpAnalysisError(NetworkError):
    """Search results could not be fetched or parsed."""

    def __init__(self, message: str, topic: str, **context):
        super().__init__(message, api_name="serpapi", **context)
        self.topic = topic


__all__ = [
    "GenesisError",
    "ConfigurationError",
    "NetworkError",
    "RateLimitError",
    "SerpAnalysisError",
]
