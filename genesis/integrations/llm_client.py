"""Generation client for the generative language endpoint using LiteLLM.

This module provides a single async interface for generating text from a
user prompt plus a system instruction. Gemini is the default provider;
LiteLLM translates the messages into the provider's request body
(``contents`` + ``systemInstruction`` for Gemini).

Public API:
    generate_text: Generate text with the configured provider
    RetryPolicy: Attempts, backoff and retryable statuses for a call

Example:
    >>> text = await generate_text("Escreva o artigo", system_prompt="Você é um redator.")
"""

import asyncio
from dataclasses import dataclass, field

import httpx
import litellm

from genesis.errors import ConfigurationError, NetworkError, RateLimitError
from genesis.utils.config import get_settings
from genesis.utils.logging_config import get_logger

API_NAME = "generative-language"


def _get_logger():
    """Get logger instance lazily to avoid module-level import issues."""
    return get_logger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry behaviour for a generation call.

    Only statuses in ``retryable_statuses`` are retried with backoff.
    Transport failures are retried immediately; every other HTTP error is
    terminal.

    Attributes:
        max_attempts: Total attempts, including the first one
        base_delay: Delay before the second attempt; doubles each time
        retryable_statuses: HTTP statuses that trigger a backoff retry
    """

    max_attempts: int = 5
    base_delay: float = 1.0
    retryable_statuses: frozenset[int] = field(default_factory=lambda: frozenset({429}))

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay cannot be negative")

    def backoff(self, attempt: int) -> float:
        """Seconds to wait after the given zero-based attempt.

        Examples:
            >>> [RetryPolicy().backoff(i) for i in range(4)]
            [1.0, 2.0, 4.0, 8.0]
        """
        return self.base_delay * (2**attempt)

    def should_retry(self, status_code: int | None) -> bool:
        """Whether an HTTP status is worth another attempt."""
        return status_code in self.retryable_statuses

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        """Build the policy from LLM_MAX_ATTEMPTS and LLM_RETRY_DELAY."""
        settings = get_settings()
        return cls(max_attempts=settings.LLM_MAX_ATTEMPTS, base_delay=settings.LLM_RETRY_DELAY)


_TRANSPORT_ERRORS = (
    OSError,  # ConnectionError, TimeoutError
    httpx.TransportError,
    litellm.APIConnectionError,
    litellm.Timeout,
)


def _is_transport_error(error: Exception) -> bool:
    # Checked before the status code: litellm.Timeout carries 408
    return isinstance(error, _TRANSPORT_ERRORS)


def _status_code(error: Exception) -> int | None:
    status = getattr(error, "status_code", None)
    return status if isinstance(status, int) else None


def _extract_text(response) -> str:
    """Return the first choice's text, or "" when the payload has none."""
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


def _get_llm_config(model_override: str | None) -> dict:
    """Resolve model, provider and API key from settings.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not set
    """
    settings = get_settings()
    api_key = settings.get_gemini_api_key()
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY is not set", setting="GEMINI_API_KEY")

    return {
        "model": model_override or settings.LLM_DEFAULT_MODEL,
        "api_key": api_key,
        "provider": settings.LLM_PROVIDER,
        "timeout": settings.LLM_TIMEOUT,
    }


async def _call_llm_with_retry(
    messages: list[dict],
    config: dict,
    temperature: float,
    policy: RetryPolicy,
) -> str:
    """Call LiteLLM applying the retry policy.

    Raises:
        RateLimitError: When every attempt was rate limited
        NetworkError: On a terminal HTTP status or a transport failure on
            the final attempt
    """
    logger = _get_logger()
    model = config["model"]
    provider = config["provider"]
    log_fields = {"provider": provider, "model": model}

    for attempt in range(policy.max_attempts):
        try:
            logger.debug(
                "LLM attempt %d/%d",
                attempt + 1,
                policy.max_attempts,
                extra={"extra_fields": {**log_fields, "temperature": temperature}},
            )

            response = await litellm.acompletion(
                model=model,
                messages=messages,
                temperature=temperature,
                api_key=config["api_key"],
                timeout=config["timeout"],
                custom_llm_provider=provider,
            )

        except Exception as e:
            last_attempt = attempt == policy.max_attempts - 1
            logger.debug("LLM error on attempt %d: %s: %s", attempt + 1, type(e).__name__, str(e))

            if _is_transport_error(e):
                if last_attempt:
                    logger.error(
                        "LLM transport failure on final attempt",
                        extra={"extra_fields": {**log_fields, "attempts": attempt + 1}},
                    )
                    raise NetworkError(
                        f"Transport failure: {type(e).__name__}: {e}", API_NAME
                    ) from e
                continue

            status = _status_code(e)
            if not policy.should_retry(status):
                logger.error(
                    "LLM non-retryable error",
                    extra={
                        "extra_fields": {
                            **log_fields,
                            "status_code": status,
                            "error_type": type(e).__name__,
                        }
                    },
                )
                raise NetworkError(
                    f"Non-retryable error: {type(e).__name__}", API_NAME, status_code=status
                ) from e

            if last_attempt:
                logger.error(
                    "LLM rate limit persisted after %d attempts",
                    attempt + 1,
                    extra={"extra_fields": {**log_fields, "attempts": attempt + 1}},
                )
                raise RateLimitError(
                    f"Rate limited on all {policy.max_attempts} attempts",
                    API_NAME,
                    attempts=policy.max_attempts,
                ) from e

            delay = policy.backoff(attempt)
            logger.warning(
                "LLM rate limited, retrying in %ss (attempt %d/%d)",
                delay,
                attempt + 2,
                policy.max_attempts,
            )
            await asyncio.sleep(delay)
            continue

        logger.info(
            "LLM request successful",
            extra={"extra_fields": {**log_fields, "attempts": attempt + 1}},
        )
        return _extract_text(response)

    # Unreachable: the final attempt either returns or raises
    raise NetworkError("Unexpected retry loop exit", API_NAME)


async def generate_text(
    prompt: str,
    *,
    system_prompt: str | None = None,
    model: str | None = None,
    policy: RetryPolicy | None = None,
    temperature: float = 0.7,
) -> str:
    """Generate text using the configured provider.

    Args:
        prompt: User prompt
        system_prompt: Optional system instruction sent alongside the prompt
        model: Optional model override; defaults to LLM_DEFAULT_MODEL
        policy: Retry policy; defaults to RetryPolicy.from_settings()
        temperature: Sampling temperature (0.0 - 2.0)

    Returns:
        Generated text. An empty payload yields "" rather than an error;
        callers decide whether empty output is acceptable.

    Raises:
        ValueError: If prompt is empty or temperature out of range
        ConfigurationError: If GEMINI_API_KEY is not set
        RateLimitError: If every attempt was rate limited
        NetworkError: On terminal HTTP errors or persistent transport failure

    Notes:
        - Logs provider, model and attempt count (never prompt or output)
        - HTTP 429 waits base_delay * 2**attempt between attempts (1s, 2s, 4s, 8s)
    """
    if not prompt or not prompt.strip():
        raise ValueError("Prompt cannot be empty")

    if not 0.0 <= temperature <= 2.0:
        raise ValueError("Temperature must be between 0.0 and 2.0")

    config = _get_llm_config(model)

    messages = []
    if system_prompt and system_prompt.strip():
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    return await _call_llm_with_retry(
        messages=messages,
        config=config,
        temperature=temperature,
        policy=policy or RetryPolicy.from_settings(),
    )
