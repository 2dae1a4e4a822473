"""Meta Writer - Strategic meta description for the article."""

from typing import Final

from genesis.agents.serp_analyzer import Blueprint
from genesis.integrations.llm_client import RetryPolicy, generate_text
from genesis.integrations.prompts import (
    META_DESCRIPTION_PROMPT_V1,
    META_DESCRIPTION_SYSTEM_PROMPT_V1,
)

MAIN_QUESTION_FALLBACK: Final[str] = "o problema principal"


def build_meta_prompt(topic: str, blueprint: Blueprint) -> str:
    """Prompt asking for a meta description sized like competitor snippets.

    Examples:
        >>> "Comprimento: 155" in build_meta_prompt("café", blueprint)
        True
    """
    main_question = blueprint.missing_faqs[0] if blueprint.missing_faqs else MAIN_QUESTION_FALLBACK
    return META_DESCRIPTION_PROMPT_V1.format(
        topic=topic,
        ctas=", ".join(blueprint.cta_phrases),
        power_words=", ".join(blueprint.power_words),
        ideal_length=blueprint.snippet_length_stats.avg,
        main_question=main_question,
    )


async def generate_meta_description(
    topic: str,
    blueprint: Blueprint,
    *,
    model: str | None = None,
    policy: RetryPolicy | None = None,
) -> str:
    """Generate the meta description.

    Returns:
        Stripped description, or "" when the model returned nothing

    Raises:
        ValueError: If topic is empty
        ConfigurationError: If the generation API key is missing
        NetworkError: If the generation call failed
    """
    if not topic or not topic.strip():
        raise ValueError("topic cannot be empty")

    text = await generate_text(
        build_meta_prompt(topic.strip(), blueprint),
        system_prompt=META_DESCRIPTION_SYSTEM_PROMPT_V1,
        model=model,
        policy=policy,
    )
    return text.strip()
