"""Article Writer - Full article generation from a blueprint.

Builds the citation list and both prompts, then makes one generation call.
Placeholders in the returned text are left for the link processor.

Public API:
    write_article: Generate the raw article markdown
    ArticleDraft: Generated text plus the inputs used to produce it
"""

from dataclasses import dataclass
from typing import Sequence

from genesis.agents.prompt_assembler import (
    ExternalLink,
    build_article_prompt,
    build_system_prompt,
    external_links_from,
)
from genesis.agents.serp_analyzer import Blueprint
from genesis.integrations.llm_client import RetryPolicy, generate_text
from genesis.integrations.wordpress_client import PostReference


@dataclass(frozen=True)
class ArticleDraft:
    """Raw generated article.

    Attributes:
        content: Markdown with unresolved internal-link placeholders
        system_prompt: System instruction sent with the request
        external_links: Sources the article was asked to cite
    """

    content: str
    system_prompt: str
    external_links: tuple[ExternalLink, ...]


async def write_article(
    topic: str,
    blueprint: Blueprint,
    *,
    internal_targets: Sequence[PostReference] = (),
    role: str = "seoExpert",
    tone: str = "especialista",
    template: str = "guide",
    model: str | None = None,
    policy: RetryPolicy | None = None,
) -> ArticleDraft:
    """Write the full article for a topic.

    Args:
        topic: Article topic
        blueprint: Blueprint for the topic
        internal_targets: Existing posts the article may link to
        role: Key into SYSTEM_ROLES
        tone: Key into TONE_PROFILES
        template: Key into ARTICLE_TEMPLATES
        model: Optional model override
        policy: Optional retry policy override

    Returns:
        ArticleDraft with the stripped generated text

    Raises:
        ValueError: If inputs are invalid or the model returned no text
        ConfigurationError: If the generation API key is missing
        NetworkError: If the generation call failed
    """
    external_links = external_links_from(blueprint)
    system_prompt = build_system_prompt(
        role, tone, template, blueprint, internal_targets, external_links
    )
    prompt = build_article_prompt(topic, template)

    content = await generate_text(
        prompt,
        system_prompt=system_prompt,
        model=model,
        policy=policy,
    )

    if not content or not content.strip():
        raise ValueError("LLM returned empty content")

    return ArticleDraft(
        content=content.strip(),
        system_prompt=system_prompt,
        external_links=external_links,
    )
