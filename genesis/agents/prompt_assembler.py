"""Prompt Assembler - System and user prompts for article generation.

Pure deterministic functions: same blueprint and targets produce the same
prompt. The internal-link placeholder written into the prompt is the
contract the link processor parses afterwards.
"""

from dataclasses import dataclass
from typing import Final, Sequence

from genesis.agents.serp_analyzer import Blueprint
from genesis.integrations.prompts import (
    ARTICLE_SYSTEM_PROMPT_V1,
    ARTICLE_TEMPLATES,
    ARTICLE_WRITING_PROMPT_V1,
    FORBIDDEN_JARGON,
    INTERNAL_LINK_PLACEHOLDER,
    SYSTEM_ROLES,
    TONE_PROFILES,
)
from genesis.integrations.wordpress_client import PostReference

MAX_INTERNAL_TARGETS: Final[int] = 15
MAX_EXTERNAL_TARGETS: Final[int] = 5
MAIN_GAP_FALLBACK: Final[str] = "Dúvidas Frequentes"
SHALLOW_TOPIC_FALLBACK: Final[str] = "Visão Geral"


@dataclass(frozen=True)
class ExternalLink:
    """An authoritative source the article must cite."""

    title: str
    url: str


def external_links_from(
    blueprint: Blueprint, *, limit: int = MAX_EXTERNAL_TARGETS
) -> tuple[ExternalLink, ...]:
    """Top organic results as citation targets (results without a link are skipped)."""
    links = [
        ExternalLink(title=result.title, url=result.link)
        for result in blueprint.raw_results.results
        if result.link
    ]
    return tuple(links[:limit])


def _lookup(registry: dict, key: str, kind: str):
    if key not in registry:
        raise ValueError(f"Unknown {kind} '{key}'. Available: {', '.join(registry)}")
    return registry[key]


def _format_internal_targets(targets: Sequence[PostReference]) -> str:
    """Render link targets as "ID: 12 (Title), ID: 7 (Title)".

    Examples:
        >>> _format_internal_targets([PostReference(12, "Moagem", "https://x/moagem")])
        'ID: 12 (Moagem)'
    """
    return ", ".join(f"ID: {post.id} ({post.title})" for post in targets[:MAX_INTERNAL_TARGETS])


def _format_external_targets(targets: Sequence[ExternalLink]) -> str:
    return "\n".join(f"- [{link.title}]({link.url})" for link in targets)


def build_system_prompt(
    role: str,
    tone: str,
    template: str,
    blueprint: Blueprint,
    internal_targets: Sequence[PostReference],
    external_targets: Sequence[ExternalLink],
) -> str:
    """Compose the system instruction for the article call.

    Sections, in order: role, tone, objective and structure, forbidden
    jargon, internal links (placeholder format + available IDs), external
    links, power words, gap-filling directives.

    Args:
        role: Key into SYSTEM_ROLES
        tone: Key into TONE_PROFILES
        template: Key into ARTICLE_TEMPLATES
        blueprint: Blueprint for the topic
        internal_targets: Existing posts; only the first 15 are offered
        external_targets: Sources to cite

    Returns:
        The system prompt

    Raises:
        ValueError: If role, tone or template is unknown
    """
    role_description = _lookup(SYSTEM_ROLES, role, "role")
    tone_profile = _lookup(TONE_PROFILES, tone, "tone")
    article_template = _lookup(ARTICLE_TEMPLATES, template, "template")

    main_gap = blueprint.missing_faqs[0] if blueprint.missing_faqs else MAIN_GAP_FALLBACK
    shallow_topic = (
        blueprint.shallow_topics[0].title if blueprint.shallow_topics else SHALLOW_TOPIC_FALLBACK
    )

    return ARTICLE_SYSTEM_PROMPT_V1.format(
        role=role_description,
        tone_instructions=tone_profile["instructions"],
        template_label=article_template["label"],
        template_structure=article_template["structure"],
        forbidden_terms=", ".join(f'"{term}"' for term in FORBIDDEN_JARGON),
        placeholder=INTERNAL_LINK_PLACEHOLDER,
        internal_targets=_format_internal_targets(internal_targets),
        external_targets=_format_external_targets(external_targets),
        power_words=", ".join(blueprint.power_words),
        main_gap=main_gap,
        shallow_topic=shallow_topic,
    )


def build_article_prompt(topic: str, template: str) -> str:
    """User prompt asking for the full article.

    Raises:
        ValueError: If topic is empty or template is unknown
    """
    if not topic or not topic.strip():
        raise ValueError("topic cannot be empty")

    article_template = _lookup(ARTICLE_TEMPLATES, template, "template")
    return ARTICLE_WRITING_PROMPT_V1.format(
        topic=topic.strip(),
        placeholder=INTERNAL_LINK_PLACEHOLDER,
        template_structure=article_template["structure"],
    )
