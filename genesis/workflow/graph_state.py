"""LangGraph state schema for the generation workflow.

Nodes return partial updates; ``errors`` accumulates across nodes.

State Flow:
    1. User provides topic, keywords, template, tone
    2. SERP blueprint built (or reused from cache)
    3. Title candidates generated
    4. Internal link targets loaded from WordPress
    5. Article written
    6. Link placeholders resolved, metrics computed
    7. Meta description written
    8. Article published (only when a publish status was requested)

Example:
    >>> state = create_initial_state("café especial", keywords="café,especial")
    >>> state["current_step"]
    'analyze_serp'
"""

import uuid
from operator import add
from typing import Annotated, Literal, TypedDict

from genesis.integrations.prompts import ARTICLE_TEMPLATES, SYSTEM_ROLES, TONE_PROFILES
from genesis.integrations.wordpress_client import PUBLISH_STATUSES

WorkflowStep = Literal[
    "analyze_serp",
    "generate_titles",
    "load_link_targets",
    "write_article",
    "resolve_links",
    "write_meta",
    "publish",
    "completed",
    "failed",
]

WORKFLOW_STEPS: tuple[str, ...] = (
    "analyze_serp",
    "generate_titles",
    "load_link_targets",
    "write_article",
    "resolve_links",
    "write_meta",
    "publish",
)

TERMINAL_STEPS: frozenset[str] = frozenset({"completed", "failed"})


class GenerationState(TypedDict, total=False):
    """Complete state for one generation run.

    Required Fields:
        workflow_id: Unique identifier for this run
        topic: Topic exactly as entered
        keywords: Comma-separated keywords
        template: Key into ARTICLE_TEMPLATES
        tone: Key into TONE_PROFILES
        role: Key into SYSTEM_ROLES
        current_step: Next step to run (or a terminal step)
        errors: Error messages (accumulates)

    Optional Fields - Inputs:
        publish_status: WordPress status to publish with; None skips publishing

    Optional Fields - Agent Outputs:
        blueprint: Blueprint from the SERP analyzer
        title_options: TitleCandidate tuple
        link_targets: PostReference tuple used for internal links
        system_prompt: System instruction sent with the article call
        external_links: Sources the article was asked to cite
        raw_article: Generated text with unresolved placeholders
        article: Article with internal links resolved
        metrics: ContentMetrics for the article
        meta_description: Generated meta description

    Optional Fields - Publishing:
        post_id: WordPress post id
        post_link: WordPress post URL
    """

    workflow_id: str
    topic: str
    keywords: str
    template: str
    tone: str
    role: str
    current_step: WorkflowStep
    errors: Annotated[list[str], add]

    publish_status: str | None

    blueprint: object
    title_options: tuple
    link_targets: tuple
    system_prompt: str
    external_links: tuple
    raw_article: str
    article: str
    metrics: object
    meta_description: str

    post_id: int
    post_link: str


def create_initial_state(
    topic: str,
    *,
    keywords: str = "",
    template: str = "guide",
    tone: str = "especialista",
    role: str = "seoExpert",
    publish_status: str | None = None,
    workflow_id: str | None = None,
) -> GenerationState:
    """Create the initial state for a run.

    The topic is kept verbatim (it is the blueprint cache key).

    Raises:
        ValueError: If topic is empty or a registry key/publish status is unknown
    """
    if not topic or not topic.strip():
        raise ValueError("topic cannot be empty")

    if template not in ARTICLE_TEMPLATES:
        raise ValueError(f"Unknown template '{template}'")

    if tone not in TONE_PROFILES:
        raise ValueError(f"Unknown tone '{tone}'")

    if role not in SYSTEM_ROLES:
        raise ValueError(f"Unknown role '{role}'")

    if publish_status is not None and publish_status not in PUBLISH_STATUSES:
        raise ValueError(f"publish_status must be one of {PUBLISH_STATUSES}")

    return GenerationState(
        workflow_id=workflow_id or f"gen-{uuid.uuid4().hex[:12]}",
        topic=topic,
        keywords=keywords or "",
        template=template,
        tone=tone,
        role=role,
        publish_status=publish_status,
        current_step="analyze_serp",
        errors=[],
    )
