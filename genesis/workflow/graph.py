"""LangGraph workflow graph definition.

The generation workflow is strictly sequential:

1. analyze_serp → generate_titles → load_link_targets
2. load_link_targets → write_article → resolve_links → write_meta
3. write_meta → publish (only when a publish status was requested)

Every node names the next step in ``current_step``; a node that fails sets it
to "failed" and the graph ends without running later nodes.
"""

import logging

from langgraph.graph import END, StateGraph

from genesis.agents.serp_analyzer import BlueprintCache
from genesis.integrations.wordpress_client import WordPressClient
from genesis.workflow.graph_state import GenerationState, create_initial_state
from genesis.workflow.nodes.analyze_serp import AnalyzeSerpNode
from genesis.workflow.nodes.generate_titles import GenerateTitlesNode
from genesis.workflow.nodes.load_link_targets import LoadLinkTargetsNode
from genesis.workflow.nodes.publish import PublishNode
from genesis.workflow.nodes.resolve_links import ResolveLinksNode
from genesis.workflow.nodes.write_article import WriteArticleNode
from genesis.workflow.nodes.write_meta import WriteMetaNode

logger = logging.getLogger(__name__)

# Routing keys (current_step values) to graph targets
_ROUTES: dict[str, str] = {
    "generate_titles": "generate_titles",
    "load_link_targets": "load_link_targets",
    "write_article": "write_article",
    "resolve_links": "resolve_links",
    "write_meta": "write_meta",
    "publish": "publish",
    "completed": END,
    "failed": END,
}


def route_next(state: GenerationState) -> str:
    """Conditional routing on ``current_step``.

    Args:
        state: Current workflow state

    Returns:
        Routing key; unknown steps are treated as "failed"
    """
    step = state.get("current_step", "failed")

    if step == "failed":
        logger.info(f"[{state.get('workflow_id')}] Run failed → ending workflow")
    elif step not in _ROUTES:
        logger.error(f"[{state.get('workflow_id')}] Unknown step '{step}' → ending workflow")
        return "failed"

    return step


def create_generation_graph(
    *,
    cache: BlueprintCache | None = None,
    wordpress: WordPressClient | None = None,
    checkpointer=None,
):
    """Create and compile the generation workflow graph.

    Args:
        cache: Blueprint cache shared across runs (None disables caching)
        wordpress: WordPress client for link targets and publishing
            (None skips internal links; publishing then fails)
        checkpointer: Optional LangGraph checkpoint saver

    Returns:
        Compiled StateGraph ready for execution

    Example:
        >>> graph = create_generation_graph(cache=BlueprintCache())
        >>> result = await graph.ainvoke(create_initial_state("café especial"))
        >>> result["current_step"]
        'completed'
    """
    workflow = StateGraph(GenerationState)

    workflow.add_node("analyze_serp", AnalyzeSerpNode(cache).execute)
    workflow.add_node("generate_titles", GenerateTitlesNode().execute)
    workflow.add_node("load_link_targets", LoadLinkTargetsNode(wordpress).execute)
    workflow.add_node("write_article", WriteArticleNode().execute)
    workflow.add_node("resolve_links", ResolveLinksNode().execute)
    workflow.add_node("write_meta", WriteMetaNode().execute)
    workflow.add_node("publish", PublishNode(wordpress).execute)

    for node_name in (
        "analyze_serp",
        "generate_titles",
        "load_link_targets",
        "write_article",
        "resolve_links",
        "write_meta",
        "publish",
    ):
        workflow.add_conditional_edges(node_name, route_next, _ROUTES)

    workflow.set_entry_point("analyze_serp")

    return workflow.compile(checkpointer=checkpointer)


async def run_generation(
    topic: str,
    keywords: str = "",
    *,
    template: str = "guide",
    tone: str = "especialista",
    role: str = "seoExpert",
    publish_status: str | None = None,
    cache: BlueprintCache | None = None,
    wordpress: WordPressClient | None = None,
) -> GenerationState:
    """Run one generation end to end.

    Args:
        topic: Article topic
        keywords: Comma-separated keywords
        template: Key into ARTICLE_TEMPLATES
        tone: Key into TONE_PROFILES
        role: Key into SYSTEM_ROLES
        publish_status: WordPress status to publish with (None skips publishing)
        cache: Blueprint cache shared across runs
        wordpress: WordPress client

    Returns:
        Final GenerationState; check ``current_step`` and ``errors``

    Raises:
        ValueError: If the inputs are invalid (nothing is run)
    """
    initial_state = create_initial_state(
        topic,
        keywords=keywords,
        template=template,
        tone=tone,
        role=role,
        publish_status=publish_status,
    )

    graph = create_generation_graph(cache=cache, wordpress=wordpress)

    logger.info(
        f"[{initial_state['workflow_id']}] Starting generation",
        extra={"extra_fields": {"template": template, "tone": tone, "publish": publish_status}},
    )
    final_state = await graph.ainvoke(initial_state)
    logger.info(
        f"[{initial_state['workflow_id']}] Generation finished: {final_state.get('current_step')}"
    )
    return final_state
