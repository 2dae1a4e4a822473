"""ResolveLinksNode - Rewrites link placeholders and scores the article."""

from genesis.agents.content_metrics import compute_metrics
from genesis.agents.link_processor import resolve_internal_links
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution


class ResolveLinksNode(BaseNode):
    @property
    def name(self) -> str:
        return "resolve_links"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        """Resolve internal links and compute content metrics.

        Returns:
            State updates with:
                - article: Final article text
                - metrics: ContentMetrics (None for empty text)
                - current_step: Transition to "write_meta"
        """
        raw_article = state.get("raw_article", "")
        if not raw_article.strip():
            raise ValueError("raw_article is required and cannot be empty")

        article = resolve_internal_links(raw_article, state.get("link_targets", ()))

        return {
            "article": article,
            "metrics": compute_metrics(article),
            "current_step": "write_meta",
        }
