"""WriteArticleNode - Generates the raw article text."""

from genesis.agents.article_writer import write_article
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution


class WriteArticleNode(BaseNode):
    """Workflow node that writes the article from the blueprint."""

    @property
    def name(self) -> str:
        return "write_article"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        """Write the article.

        Args:
            state: Workflow state containing:
                - topic, role, tone, template
                - blueprint: Blueprint from analyze_serp
                - link_targets: Posts the article may link to

        Returns:
            State updates with:
                - raw_article: Text with unresolved link placeholders
                - system_prompt: System instruction that was sent
                - external_links: Sources the article was asked to cite
                - current_step: Transition to "resolve_links"
        """
        blueprint = state.get("blueprint")
        if blueprint is None:
            raise ValueError("blueprint is required")

        draft = await write_article(
            state.get("topic", ""),
            blueprint,
            internal_targets=state.get("link_targets", ()),
            role=state.get("role", "seoExpert"),
            tone=state.get("tone", "especialista"),
            template=state.get("template", "guide"),
        )

        return {
            "raw_article": draft.content,
            "system_prompt": draft.system_prompt,
            "external_links": draft.external_links,
            "current_step": "resolve_links",
        }
