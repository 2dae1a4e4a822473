"""LoadLinkTargetsNode - Loads existing WordPress posts as internal link targets.

A missing or unreachable WordPress site is not fatal: the article is written
without internal links.
"""

import logging

from genesis.errors import NetworkError
from genesis.integrations.wordpress_client import WordPressClient
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution

logger = logging.getLogger(__name__)


class LoadLinkTargetsNode(BaseNode):
    """Workflow node that fills the internal-link registry."""

    def __init__(self, wordpress: WordPressClient | None = None):
        self.wordpress = wordpress

    @property
    def name(self) -> str:
        return "load_link_targets"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        """Fetch the post list.

        Returns:
            State updates with:
                - link_targets: Tuple of PostReference (empty when unavailable)
                - current_step: Transition to "write_article"
        """
        workflow_id = state.get("workflow_id", "unknown")

        if self.wordpress is None or not self.wordpress.is_configured:
            logger.info(f"[{workflow_id}] WordPress not configured, skipping internal links")
            return {"link_targets": (), "current_step": "write_article"}

        try:
            posts = await self.wordpress.list_posts()
        except NetworkError as e:
            logger.warning(f"[{workflow_id}] Could not load WordPress posts: {e}")
            posts = ()

        return {
            "link_targets": posts,
            "current_step": "write_article",
        }
