"""PublishNode - Sends the finished article to WordPress."""

from genesis.errors import ConfigurationError
from genesis.integrations.wordpress_client import WordPressClient
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution


class PublishNode(BaseNode):
    """Workflow node that publishes the article under the first title candidate."""

    def __init__(self, wordpress: WordPressClient | None = None):
        self.wordpress = wordpress

    @property
    def name(self) -> str:
        return "publish"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        """Publish the article.

        Args:
            state: Workflow state containing:
                - article: Final article text
                - title_options: Title candidates (first one is used)
                - publish_status: WordPress post status

        Returns:
            State updates with:
                - post_id: Created post id
                - post_link: Created post URL
                - current_step: Transition to "completed"
        """
        if self.wordpress is None:
            raise ConfigurationError("WordPress client is not available", setting="WP_SITE_URL")

        article = state.get("article", "")
        if not article.strip():
            raise ValueError("article is required and cannot be empty")

        title_options = state.get("title_options") or ()
        if not title_options:
            raise ValueError("title_options is required")

        post = await self.wordpress.publish_post(
            title_options[0].title,
            article,
            status=state.get("publish_status") or "draft",
        )

        return {
            "post_id": post.get("id"),
            "post_link": post.get("link", ""),
            "current_step": "completed",
        }
