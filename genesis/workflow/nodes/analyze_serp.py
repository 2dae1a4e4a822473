"""AnalyzeSerpNode - Builds the competitive blueprint for the topic.

Integrates the SERP analyzer into the LangGraph workflow.
"""

from genesis.agents.serp_analyzer import BlueprintCache, build_blueprint
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution


class AnalyzeSerpNode(BaseNode):
    """Workflow node that builds (or reuses) the topic blueprint."""

    def __init__(self, cache: BlueprintCache | None = None):
        self.cache = cache

    @property
    def name(self) -> str:
        return "analyze_serp"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        """Build the blueprint for the topic.

        Args:
            state: Workflow state containing:
                - topic: Topic exactly as entered (cache key)

        Returns:
            State updates with:
                - blueprint: Blueprint for the topic
                - current_step: Transition to "generate_titles"
        """
        topic = state.get("topic", "")
        if not topic.strip():
            raise ValueError("topic is required and cannot be empty")

        blueprint = await build_blueprint(topic, cache=self.cache)

        return {
            "blueprint": blueprint,
            "current_step": "generate_titles",
        }
