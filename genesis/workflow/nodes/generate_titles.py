"""GenerateTitlesNode - Proposes five SEO title candidates."""

from genesis.agents.title_generator import generate_titles
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution


class GenerateTitlesNode(BaseNode):
    """Workflow node that generates title candidates from the blueprint."""

    @property
    def name(self) -> str:
        return "generate_titles"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        """Generate the five title candidates.

        Args:
            state: Workflow state containing:
                - topic: Article topic
                - keywords: Comma-separated keywords
                - blueprint: Blueprint from analyze_serp

        Returns:
            State updates with:
                - title_options: Tuple of TitleCandidate
                - current_step: Transition to "load_link_targets"
        """
        blueprint = state.get("blueprint")
        if blueprint is None:
            raise ValueError("blueprint is required")

        titles = generate_titles(state.get("topic", ""), blueprint, state.get("keywords", ""))

        return {
            "title_options": titles,
            "current_step": "load_link_targets",
        }
