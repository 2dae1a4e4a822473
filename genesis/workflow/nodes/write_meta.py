"""WriteMetaNode - Generates the meta description."""

from genesis.agents.meta_writer import generate_meta_description
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution


class WriteMetaNode(BaseNode):
    """Workflow node that writes the meta description.

    Routes to "publish" only when the run asked for a publish status.
    """

    @property
    def name(self) -> str:
        return "write_meta"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        blueprint = state.get("blueprint")
        if blueprint is None:
            raise ValueError("blueprint is required")

        meta_description = await generate_meta_description(state.get("topic", ""), blueprint)

        return {
            "meta_description": meta_description,
            "current_step": "publish" if state.get("publish_status") else "completed",
        }
