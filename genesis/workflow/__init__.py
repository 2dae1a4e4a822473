"""LangGraph generation workflow."""

from genesis.workflow.graph import create_generation_graph, route_next, run_generation
from genesis.workflow.graph_state import GenerationState, create_initial_state

__all__ = [
    "create_generation_graph",
    "run_generation",
    "route_next",
    "GenerationState",
    "create_initial_state",
]
