"""LangGraph workflow node infrastructure.

- BaseNode abstract class: contract for all nodes
- handle_node_errors: converts exceptions into error state updates
- log_node_execution: start/finish/duration logging per node

Example Usage:
    >>> class MyNode(BaseNode):
    ...     @property
    ...     def name(self) -> str:
    ...         return "my_node"
    ...
    ...     @handle_node_errors
    ...     @log_node_execution
    ...     async def execute(self, state):
    ...         return {"current_step": "completed"}
"""

import functools
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from genesis.workflow.graph_state import GenerationState

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class BaseNode(ABC):
    """Abstract base class for workflow nodes.

    All workflow nodes must:
    1. Accept GenerationState as input
    2. Return dict of state updates (not full state), including the
       next ``current_step``
    3. Handle errors gracefully (use @handle_node_errors)
    4. Log execution (use @log_node_execution)
    """

    @abstractmethod
    async def execute(self, state: GenerationState) -> dict[str, Any]:
        """Execute node logic and return state updates."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Node name for logging and identification."""


def handle_node_errors(func: F) -> F:
    """Decorator converting node exceptions into a failed state update.

    The run stops at the failing node: ``current_step`` becomes "failed"
    and the message is appended to ``errors``. Missing configuration ends up
    here too, so it is reported instead of crashing the process.

    Example:
        >>> result = await FailingNode().execute({})
        >>> result["current_step"]
        'failed'
    """

    @functools.wraps(func)
    async def wrapper(self: BaseNode, state, *args, **kwargs) -> dict[str, Any]:
        try:
            return await func(self, state, *args, **kwargs)
        except Exception as e:
            error_msg = f"Node '{self.name}' failed: {type(e).__name__}: {str(e)}"
            logger.error(error_msg, exc_info=True)
            return {
                "errors": [error_msg],
                "current_step": "failed",
            }

    return wrapper  # type: ignore


def log_node_execution(func: F) -> F:
    """Decorator to log node start, end and duration with the workflow id.

    Logs:
        INFO: [gen-123] Starting node: analyze_serp
        INFO: [gen-123] Completed node: analyze_serp (0.84s)
    """

    @functools.wraps(func)
    async def wrapper(self: BaseNode, state, *args, **kwargs) -> dict[str, Any]:
        workflow_id = state.get("workflow_id", "unknown")

        logger.info(f"[{workflow_id}] Starting node: {self.name}")
        start_time = time.time()

        try:
            result = await func(self, state, *args, **kwargs)
        except Exception:
            duration = time.time() - start_time
            logger.error(f"[{workflow_id}] Failed node: {self.name} ({duration:.2f}s)")
            raise

        duration = time.time() - start_time
        logger.info(f"[{workflow_id}] Completed node: {self.name} ({duration:.2f}s)")
        return result

    return wrapper  # type: ignore


__all__ = [
    "BaseNode",
    "handle_node_errors",
    "log_node_execution",
]
