"""Tests for BaseNode and the node decorators."""

import logging

import pytest

from genesis.errors import ConfigurationError
from genesis.workflow.nodes import BaseNode, handle_node_errors, log_node_execution


class EchoNode(BaseNode):
    @property
    def name(self) -> str:
        return "echo"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        return {"current_step": "completed"}


class BrokenNode(BaseNode):
    def __init__(self, error: Exception):
        self.error = error

    @property
    def name(self) -> str:
        return "broken"

    @handle_node_errors
    @log_node_execution
    async def execute(self, state: dict) -> dict:
        raise self.error


def test_base_node_is_abstract():
    with pytest.raises(TypeError):
        BaseNode()


@pytest.mark.asyncio
async def test_successful_node_returns_updates():
    assert await EchoNode().execute({"workflow_id": "gen-1"}) == {"current_step": "completed"}


@pytest.mark.asyncio
async def test_exception_becomes_failed_state():
    result = await BrokenNode(ValueError("blueprint is required")).execute({})

    assert result["current_step"] == "failed"
    assert result["errors"] == ["Node 'broken' failed: ValueError: blueprint is required"]


@pytest.mark.asyncio
async def test_configuration_error_is_reported_not_raised():
    result = await BrokenNode(ConfigurationError("GEMINI_API_KEY is not set")).execute({})

    assert result["current_step"] == "failed"
    assert "ConfigurationError: GEMINI_API_KEY is not set" in result["errors"][0]


@pytest.mark.asyncio
async def test_execution_is_logged_with_workflow_id(caplog):
    caplog.set_level(logging.INFO, logger="genesis.workflow.nodes")

    await EchoNode().execute({"workflow_id": "gen-abc"})

    assert "[gen-abc] Starting node: echo" in caplog.text
    assert "[gen-abc] Completed node: echo" in caplog.text


@pytest.mark.asyncio
async def test_failure_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="genesis.workflow.nodes")

    await BrokenNode(RuntimeError("boom")).execute({"workflow_id": "gen-abc"})

    assert "[gen-abc] Failed node: broken" in caplog.text
