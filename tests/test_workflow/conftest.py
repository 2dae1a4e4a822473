"""Fixtures for workflow tests."""

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from genesis.agents.serp_analyzer import assemble_blueprint
from genesis.integrations.wordpress_client import PostReference
from genesis.workflow.graph_state import create_initial_state

ARTICLE_TEXT = (
    "# Café especial\n\n"
    "## O que é\n\nTexto sobre torra. Veja <!-- LINK_INTERNO: [42] --> e "
    "<!-- LINK_INTERNO: [99] -->.\n\n"
    "## Quanto custa um café especial?\n\nDepende da origem."
)


@pytest.fixture
def article_text() -> str:
    return ARTICLE_TEXT


@pytest.fixture
def llm_response():
    """Factory for LiteLLM completion responses."""

    def _make(text: str) -> MagicMock:
        response = MagicMock()
        response.choices = [MagicMock()]
        response.choices[0].message.content = text
        return response

    return _make


@pytest.fixture
def initial_state():
    return create_initial_state(
        "café especial", keywords="café,especial", workflow_id="gen-test"
    )


@pytest.fixture
def blueprint(serp_payload):
    return assemble_blueprint("café especial", serp_payload)


@pytest.fixture
def wordpress():
    """Configured WordPress client double with one post."""
    client = Mock()
    client.is_configured = True
    client.list_posts = AsyncMock(
        return_value=(PostReference(42, "Moagem ideal", "https://blog.exemplo.com/moagem"),)
    )
    client.publish_post = AsyncMock(
        return_value={"id": 101, "link": "https://blog.exemplo.com/?p=101"}
    )
    return client
