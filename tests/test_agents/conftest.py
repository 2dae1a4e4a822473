"""Fixtures for agent tests."""

import pytest

from genesis.agents.serp_analyzer import assemble_blueprint


@pytest.fixture
def blueprint(serp_payload):
    """Blueprint for "café especial" built from the shared payload."""
    return assemble_blueprint("café especial", serp_payload)


@pytest.fixture
def empty_blueprint():
    """Blueprint for a topic with no search results."""
    return assemble_blueprint("tema sem resultados", {})
