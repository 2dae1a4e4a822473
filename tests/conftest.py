"""Shared pytest configuration."""

import shutil
from pathlib import Path

import pytest

from genesis.utils.config import reset_settings
from genesis.utils.logging_config import reset_logging

# Variables a developer shell may export that would leak into tests
_SECRET_ENV_VARS = (
    "SERPAPI_API_KEY",
    "GEMINI_API_KEY",
    "WP_SITE_URL",
    "WP_USERNAME",
    "WP_APP_PASSWORD",
    "LOG_LEVEL",
    "LLM_MAX_ATTEMPTS",
    "LLM_RETRY_DELAY",
    "BLUEPRINT_CACHE_SIZE",
    "BLUEPRINT_CACHE_NORMALIZE_KEYS",
)


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch):
    """Minimal valid environment with no secrets, and fresh singletons."""
    monkeypatch.setenv("APP_NAME", "genesis-test")
    monkeypatch.setenv("ENVIRONMENT", "development")
    for name in _SECRET_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def api_keys(monkeypatch: pytest.MonkeyPatch):
    """Set search and generation API keys."""
    monkeypatch.setenv("SERPAPI_API_KEY", "test-serp-key")
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    reset_settings()


@pytest.fixture
def serp_payload() -> dict:
    """A SerpAPI payload for "café especial"."""
    return {
        "organic_results": [
            {
                "title": "10 Melhores Cafés Especiais do Brasil",
                "snippet": "Lista dos cafés especiais mais bem avaliados, com notas de torra, "
                "origem e preço médio por pacote para quem quer começar no mundo do café.",
                "link": "https://exemplo.com.br/melhores-cafes",
            },
            {
                "title": "Como Preparar Café Especial em Casa",
                "snippet": "Aprenda como preparar em casa, passo a passo.",
                "link": "https://exemplo.com.br/preparo",
            },
            {
                "title": "O que é café especial?",
                "snippet": "Entenda a pontuação SCA e a classificação dos grãos.",
                "link": "https://exemplo.com.br/o-que-e",
            },
        ],
        "related_questions": [
            {"question": "Quanto custa um café especial?"},
            {"question": "Como preparar café especial?"},
        ],
        "related_searches": [
            {"query": "café especial preço"},
            {"query": "café especial marcas"},
        ],
    }
