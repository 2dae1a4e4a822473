"""Tests for the command-line entry point."""

from unittest.mock import AsyncMock, patch

import pytest

from genesis.agents.content_metrics import ContentMetrics
from genesis.agents.serp_analyzer import assemble_blueprint
from genesis.agents.title_generator import generate_titles
from genesis.cli import build_parser, main


@pytest.fixture
def completed_state(serp_payload):
    blueprint = assemble_blueprint("café especial", serp_payload)
    return {
        "workflow_id": "gen-cli",
        "current_step": "completed",
        "errors": [],
        "blueprint": blueprint,
        "title_options": generate_titles("café especial", blueprint, "café", year=2025),
        "article": "# Café especial\n\nTexto",
        "meta_description": "Descubra o café especial.",
        "metrics": ContentMetrics(word_count=5, heading_count=1, score=8),
    }


class TestParser:
    def test_generate_defaults(self):
        args = build_parser().parse_args(["generate", "café especial"])

        assert args.topic == "café especial"
        assert args.keywords == ""
        assert args.template == "guide"
        assert args.tone == "especialista"
        assert args.publish is None
        assert args.json_logs is False

    def test_rejects_unknown_tone(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["generate", "café", "--tone", "sarcastic"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    def test_prints_results(self, completed_state, capsys):
        with patch("genesis.cli.run_generation", new_callable=AsyncMock) as mock_run:
            mock_run.return_value = completed_state

            exit_code = main(
                ["generate", "café especial", "--keywords", "café", "--publish", "draft"]
            )

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "TITLE OPTIONS" in output
        assert "Quanto custa um café especial?" in output
        assert "Descubra o café especial." in output
        assert "Score: 8/100" in output
        assert mock_run.call_args.args == ("café especial", "café")
        assert mock_run.call_args.kwargs["publish_status"] == "draft"

    def test_failed_run_exits_non_zero(self, capsys):
        failed = {
            "current_step": "failed",
            "errors": ["Node 'analyze_serp' failed: SerpAnalysisError: SERP analysis failed"],
        }

        with patch("genesis.cli.run_generation", new_callable=AsyncMock) as mock_run:
            mock_run.return_value = failed

            exit_code = main(["generate", "café especial"])

        assert exit_code == 1
        assert "SerpAnalysisError" in capsys.readouterr().out
