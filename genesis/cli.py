"""Command-line entry point.

Usage:
    genesis generate "café especial" --keywords "café,especial" --tone mentor
    genesis generate "café especial" --publish draft --json-logs
"""

import argparse
import asyncio
import sys

from genesis.agents.serp_analyzer import BlueprintCache
from genesis.integrations.prompts import ARTICLE_TEMPLATES, SYSTEM_ROLES, TONE_PROFILES
from genesis.integrations.wordpress_client import WordPressClient
from genesis.utils.logging_config import setup_logging
from genesis.workflow.cli_helpers import (
    display_article,
    display_blueprint_summary,
    display_errors,
    display_title_options,
)
from genesis.workflow.graph import run_generation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genesis", description="SERP-guided SEO article generator"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate an article for a topic")
    generate.add_argument("topic", help="Article topic")
    generate.add_argument("--keywords", default="", help="Comma-separated keywords")
    generate.add_argument("--template", default="guide", choices=sorted(ARTICLE_TEMPLATES))
    generate.add_argument("--tone", default="especialista", choices=sorted(TONE_PROFILES))
    generate.add_argument("--role", default="seoExpert", choices=sorted(SYSTEM_ROLES))
    generate.add_argument(
        "--publish",
        choices=("draft", "publish"),
        default=None,
        help="Publish to WordPress with this status",
    )
    generate.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")

    return parser


async def _generate(args: argparse.Namespace) -> int:
    state = await run_generation(
        args.topic,
        args.keywords,
        template=args.template,
        tone=args.tone,
        role=args.role,
        publish_status=args.publish,
        cache=BlueprintCache.from_settings(),
        wordpress=WordPressClient.from_settings(),
    )

    display_blueprint_summary(state.get("blueprint"))
    display_title_options(state.get("title_options", ()))

    if state.get("current_step") == "failed":
        display_errors(state.get("errors", []))
        return 1

    display_article(state)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(use_json=args.json_logs)

    if args.command == "generate":
        return asyncio.run(_generate(args))

    return 2


if __name__ == "__main__":
    sys.exit(main())
