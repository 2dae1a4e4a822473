"""Agent modules for SERP-guided content generation.

Deterministic analysis (classification, gaps, blueprint, titles, prompts,
link resolution, metrics) plus the two generation agents (article, meta).
"""

from genesis.agents.article_writer import ArticleDraft, write_article
from genesis.agents.content_metrics import ContentMetrics, compute_metrics
from genesis.agents.gap_detector import ShallowTopic, find_coverage_gaps, identify_shallow_topics
from genesis.agents.link_processor import find_placeholder_ids, resolve_internal_links
from genesis.agents.meta_writer import generate_meta_description
from genesis.agents.pattern_classifier import PatternMatch, classify_titles, tag_title
from genesis.agents.prompt_assembler import (
    ExternalLink,
    build_article_prompt,
    build_system_prompt,
    external_links_from,
)
from genesis.agents.serp_analyzer import Blueprint, BlueprintCache, build_blueprint
from genesis.agents.title_generator import TitleCandidate, generate_slug, generate_titles

__all__ = [
    "classify_titles",
    "tag_title",
    "PatternMatch",
    "find_coverage_gaps",
    "identify_shallow_topics",
    "ShallowTopic",
    "build_blueprint",
    "Blueprint",
    "BlueprintCache",
    "generate_titles",
    "generate_slug",
    "TitleCandidate",
    "build_system_prompt",
    "build_article_prompt",
    "external_links_from",
    "ExternalLink",
    "write_article",
    "ArticleDraft",
    "resolve_internal_links",
    "find_placeholder_ids",
    "generate_meta_description",
    "compute_metrics",
    "ContentMetrics",
]
