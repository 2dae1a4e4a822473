"""CLI helper functions for displaying workflow results.

Print-based output for the ``genesis generate`` command.
"""

from typing import Sequence


def display_title_options(title_options: Sequence) -> None:
    """Display title candidates with CTR estimate and keyword flag.

    Example Output:
        1. [CTR 12.4% | 58 chars | ✓ keyword] Guia Completo de café especial...
           slug: guia-completo-de-cafe-especial-em-2025
    """
    if not title_options:
        print("\n⚠️  No title options generated")
        return

    print("\n" + "=" * 70)
    print("📝 TITLE OPTIONS")
    print("=" * 70)

    for idx, candidate in enumerate(title_options, start=1):
        keyword_flag = "✓ keyword" if candidate.keyword_present else "✗ keyword"
        print(
            f"\n{idx}. [CTR {candidate.estimated_ctr:.1f}% | {candidate.length} chars | "
            f"{keyword_flag}] {candidate.title}"
        )
        print(f"   slug: {candidate.slug}")


def display_blueprint_summary(blueprint) -> None:
    """Display dominant patterns, coverage gaps and shallow competitors."""
    if blueprint is None:
        return

    print("\n" + "=" * 70)
    print("🔎 SERP BLUEPRINT")
    print("=" * 70)

    dominant = [p for p in blueprint.title_patterns if p.count > 0]
    if dominant:
        print("\nTitle patterns:")
        for pattern in dominant:
            print(f"   • {pattern.category}: {pattern.count}")

    stats = blueprint.title_length_stats
    print(f"\nTitle length: min {stats.min} / avg {stats.avg} / max {stats.max}")

    if blueprint.missing_faqs:
        print("\nCoverage gaps:")
        for question in blueprint.missing_faqs:
            print(f"   ❓ {question}")

    if blueprint.shallow_topics:
        print("\nShallow competitors:")
        for shallow in blueprint.shallow_topics:
            print(f"   • {shallow.title} ({shallow.snippet_length} chars)")


def display_article(state: dict) -> None:
    """Display meta description, metrics and the final article."""
    print("\n" + "=" * 70)
    print("📄 ARTICLE")
    print("=" * 70)

    meta_description = state.get("meta_description")
    if meta_description:
        print(f"\nMeta description ({len(meta_description)} chars):")
        print(f"   {meta_description}")

    metrics = state.get("metrics")
    if metrics is not None:
        print(
            f"\nWords: {metrics.word_count} | Headings: {metrics.heading_count} | "
            f"Score: {metrics.score}/100"
        )

    print("\n" + "-" * 70)
    print(state.get("article", ""))
    print("-" * 70)

    if state.get("post_id"):
        print(f"\n✅ Published post {state['post_id']}: {state.get('post_link', '')}")


def display_errors(errors: Sequence[str]) -> None:
    """Display the errors of a failed run."""
    print("\n❌ Generation failed:")
    for error in errors:
        print(f"   • {error}")
