"""Title Generator - Deterministic SEO title candidates.

Fills five fixed title formulas from the topic, keywords and blueprint and
annotates each with a slug, a coarse CTR estimate and keyword presence.
No LLM calls.

Example:
    >>> titles = generate_titles("café especial", blueprint, "café,especial", year=2025)
    >>> titles[2].title
    'Guia Completo de café especial em 2025: Tudo o que Você Precisa Saber'
"""

import re
import unicodedata
from dataclasses import dataclass
from datetime import datetime
from typing import Final

from genesis.agents.serp_analyzer import Blueprint

SLUG_MAX_LENGTH: Final[int] = 60
HIGH_CTR: Final[float] = 18.5
BASE_CTR: Final[float] = 12.4
FAQ_FALLBACK: Final[str] = "este tema"

TITLE_FORMULAS: Final[dict[str, str]] = {
    "ultimate_guide": "Guia Completo de {topic} em {year}: Tudo o que Você Precisa Saber",
    "how_to": "Como {topic}: Passo a Passo Detalhado (Com Exemplos Práticos)",
    "question_based": "{main_question}? Descubra a Resposta Definitiva",
    "untold": "{topic}: O que Ninguém Conta sobre {gap}",
}

_INVALID_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")


@dataclass(frozen=True)
class TitleCandidate:
    """A proposed title with its heuristics.

    Attributes:
        title: Title text
        slug: URL slug derived from the title
        estimated_ctr: Two-bucket CTR estimate in percent
        length: Title length in characters
        keyword_present: Whether any keyword appears in the title
    """

    title: str
    slug: str
    estimated_ctr: float
    length: int
    keyword_present: bool


def generate_slug(title: str) -> str:
    """Transliterate a title into a URL slug.

    Lowercases, strips diacritics, drops everything but ASCII word
    characters, whitespace and hyphens, joins words with single hyphens and
    truncates to 60 characters. Idempotent.

    Examples:
        >>> generate_slug("Café Especial: Guia Completo!")
        'cafe-especial-guia-completo'
        >>> generate_slug("a -- b")
        'a-b'
    """
    text = unicodedata.normalize("NFD", title.lower())
    text = "".join(char for char in text if not unicodedata.combining(char))
    text = _INVALID_SLUG_CHARS.sub("", text)
    text = _WHITESPACE.sub("-", text)
    text = _HYPHEN_RUNS.sub("-", text)
    return text[:SLUG_MAX_LENGTH]


def estimate_ctr(title: str) -> float:
    """Coarse CTR estimate: titles of 51-64 characters do better.

    Examples:
        >>> estimate_ctr("x" * 51), estimate_ctr("x" * 65)
        (18.5, 12.4)
    """
    return HIGH_CTR if 50 < len(title) < 65 else BASE_CTR


def _split_keywords(keywords_csv: str) -> list[str]:
    return [keyword.strip() for keyword in (keywords_csv or "").split(",") if keyword.strip()]


def keyword_in_title(title: str, keywords_csv: str) -> bool:
    """Whether any comma-separated keyword occurs in the title (case-insensitive).

    Blank keywords are ignored, so an empty keyword list never matches.

    Examples:
        >>> keyword_in_title("Como preparar café", " Café , moka")
        True
        >>> keyword_in_title("Como preparar chá", "")
        False
    """
    lowered = title.lower()
    return any(keyword.lower() in lowered for keyword in _split_keywords(keywords_csv))


def apply_pattern(topic: str, example: str) -> str:
    """Anchor a competitor title on the topic unless it already mentions it.

    Examples:
        >>> apply_pattern("café", "10 Melhores Grãos")
        'café: 10 Melhores Grãos'
        >>> apply_pattern("café", "Guia do café")
        'Guia do café'
    """
    return example if topic in example else f"{topic}: {example}"


def extract_main_question(topic: str) -> str:
    return f"O que é {topic}"


def _build_candidate(title: str, keywords_csv: str) -> TitleCandidate:
    return TitleCandidate(
        title=title,
        slug=generate_slug(title),
        estimated_ctr=estimate_ctr(title),
        length=len(title),
        keyword_present=keyword_in_title(title, keywords_csv),
    )


def generate_titles(
    topic: str,
    blueprint: Blueprint,
    keywords_csv: str,
    *,
    year: int | None = None,
) -> tuple[TitleCandidate, ...]:
    """Generate exactly five title candidates in fixed slot order.

    Slots:
        1. Dominant competitor pattern anchored on the topic (ultimate-guide
           formula when no competitor example exists)
        2. First keyword + how-to formula
        3. Ultimate-guide formula
        4. Topic + first missing FAQ (text before '?')
        5. Question formula

    Args:
        topic: Article topic
        blueprint: Blueprint for the topic
        keywords_csv: Comma-separated keywords
        year: Year used in the ultimate-guide formula (default: current year)

    Returns:
        Tuple of five TitleCandidate

    Raises:
        ValueError: If topic is empty
    """
    if not topic or not topic.strip():
        raise ValueError("topic cannot be empty")

    year = year or datetime.now().year

    ultimate_guide = TITLE_FORMULAS["ultimate_guide"].format(topic=topic, year=year)
    how_to = TITLE_FORMULAS["how_to"].format(topic=topic)
    question_based = TITLE_FORMULAS["question_based"].format(
        main_question=extract_main_question(topic)
    )

    patterns = blueprint.title_patterns
    dominant_example = patterns[0].examples[0] if patterns and patterns[0].examples else None

    keywords = _split_keywords(keywords_csv)
    lead_keyword = keywords[0] if keywords else topic

    faq = blueprint.missing_faqs[0].split("?")[0] if blueprint.missing_faqs else ""
    gap = faq.strip() or FAQ_FALLBACK

    titles = [
        apply_pattern(topic, dominant_example or ultimate_guide),
        f"{lead_keyword}: {how_to}",
        ultimate_guide,
        TITLE_FORMULAS["untold"].format(topic=topic, gap=gap),
        question_based,
    ]

    return tuple(_build_candidate(title, keywords_csv) for title in titles)
