"""Tests for title candidate generation."""

from datetime import datetime

import pytest

from genesis.agents.title_generator import (
    BASE_CTR,
    HIGH_CTR,
    apply_pattern,
    estimate_ctr,
    generate_slug,
    generate_titles,
    keyword_in_title,
)


class TestGenerateSlug:
    def test_transliterates_and_hyphenates(self):
        assert generate_slug("Café Especial: Guia Completo!") == "cafe-especial-guia-completo"

    def test_collapses_hyphen_runs(self):
        assert generate_slug("Moka -- Bialetti") == "moka-bialetti"

    def test_truncated_to_sixty_characters(self):
        slug = generate_slug("Guia Completo de café especial em 2025: Tudo o que Você Precisa Saber")

        assert len(slug) == 60
        assert slug.startswith("guia-completo-de-cafe-especial-em-2025-tudo")

    def test_non_ascii_letters_dropped(self):
        assert generate_slug("Ação & Reação") == "acao-reacao"

    def test_idempotent(self):
        slug = generate_slug("Como Preparar Café Especial em Casa")

        assert generate_slug(slug) == slug


class TestEstimateCtr:
    @pytest.mark.parametrize(
        "length, expected",
        [(50, BASE_CTR), (51, HIGH_CTR), (64, HIGH_CTR), (65, BASE_CTR)],
    )
    def test_length_window(self, length, expected):
        assert estimate_ctr("x" * length) == expected


class TestKeywordInTitle:
    def test_any_keyword_matches(self):
        assert keyword_in_title("Como preparar café", "moka, Café")

    def test_no_keyword_matches(self):
        assert not keyword_in_title("Como preparar chá", "café,moka")

    def test_blank_keywords_never_match(self):
        assert not keyword_in_title("Qualquer título", " , ")


class TestApplyPattern:
    def test_anchors_topic(self):
        assert apply_pattern("café", "10 Melhores Grãos") == "café: 10 Melhores Grãos"

    def test_keeps_example_that_mentions_topic(self):
        assert apply_pattern("café", "Tudo sobre café") == "Tudo sobre café"


class TestGenerateTitles:
    def test_five_slots_in_order(self, blueprint):
        titles = generate_titles("café especial", blueprint, "café,especial", year=2025)

        assert [t.title for t in titles] == [
            "café especial: 10 Melhores Cafés Especiais do Brasil",
            "café: Como café especial: Passo a Passo Detalhado (Com Exemplos Práticos)",
            "Guia Completo de café especial em 2025: Tudo o que Você Precisa Saber",
            "café especial: O que Ninguém Conta sobre Quanto custa um café especial",
            "O que é café especial? Descubra a Resposta Definitiva",
        ]

    def test_candidates_are_annotated(self, blueprint):
        titles = generate_titles("café especial", blueprint, "café,especial", year=2025)

        first = titles[0]
        assert first.length == len(first.title) == 52
        assert first.estimated_ctr == HIGH_CTR
        assert first.keyword_present is True
        assert first.slug == "cafe-especial-10-melhores-cafes-especiais-do-brasil"
        assert titles[2].estimated_ctr == BASE_CTR

    def test_fallbacks_without_results(self, empty_blueprint):
        titles = generate_titles("moagem", empty_blueprint, "", year=2025)

        assert titles[0].title == titles[2].title
        assert titles[0].title == "Guia Completo de moagem em 2025: Tudo o que Você Precisa Saber"
        assert titles[1].title.startswith("moagem: Como moagem:")
        assert titles[3].title == "moagem: O que Ninguém Conta sobre este tema"
        assert not any(t.keyword_present for t in titles)

    def test_defaults_to_current_year(self, blueprint):
        titles = generate_titles("café especial", blueprint, "")

        assert str(datetime.now().year) in titles[2].title

    def test_empty_topic_rejected(self, blueprint):
        with pytest.raises(ValueError, match="topic"):
            generate_titles("", blueprint, "café")
