"""Centralized prompt registry for LLM interactions.

This module contains the role/tone/template registries and the versioned
prompt templates used across the application. Templates are static strings
filled with str.format; no dynamic logic lives here.

Naming convention: <PURPOSE>_PROMPT_V<NUMBER>

Version History:
- V1: Initial prompt set for SERP-guided article generation
"""

from typing import Final

# Placeholder the model must emit for internal links. The link processor
# matches this syntax, so any change here must be mirrored there.
INTERNAL_LINK_PLACEHOLDER: Final[str] = "<!-- LINK_INTERNO: [ID] -->"

SYSTEM_ROLES: Final[dict[str, str]] = {
    "seoExpert": (
        "Você é um redator especialista em SEO e estrategista de conteúdo. "
        "Seu estilo foca na intenção de busca e nos princípios E-E-A-T "
        "(Experiência, Especialidade, Autoridade e Confiança)."
    ),
    "productReviewer": (
        "Você é um analista técnico especializado em análises imparciais e profundas de produtos."
    ),
    "creativeWriter": "Você é um copywriter criativo focado em storytelling e retenção.",
}

ARTICLE_TEMPLATES: Final[dict[str, dict[str, str]]] = {
    "guide": {
        "label": "Guia Completo",
        "structure": "Intro -> O que é -> Passo a Passo -> Benefícios -> FAQ -> Conclusão.",
    },
    "listicle": {
        "label": "Lista (Top X)",
        "structure": "Intro -> Itens Numerados (H2) -> Por que escolher cada um -> Conclusão.",
    },
    "review": {
        "label": "Review/Análise",
        "structure": "Resumo -> Ficha Técnica -> Prós/Contras -> Comparação -> Veredicto.",
    },
}

TONE_PROFILES: Final[dict[str, dict[str, str]]] = {
    "especialista": {
        "label": "Especialista Acessível",
        "instructions": "Autoridade silenciosa, tom claro e direto, insights práticos.",
    },
    "mentor": {
        "label": "Mentor Prático",
        "instructions": "Focado em soluções, linguagem coloquial, 'truques que funcionam'.",
    },
    "contador": {
        "label": "Storyteller",
        "instructions": "Narrativa envolvente, identificação do leitor, exemplos vívidos.",
    },
    "entusiasta": {
        "label": "Entusiasta Inspirador",
        "instructions": "Energético, positivo, foca no 'porquê' e na alegria do processo.",
    },
}

# Quality-signal jargon the article must demonstrate but never name
FORBIDDEN_JARGON: Final[tuple[str, ...]] = (
    "E-E-A-T",
    "Experiência",
    "Especialidade",
    "Autoridade",
    "Confiança",
)

ARTICLE_SYSTEM_PROMPT_V1 = """{role}
TONALIDADE: {tone_instructions}
OBJETIVO: Artigo focado em SEO de alta autoridade.
ESTRUTURA BASE ({template_label}): {template_structure}

REGRA CRÍTICA PARA NATURALIDADE:
NUNCA use termos como {forbidden_terms} explicitamente no texto. Demonstre essas qualidades através da profundidade do conteúdo.

LINKAGEM INTERNA (MANDATÓRIO):
Insira pelo menos 3 links internos no meio do texto usando EXATAMENTE: {placeholder}
IDs disponíveis: {internal_targets}

LINKAGEM EXTERNA (MANDATÓRIO):
Você DEVE citar fontes externas de autoridade da lista abaixo para dar credibilidade ao texto.
Use o formato Markdown [Título](URL) naturalmente no decorrer dos parágrafos.
FONTES EXTERNAS PARA CITAR:
{external_targets}

POWER WORDS PARA USAR: {power_words}

PREENCHIMENTO OBRIGATÓRIO DE LACUNAS:
1. Dedique uma seção H2 completa para: "{main_gap}"
2. No tópico "{shallow_topic}", forneça exemplos práticos e dados.
3. Inclua uma tabela comparativa.
"""

ARTICLE_WRITING_PROMPT_V1 = """Escreva o artigo completo sobre {topic}.
MANDATÓRIO: Use os links internos {placeholder} e TAMBÉM inclua links externos em Markdown [Título](URL) citando as fontes fornecidas na instrução do sistema.
Estrutura base: {template_structure}"""

META_DESCRIPTION_SYSTEM_PROMPT_V1 = "Especialista em copywriting SEO."

META_DESCRIPTION_PROMPT_V1 = (
    "Gere uma meta descrição SEO para: {topic}. "
    "CTAs: {ctas}. "
    "Power Words: {power_words}. "
    "Comprimento: {ideal_length}. "
    "Responda: {main_question}."
)
