from __future__ import annotations

import math
from typing import List

from .config import PipelineConfig
from .models import SummaryResult
from .tokenization import split_sentences

IMPORTANCE_WORDS = (
    "important",
    "key",
    "main",
    "essential",
    "critical",
    "significant",
    "must",
    "need",
    "should",
)


def summarize(text: str, config: PipelineConfig | None = None) -> SummaryResult:
    """
    Build brief and detailed extractive summaries plus key points.

    Texts with two sentences or fewer come back verbatim in both summaries.
    """
    config = config or PipelineConfig()
    sentences = split_sentences(text)
    if len(sentences) <= 2:
        return SummaryResult(brief=text, detailed=text, key_points=[text])

    return SummaryResult(
        brief=_brief(sentences, config.summary_brief_policy),
        detailed=_detailed(sentences, config.summary_detail_policy),
        key_points=extract_key_points(sentences, config.key_point_limit),
    )


def _brief(sentences: List[str], policy: str) -> str:
    if policy == "first_last":
        return f"{sentences[0]}. {sentences[-1]}."
    if policy == "first":
        return f"{sentences[0]}."
    raise ValueError(f"Unknown summary brief policy '{policy}'.")


def _detailed(sentences: List[str], policy: str) -> str:
    if policy == "first_third":
        count = max(2, math.ceil(len(sentences) / 3))
        chosen = sentences[:count]
    elif policy == "midpoint":
        chosen = [sentences[0], sentences[len(sentences) // 2], sentences[-1]]
    else:
        raise ValueError(f"Unknown summary detail policy '{policy}'.")
    return ". ".join(chosen) + "."


def extract_key_points(sentences: List[str], limit: int = 3) -> List[str]:
    """Sentences mentioning an importance word, or the opening sentences as fallback."""
    limit = max(0, limit)
    matches = [
        sentence
        for sentence in sentences
        if any(word in sentence.lower() for word in IMPORTANCE_WORDS)
    ]
    if matches:
        return matches[:limit]
    return sentences[:limit]
