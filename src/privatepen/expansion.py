from __future__ import annotations

from .config import PipelineConfig
from .models import ExpansionResult
from .tokenization import split_sentences, word_count

BULLET_MARKER = "• "


def expand_or_condense(text: str, config: PipelineConfig | None = None) -> ExpansionResult:
    """Condense long text into a short list, or pad short text with elaboration."""
    config = config or PipelineConfig()
    if word_count(text) > config.expand_word_threshold:
        sentences = split_sentences(text)[: max(0, config.condense_sentence_count)]
        lines = [
            _marker(config.condense_marker, idx) + sentence
            for idx, sentence in enumerate(sentences, start=1)
        ]
        return ExpansionResult(mode="condense", result="\n".join(lines))
    return ExpansionResult(mode="expand", result=text + config.expansion_text)


def _marker(style: str, index: int) -> str:
    if style == "numbered":
        return f"{index}. "
    if style == "bullet":
        return BULLET_MARKER
    raise ValueError(f"Unknown condense marker '{style}'.")
