from __future__ import annotations

from .config import PipelineConfig
from .models import RephraseResult
from .substitution import SubstitutionTable
from .tokenization import split_sentences

FORMAL_TABLE = SubstitutionTable(
    [
        ("get", "obtain"),
        ("got", "obtained"),
        ("very", "extremely"),
        ("really", "genuinely"),
        ("kinda", "somewhat"),
        ("a lot of", "numerous"),
        ("thing", "matter"),
        ("stuff", "material"),
        ("but", "however"),
    ]
)

SIMPLE_TABLE = SubstitutionTable(
    [
        ("obtain", "get"),
        ("acquire", "get"),
        ("utilize", "use"),
        ("demonstrate", "show"),
    ]
)

CREATIVE_TABLE = SubstitutionTable(
    [
        ("said", "articulated"),
        ("show", "demonstrate"),
        ("good", "remarkable"),
        ("bad", "unfortunate"),
        ("make", "create"),
        ("think", "believe"),
        ("important", "crucial"),
    ]
)


def rephrase(text: str, config: PipelineConfig | None = None) -> RephraseResult:
    """Produce formal, simple and creative variants of text."""
    config = config or PipelineConfig()
    simple = SIMPLE_TABLE.apply(text)
    if config.rephrase_simple_max_words is not None:
        simple = truncate_sentences(simple, config.rephrase_simple_max_words)
    return RephraseResult(
        formal=FORMAL_TABLE.apply(text),
        simple=simple,
        creative=CREATIVE_TABLE.apply(text),
    )


def truncate_sentences(text: str, max_words: int) -> str:
    """Cut every sentence to its first max_words words and rejoin them."""
    sentences = split_sentences(text)
    if not sentences:
        return ""
    limit = max(1, max_words)
    return ". ".join(" ".join(sentence.split()[:limit]) for sentence in sentences) + "."
