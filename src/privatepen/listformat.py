from __future__ import annotations

from .models import ListResult
from .tokenization import split_sentences


def format_lists(text: str) -> ListResult:
    """Render each sentence of text as bullets, numbers, checkboxes and arrows."""
    sentences = split_sentences(text)
    return ListResult(
        bullets="\n".join(f"• {s}" for s in sentences),
        numbered="\n".join(f"{i}. {s}" for i, s in enumerate(sentences, start=1)),
        checkboxes="\n".join(f"☐ {s}" for s in sentences),
        arrows="\n".join(f"→ {s}" for s in sentences),
    )
