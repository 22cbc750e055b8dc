from __future__ import annotations

import re
from typing import List

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
WHITESPACE_RE = re.compile(r"\s+")


def split_sentences(text: str) -> List[str]:
    """Split text on runs of terminal punctuation, trimming and dropping empties."""
    return [part.strip() for part in SENTENCE_SPLIT_RE.split(text) if part.strip()]


def split_words(text: str) -> List[str]:
    """Split text on whitespace; blank text yields no words."""
    return text.split()


def word_count(text: str) -> int:
    return len(split_words(text))


def sentence_count(text: str) -> int:
    return len(split_sentences(text))


def avg_word_length(text: str) -> float:
    """Non-whitespace characters per word, or 0.0 when there are no words."""
    words = split_words(text)
    if not words:
        return 0.0
    return len(WHITESPACE_RE.sub("", text)) / len(words)


def avg_sentence_length(text: str) -> float:
    """Words per sentence across the whole text, or 0.0 without sentences."""
    sentences = split_sentences(text)
    if not sentences:
        return 0.0
    return word_count(text) / len(sentences)


def count_exclamations(text: str) -> int:
    return text.count("!")
