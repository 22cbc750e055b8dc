from __future__ import annotations

import math
import statistics
from collections import Counter
from datetime import datetime, timezone
from typing import List

from .models import StyleProfile
from .tokenization import split_sentences, split_words

MAX_COMMON_PHRASES = 5


def analyze_writing_style(sample: str, now: datetime | None = None) -> StyleProfile:
    """Derive sentence length, word length and common bigrams from a writing sample."""
    sentences = split_sentences(sample)
    words = split_words(sample)

    sentence_lengths = [len(sentence.split()) for sentence in sentences]
    mean_sentence_length = (
        float(statistics.mean(sentence_lengths)) if sentence_lengths else 0.0
    )
    mean_word_length = (
        float(statistics.mean(len(word) for word in words)) if words else 0.0
    )

    return StyleProfile(
        avg_sentence_length=_round_half_up(mean_sentence_length),
        avg_word_length=_round_half_up(mean_word_length * 10) / 10,
        common_phrases=extract_common_phrases(sentences),
        sample_size=len(sentences),
        created_at=now or datetime.now(timezone.utc),
    )


def extract_common_phrases(sentences: List[str], limit: int = MAX_COMMON_PHRASES) -> List[str]:
    """Top adjacent word pairs by frequency; ties keep first-seen order."""
    counts: Counter[str] = Counter()
    for sentence in sentences:
        words = sentence.lower().split()
        for first, second in zip(words, words[1:]):
            counts[f"{first} {second}"] += 1
    # Counter preserves insertion order and sorted() is stable.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [phrase for phrase, _ in ranked[:limit]]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
