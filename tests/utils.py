from __future__ import annotations

from pathlib import Path

from privatepen.models import StatsDelta
from privatepen.storage import RecordStore


def make_sentences(count: int, words_per_sentence: int) -> str:
    """Build count sentences of distinct filler words, each ending in a period."""
    sentences = []
    for s_idx in range(1, count + 1):
        words = [f"s{s_idx}w{w_idx}" for w_idx in range(1, words_per_sentence + 1)]
        sentences.append(" ".join(words) + ".")
    return " ".join(sentences)


def write_sample(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def record_sessions(store_path: str, sessions: int) -> None:
    """Fold one-word sessions into a store; run in a child process by the storage tests."""
    store = RecordStore(store_path)
    for _ in range(sessions):
        store.update_stats(StatsDelta(word_count=1, sentence_count=1))
