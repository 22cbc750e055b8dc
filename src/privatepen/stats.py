from __future__ import annotations

from .models import StatsDelta, WritingStats


def empty_stats() -> WritingStats:
    """The value written by an explicit stats reset."""
    return WritingStats()


def fold_stats(previous: WritingStats, delta: StatsDelta) -> WritingStats:
    """Fold one session's contribution into the running statistics."""
    distribution = dict(previous.tone_distribution)
    if delta.tone:
        distribution[delta.tone] = distribution.get(delta.tone, 0) + 1

    word_count = max(0, delta.word_count)
    sentence_count = max(0, delta.sentence_count)
    total_sentences = previous.total_sentences
    sentence_words = previous.sentence_words
    avg_sentence_length = previous.avg_sentence_length
    # Only words from sessions that reported sentences feed the average.
    if sentence_count > 0:
        total_sentences += sentence_count
        sentence_words += word_count
        avg_sentence_length = round(sentence_words / total_sentences, 2)

    return WritingStats(
        total_words=previous.total_words + word_count,
        sessions_count=previous.sessions_count + 1,
        avg_sentence_length=avg_sentence_length,
        tone_distribution=distribution,
        total_sentences=total_sentences,
        sentence_words=sentence_words,
    )
