from __future__ import annotations

import string
from typing import List

from .config import PipelineConfig, ToneSettings
from .models import SentimentResult, ToneAnalysis, ToneResult
from .tokenization import avg_sentence_length, avg_word_length, count_exclamations

FORMAL_CONFIDENCE = 0.85
CASUAL_CONFIDENCE = 0.80
NEUTRAL_CONFIDENCE = 0.75

FIXED_SENTIMENT_SCORES = {"positive": 0.7, "negative": 0.3, "neutral": 0.5}

TONE_SUGGESTIONS = {
    "formal": [
        "Consider adding personal touches for better engagement",
        "Your writing is professional and clear",
    ],
    "casual": [
        "Great for informal communication",
        "For professional contexts, consider a more formal tone",
    ],
    "neutral": [],
}
SENTIMENT_SUGGESTIONS = {
    "negative": ["Consider balancing negative points with positive aspects"],
    "positive": ["Your positive tone creates an engaging message"],
    "neutral": [],
}


def analyze_tone(text: str, config: PipelineConfig | None = None) -> ToneResult:
    """Classify the register of text from word length and punctuation statistics."""
    settings = (config or PipelineConfig()).tone
    word_length = avg_word_length(text)
    exclamations = count_exclamations(text)

    if _is_formal(text, word_length, exclamations, settings):
        return ToneResult(primary="formal", confidence=FORMAL_CONFIDENCE)
    if (
        exclamations >= settings.casual_min_exclamations
        or word_length < settings.casual_max_word_length
    ):
        return ToneResult(primary="casual", confidence=CASUAL_CONFIDENCE)
    return ToneResult(primary="neutral", confidence=NEUTRAL_CONFIDENCE)


def _is_formal(
    text: str, word_length: float, exclamations: int, settings: ToneSettings
) -> bool:
    if word_length <= settings.formal_min_word_length:
        return False
    if settings.formal_forbids_exclamation and exclamations > 0:
        return False
    if settings.formal_min_sentence_length is not None:
        return avg_sentence_length(text) > settings.formal_min_sentence_length
    return True


def analyze_sentiment(text: str, config: PipelineConfig | None = None) -> SentimentResult:
    """Count positive and negative keywords and let the strictly larger side win."""
    settings = (config or PipelineConfig()).tone
    positive = {word.lower() for word in settings.positive_words}
    negative = {word.lower() for word in settings.negative_words}

    positive_count = 0
    negative_count = 0
    for token in text.lower().split():
        word = token.strip(string.punctuation)
        if word in positive:
            positive_count += 1
        elif word in negative:
            negative_count += 1

    if positive_count > negative_count:
        label = "positive"
    elif negative_count > positive_count:
        label = "negative"
    else:
        label = "neutral"

    return SentimentResult(
        label=label,
        score=_sentiment_score(label, positive_count, negative_count, settings),
        positive_count=positive_count,
        negative_count=negative_count,
    )


def _sentiment_score(
    label: str, positive_count: int, negative_count: int, settings: ToneSettings
) -> float:
    if settings.sentiment_scoring == "scaled":
        if label == "positive":
            return round(min(0.9, 0.5 + 0.1 * positive_count), 2)
        if label == "negative":
            return round(max(0.1, 0.5 - 0.1 * negative_count), 2)
        return 0.5
    return FIXED_SENTIMENT_SCORES[label]


def tone_suggestions(tone: str, sentiment: str) -> List[str]:
    """Static advice keyed by tone and then sentiment."""
    return list(TONE_SUGGESTIONS.get(tone, [])) + list(SENTIMENT_SUGGESTIONS.get(sentiment, []))


def analyze_tone_sentiment(text: str, config: PipelineConfig | None = None) -> ToneAnalysis:
    tone = analyze_tone(text, config)
    sentiment = analyze_sentiment(text, config)
    return ToneAnalysis(
        tone=tone,
        sentiment=sentiment,
        suggestions=tone_suggestions(tone.primary, sentiment.label),
    )
