from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime into epoch milliseconds (the persisted timestamp form)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def from_epoch_millis(value: int | float) -> datetime:
    return datetime.fromtimestamp(float(value) / 1000.0, tz=timezone.utc)


@dataclass(slots=True)
class GrammarIssue:
    """A single mechanical problem found by the grammar checker."""

    kind: str
    message: str
    suggestion: str | None = None
    position: int | None = None


@dataclass(slots=True)
class ToneResult:
    """Coarse register classification."""

    primary: str
    confidence: float


@dataclass(slots=True)
class SentimentResult:
    """Keyword polarity classification."""

    label: str
    score: float
    positive_count: int = 0
    negative_count: int = 0


@dataclass(slots=True)
class ToneAnalysis:
    tone: ToneResult
    sentiment: SentimentResult
    suggestions: List[str] = field(default_factory=list)


@dataclass(slots=True)
class SummaryResult:
    """Extractive summaries built only from source sentences."""

    brief: str
    detailed: str
    key_points: List[str] = field(default_factory=list)


@dataclass(slots=True)
class RephraseResult:
    formal: str
    simple: str
    creative: str


@dataclass(slots=True)
class ExpansionResult:
    mode: str
    result: str


@dataclass(slots=True)
class SimplificationResult:
    simplified: str
    change_count: int


@dataclass(slots=True)
class ListResult:
    """Four parallel renderings with one line per sentence."""

    bullets: str
    numbered: str
    checkboxes: str
    arrows: str


@dataclass(slots=True)
class TranslationResult:
    translations: Dict[str, str]


@dataclass(slots=True)
class StyleProfile:
    """Aggregate statistics describing a writing sample."""

    avg_sentence_length: int
    avg_word_length: float
    common_phrases: List[str]
    sample_size: int
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "avgSentenceLength": self.avg_sentence_length,
            "avgWordLength": self.avg_word_length,
            "commonPhrases": list(self.common_phrases),
            "sampleSize": self.sample_size,
            "createdAt": to_epoch_millis(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StyleProfile":
        return cls(
            avg_sentence_length=int(data.get("avgSentenceLength", 0)),
            avg_word_length=float(data.get("avgWordLength", 0.0)),
            common_phrases=[str(p) for p in data.get("commonPhrases", [])],
            sample_size=int(data.get("sampleSize", 0)),
            created_at=from_epoch_millis(data.get("createdAt", 0)),
        )


def _default_tone_distribution() -> Dict[str, int]:
    return {"formal": 0, "casual": 0, "neutral": 0}


@dataclass(slots=True)
class WritingStats:
    """Running usage statistics accumulated across sessions."""

    total_words: int = 0
    sessions_count: int = 0
    avg_sentence_length: float = 0.0
    tone_distribution: Dict[str, int] = field(default_factory=_default_tone_distribution)
    total_sentences: int = 0
    sentence_words: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalWords": self.total_words,
            "sessionsCount": self.sessions_count,
            "avgSentenceLength": self.avg_sentence_length,
            "toneDistribution": dict(self.tone_distribution),
            "totalSentences": self.total_sentences,
            "sentenceWords": self.sentence_words,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "WritingStats":
        if not data:
            return cls()
        distribution = _default_tone_distribution()
        distribution.update(
            {str(k): int(v) for k, v in (data.get("toneDistribution") or {}).items()}
        )
        return cls(
            total_words=int(data.get("totalWords", 0)),
            sessions_count=int(data.get("sessionsCount", 0)),
            avg_sentence_length=float(data.get("avgSentenceLength", 0.0)),
            tone_distribution=distribution,
            total_sentences=int(data.get("totalSentences", 0)),
            sentence_words=int(data.get("sentenceWords", 0)),
        )


@dataclass(slots=True)
class StatsDelta:
    """Contribution of one session to the running stats."""

    word_count: int
    sentence_count: int = 0
    tone: str | None = None


@dataclass(slots=True)
class Snippet:
    title: str
    content: str
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "content": self.content, "createdAt": self.created_at}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Snippet":
        return cls(
            title=str(data.get("title", "")),
            content=str(data.get("content", "")),
            created_at=int(data.get("createdAt", 0)),
        )
