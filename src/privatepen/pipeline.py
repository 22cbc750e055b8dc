from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Union

from .config import PipelineConfig
from .expansion import expand_or_condense
from .grammar import check_grammar
from .listformat import format_lists
from .models import (
    ExpansionResult,
    GrammarIssue,
    ListResult,
    RephraseResult,
    SimplificationResult,
    StatsDelta,
    SummaryResult,
    ToneAnalysis,
    TranslationResult,
)
from .rephrase import rephrase
from .simplify import simplify
from .summarize import summarize
from .tokenization import sentence_count, word_count
from .tone import analyze_tone_sentiment
from .translate import translate


class Operation(str, Enum):
    GRAMMAR = "grammar"
    TONE = "tone"
    SUMMARIZE = "summarize"
    REPHRASE = "rephrase"
    EXPAND = "expand"
    SIMPLIFY = "simplify"
    BULLETS = "bullets"
    TRANSLATE = "translate"

    @classmethod
    def parse(cls, value: Union[str, "Operation"]) -> "Operation":
        if isinstance(value, Operation):
            return value
        normalized = str(value).lower().strip()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown operation '{value}'.") from None


OperationResult = Union[
    List[GrammarIssue],
    ToneAnalysis,
    SummaryResult,
    RephraseResult,
    ExpansionResult,
    SimplificationResult,
    ListResult,
    TranslationResult,
]


@dataclass(slots=True)
class AnalysisOutcome:
    """Result of one operation, tagged with the operation that produced it."""

    operation: Operation
    result: OperationResult
    word_count: int
    sentence_count: int

    @property
    def tone(self) -> str | None:
        if isinstance(self.result, ToneAnalysis):
            return self.result.tone.primary
        return None

    def stats_delta(self) -> StatsDelta:
        return StatsDelta(
            word_count=self.word_count,
            sentence_count=self.sentence_count,
            tone=self.tone,
        )

    def result_dict(self) -> Any:
        if isinstance(self.result, list):
            return [asdict(issue) for issue in self.result]
        return asdict(self.result)

    def to_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation.value,
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "result": self.result_dict(),
        }


def _handlers(config: PipelineConfig) -> Dict[Operation, Callable[[str], OperationResult]]:
    return {
        Operation.GRAMMAR: lambda text: check_grammar(text, config),
        Operation.TONE: lambda text: analyze_tone_sentiment(text, config),
        Operation.SUMMARIZE: lambda text: summarize(text, config),
        Operation.REPHRASE: lambda text: rephrase(text, config),
        Operation.EXPAND: lambda text: expand_or_condense(text, config),
        Operation.SIMPLIFY: simplify,
        Operation.BULLETS: format_lists,
        Operation.TRANSLATE: translate,
    }


def run_operation(
    operation: Union[str, Operation], text: str, config: PipelineConfig | None = None
) -> AnalysisOutcome:
    """Run a single pipeline operation synchronously."""
    config = config or PipelineConfig()
    op = Operation.parse(operation)
    result = _handlers(config)[op](text)
    return AnalysisOutcome(
        operation=op,
        result=result,
        word_count=word_count(text),
        sentence_count=sentence_count(text),
    )


class AnalysisBackend(ABC):
    """Abstract engine that turns (operation, text) into a tagged result."""

    @abstractmethod
    def analyze(self, operation: Operation, text: str) -> AnalysisOutcome:
        """Return the outcome of running operation against text."""
        raise NotImplementedError


class RuleBasedBackend(AnalysisBackend):
    """Deterministic rule-based engine."""

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self._config = config or PipelineConfig()

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def analyze(self, operation: Operation, text: str) -> AnalysisOutcome:
        return run_operation(operation, text, self._config)
