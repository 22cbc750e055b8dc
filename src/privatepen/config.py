from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping

import yaml

TOOLBAR_EXPANSION_TEXT = (
    " Furthermore, this concept provides valuable insights that enhance our understanding."
)
SIDEPANEL_EXPANSION_TEXT = (
    " Furthermore, this concept is particularly significant as it demonstrates "
    "fundamental principles that are essential to understanding the broader context. "
    "By examining these elements more closely, we can gain valuable insights that "
    "enhance our comprehension of the subject matter."
)

TOOLBAR_POSITIVE_WORDS = ["good", "great", "excellent", "amazing", "wonderful", "happy"]
TOOLBAR_NEGATIVE_WORDS = ["bad", "terrible", "awful", "poor", "disappointing", "sad"]
SIDEPANEL_POSITIVE_WORDS = [
    "good",
    "great",
    "excellent",
    "wonderful",
    "amazing",
    "fantastic",
    "love",
    "best",
    "happy",
    "perfect",
]
SIDEPANEL_NEGATIVE_WORDS = [
    "bad",
    "terrible",
    "awful",
    "horrible",
    "worst",
    "hate",
    "poor",
    "disappointing",
    "sad",
    "unfortunate",
]

# Simulated backend latency per operation, in milliseconds.
DEFAULT_LATENCY_MS: Dict[str, int] = {
    "grammar": 500,
    "tone": 400,
    "summarize": 600,
    "rephrase": 500,
    "expand": 400,
    "translate": 700,
    "simplify": 400,
    "bullets": 300,
}

SURFACES = ("toolbar", "popup", "sidepanel")
BRIEF_POLICIES = ("first", "first_last")
DETAIL_POLICIES = ("midpoint", "first_third")
CONDENSE_MARKERS = ("numbered", "bullet")
SENTIMENT_SCORING = ("fixed", "scaled")


@dataclass(slots=True)
class ToneSettings:
    """Thresholds and word lists for tone and sentiment classification."""

    formal_min_word_length: float = 6.0
    formal_forbids_exclamation: bool = True
    formal_min_sentence_length: float | None = None
    casual_max_word_length: float = 4.0
    casual_min_exclamations: int = 2
    sentiment_scoring: str = "fixed"
    positive_words: List[str] = field(default_factory=lambda: list(TOOLBAR_POSITIVE_WORDS))
    negative_words: List[str] = field(default_factory=lambda: list(TOOLBAR_NEGATIVE_WORDS))


@dataclass(slots=True)
class PipelineConfig:
    """Configuration options for the text pipeline and its surfaces."""

    surface: str = "toolbar"
    grammar_extended_rules: bool = False
    summary_brief_policy: str = "first"
    summary_detail_policy: str = "midpoint"
    key_point_limit: int = 3
    rephrase_simple_max_words: int | None = None
    expand_word_threshold: int = 50
    condense_sentence_count: int = 3
    condense_marker: str = "numbered"
    expansion_text: str = TOOLBAR_EXPANSION_TEXT
    simulate_latency: bool = False
    latency_ms: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_LATENCY_MS))
    store_path: str | None = None
    tone: ToneSettings = field(default_factory=ToneSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def latency_seconds(self, operation: str) -> float:
        if not self.simulate_latency:
            return 0.0
        return max(0, self.latency_ms.get(operation, 0)) / 1000.0


def surface_preset(surface: str) -> PipelineConfig:
    """Return the configuration matching one of the extension surfaces."""
    normalized = surface.lower().strip()
    if normalized in {"toolbar", "popup"}:
        return PipelineConfig(surface=normalized)
    if normalized == "sidepanel":
        return PipelineConfig(
            surface="sidepanel",
            grammar_extended_rules=True,
            summary_brief_policy="first_last",
            summary_detail_policy="first_third",
            rephrase_simple_max_words=15,
            condense_sentence_count=5,
            condense_marker="bullet",
            expansion_text=SIDEPANEL_EXPANSION_TEXT,
            tone=ToneSettings(
                formal_forbids_exclamation=False,
                formal_min_sentence_length=20.0,
                casual_max_word_length=4.5,
                casual_min_exclamations=1,
                sentiment_scoring="scaled",
                positive_words=list(SIDEPANEL_POSITIVE_WORDS),
                negative_words=list(SIDEPANEL_NEGATIVE_WORDS),
            ),
        )
    raise ValueError(f"Unknown surface '{surface}'. Expected one of {', '.join(SURFACES)}.")


def _build_kwargs(data: Mapping[str, Any], base: PipelineConfig) -> dict[str, Any]:
    allowed = {f.name for f in fields(PipelineConfig)} - {"surface"}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "tone" in data:
        tone_value = data["tone"]
        if isinstance(tone_value, ToneSettings):
            kwargs["tone"] = tone_value
        elif isinstance(tone_value, Mapping):
            kwargs["tone"] = _build_tone_settings(tone_value, base.tone)
    if "latency_ms" in kwargs and isinstance(kwargs["latency_ms"], Mapping):
        merged = dict(base.latency_ms)
        merged.update({str(k): int(v) for k, v in kwargs["latency_ms"].items()})
        kwargs["latency_ms"] = merged
    return kwargs


def _build_tone_settings(data: Mapping[str, Any], base: ToneSettings) -> ToneSettings:
    tone_allowed = {f.name for f in fields(ToneSettings)}
    filtered = {key: data[key] for key in data if key in tone_allowed}
    return replace(base, **filtered)


def _check_choice(name: str, value: Any, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        raise ValueError(f"Unknown {name} '{value}'. Expected one of {', '.join(allowed)}.")


def validate_config(config: PipelineConfig) -> PipelineConfig:
    """Reject policy strings the pipeline has no behavior for."""
    _check_choice("summary_brief_policy", config.summary_brief_policy, BRIEF_POLICIES)
    _check_choice("summary_detail_policy", config.summary_detail_policy, DETAIL_POLICIES)
    _check_choice("condense_marker", config.condense_marker, CONDENSE_MARKERS)
    _check_choice("tone.sentiment_scoring", config.tone.sentiment_scoring, SENTIMENT_SCORING)
    return config


def config_from_dict(
    data: Mapping[str, Any] | None, surface: str | None = None
) -> PipelineConfig:
    """Build a PipelineConfig from a dictionary, starting from a surface preset."""
    data = data or {}
    chosen = surface or data.get("surface") or "toolbar"
    base = surface_preset(str(chosen))
    return validate_config(replace(base, **_build_kwargs(data, base)))


def config_from_yaml(path: str | Path, surface: str | None = None) -> PipelineConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed, surface=surface)


def load_config(path: str | Path | None = None, surface: str | None = None) -> PipelineConfig:
    """Load configuration from YAML when provided, otherwise return the preset."""
    if path is None:
        return surface_preset(surface or "toolbar")
    return config_from_yaml(path, surface=surface)
