from pathlib import Path

import pytest

from privatepen.config import (
    SIDEPANEL_EXPANSION_TEXT,
    PipelineConfig,
    config_from_dict,
    load_config,
    surface_preset,
)


def test_default_config_is_toolbar_preset():
    """Without a file the toolbar preset is used with latency off."""
    cfg = load_config()
    assert cfg.surface == "toolbar"
    assert cfg.summary_detail_policy == "midpoint"
    assert cfg.tone.casual_max_word_length == 4.0
    assert cfg.latency_seconds("grammar") == 0.0


def test_sidepanel_preset_captures_divergences():
    """The side-panel preset switches every divergent setting."""
    cfg = surface_preset("sidepanel")
    assert cfg.grammar_extended_rules is True
    assert cfg.condense_sentence_count == 5
    assert cfg.rephrase_simple_max_words == 15
    assert cfg.expansion_text == SIDEPANEL_EXPANSION_TEXT
    assert cfg.tone.formal_min_sentence_length == 20.0


def test_yaml_overrides_are_layered_on_preset(tmp_path: Path):
    """YAML keys override the chosen preset and merge nested mappings."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "surface: sidepanel\n"
        "condense_sentence_count: 4\n"
        "latency_ms:\n  grammar: 10\n"
        "tone:\n  casual_max_word_length: 5\n",
        encoding="utf-8",
    )
    cfg = load_config(config_path)
    assert cfg.surface == "sidepanel"
    assert cfg.condense_sentence_count == 4
    assert cfg.tone.casual_max_word_length == 5
    assert cfg.tone.sentiment_scoring == "scaled"
    assert cfg.latency_ms["grammar"] == 10
    assert cfg.latency_ms["bullets"] == 300


def test_explicit_surface_wins_over_config_key():
    """A surface passed by the caller beats the one in the mapping."""
    cfg = config_from_dict({"surface": "sidepanel"}, surface="toolbar")
    assert cfg.surface == "toolbar"


def test_unknown_surface_and_bad_yaml(tmp_path: Path):
    """Unknown surfaces and non-mapping YAML are rejected."""
    with pytest.raises(ValueError):
        surface_preset("desktop")
    bad = tmp_path / "bad.yaml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(bad)


def test_unknown_policy_strings_are_rejected():
    """Policy names with no matching behavior fail at load time."""
    for overrides in [
        {"summary_brief_policy": "last"},
        {"summary_detail_policy": "everything"},
        {"condense_marker": "arrow"},
        {"tone": {"sentiment_scoring": "fuzzy"}},
    ]:
        with pytest.raises(ValueError):
            config_from_dict(overrides)


def test_valid_policy_overrides_are_accepted():
    """Any supported policy can be picked regardless of surface."""
    cfg = config_from_dict(
        {
            "summary_brief_policy": "first_last",
            "condense_marker": "bullet",
            "tone": {"sentiment_scoring": "scaled"},
        }
    )
    assert cfg.surface == "toolbar"
    assert cfg.summary_brief_policy == "first_last"
    assert cfg.condense_marker == "bullet"
    assert cfg.tone.sentiment_scoring == "scaled"


def test_bad_policy_in_yaml_file(tmp_path: Path):
    """Validation also applies to configuration files."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("tone:\n  sentiment_scoring: loud\n", encoding="utf-8")
    with pytest.raises(ValueError, match="sentiment_scoring"):
        load_config(config_path)


def test_latency_seconds_when_enabled():
    """Enabled latency converts milliseconds and defaults unknown operations to zero."""
    cfg = PipelineConfig(simulate_latency=True)
    assert cfg.latency_seconds("grammar") == 0.5
    assert cfg.latency_seconds("unknown") == 0.0
