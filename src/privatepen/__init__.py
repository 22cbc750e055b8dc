"""
privatepen package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import PipelineConfig, config_from_dict, config_from_yaml, load_config, surface_preset
from .pipeline import AnalysisOutcome, Operation, RuleBasedBackend, run_operation
from .session import AnalysisSession, analyze
from .stats import fold_stats
from .storage import RecordStore
from .style_profile import analyze_writing_style

__all__ = [
    "PipelineConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "surface_preset",
    "AnalysisOutcome",
    "Operation",
    "RuleBasedBackend",
    "run_operation",
    "AnalysisSession",
    "analyze",
    "fold_stats",
    "RecordStore",
    "analyze_writing_style",
]

__version__ = "0.1.0"
