from __future__ import annotations

import re
from typing import Dict, List

from .config import PipelineConfig
from .models import GrammarIssue

PASSIVE_VOICE_RE = re.compile(r"\b(was|were|been|being)\s+\w+ed\b", re.IGNORECASE)
TERMINAL_PUNCTUATION_RE = re.compile(r"[.!?]$")

MIN_PUNCTUATED_LENGTH = 10
REPETITION_MIN_WORD_LENGTH = 4
REPETITION_MAX_OCCURRENCES = 3

SUGGESTIONS = {
    "spacing": "Use single spaces between words",
    "punctuation": "Add a period, exclamation mark, or question mark",
    "capitalization": "Start the sentence with a capital letter",
    "style": "Consider using active voice for clarity",
    "repetition": "Consider using synonyms for variety",
}


def check_grammar(text: str, config: PipelineConfig | None = None) -> List[GrammarIssue]:
    """Run the mechanical checks in their fixed order and return every issue found."""
    config = config or PipelineConfig()
    issues: List[GrammarIssue] = []

    if "  " in text:
        issues.append(
            GrammarIssue(
                kind="spacing",
                message="Multiple consecutive spaces detected",
                suggestion=SUGGESTIONS["spacing"],
                position=text.index("  "),
            )
        )

    trimmed = text.strip()
    if len(trimmed) > MIN_PUNCTUATED_LENGTH and not TERMINAL_PUNCTUATION_RE.search(trimmed):
        issues.append(
            GrammarIssue(
                kind="punctuation",
                message="Missing punctuation at the end of sentence",
                suggestion=SUGGESTIONS["punctuation"],
                position=len(text) - 1,
            )
        )

    if text and not ("A" <= text[0] <= "Z"):
        issues.append(
            GrammarIssue(
                kind="capitalization",
                message="Sentence should start with a capital letter",
                suggestion=SUGGESTIONS["capitalization"],
                position=0,
            )
        )

    if config.grammar_extended_rules:
        issues.extend(_extended_issues(text))

    return issues


def _extended_issues(text: str) -> List[GrammarIssue]:
    issues: List[GrammarIssue] = []
    if PASSIVE_VOICE_RE.search(text):
        issues.append(
            GrammarIssue(
                kind="style",
                message="Passive voice detected",
                suggestion=SUGGESTIONS["style"],
            )
        )

    counts: Dict[str, int] = {}
    for word in text.lower().split():
        if len(word) > REPETITION_MIN_WORD_LENGTH:
            counts[word] = counts.get(word, 0) + 1
    for word, count in counts.items():
        if count > REPETITION_MAX_OCCURRENCES:
            issues.append(
                GrammarIssue(
                    kind="repetition",
                    message=f'Word "{word}" appears {count} times',
                    suggestion=SUGGESTIONS["repetition"],
                )
            )
    return issues
