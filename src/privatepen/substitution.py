from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple


@dataclass(slots=True)
class SubstitutionRule:
    """A case-insensitive whole-word (or whole-phrase) literal replacement."""

    pattern: str
    replacement: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._compiled = re.compile(rf"\b{re.escape(self.pattern)}\b", re.IGNORECASE)

    def apply(self, text: str) -> str:
        # Callable replacement keeps the literal text free of backreference parsing.
        return self._compiled.sub(lambda _match: self.replacement, text)


class SubstitutionTable:
    """Ordered list of rules applied one after another in table order."""

    def __init__(self, rules: Iterable[Tuple[str, str]]) -> None:
        self._rules: List[SubstitutionRule] = [
            SubstitutionRule(pattern, replacement) for pattern, replacement in rules
        ]

    @property
    def rules(self) -> Sequence[SubstitutionRule]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def apply(self, text: str) -> str:
        for rule in self._rules:
            text = rule.apply(text)
        return text

    def apply_counting(self, text: str) -> Tuple[str, int]:
        """Apply every rule and count how many of them changed the text."""
        changed = 0
        for rule in self._rules:
            updated = rule.apply(text)
            if updated != text:
                changed += 1
                text = updated
        return text, changed
