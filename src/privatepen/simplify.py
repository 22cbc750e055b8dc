from __future__ import annotations

from .models import SimplificationResult
from .substitution import SubstitutionTable

COMPLEX_TO_SIMPLE = SubstitutionTable(
    [
        ("utilize", "use"),
        ("implement", "do"),
        ("facilitate", "help"),
        ("demonstrate", "show"),
        ("approximately", "about"),
    ]
)


def simplify(text: str) -> SimplificationResult:
    """Swap complex vocabulary for plain words, counting table entries that fired."""
    simplified, changes = COMPLEX_TO_SIMPLE.apply_counting(text)
    return SimplificationResult(simplified=simplified, change_count=changes)


def describe_changes(result: SimplificationResult) -> str:
    if result.change_count > 0:
        return f"Simplified {result.change_count} complex terms!"
    return "Text is already simple!"
