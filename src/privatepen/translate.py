from __future__ import annotations

from .models import TranslationResult

# Fixed placeholders until a real translation backend exists.
PLACEHOLDER_TRANSLATIONS = {
    "spanish": "Este es un ejemplo de traducción al español.",
    "french": "Ceci est un exemple de traduction en français.",
    "german": "Dies ist ein Übersetzungsbeispiel ins Deutsche.",
    "hindi": "यह हिंदी अनुवाद का एक उदाहरण है।",
}


def translate(text: str) -> TranslationResult:
    """Return the placeholder translation for every supported language."""
    return TranslationResult(translations=dict(PLACEHOLDER_TRANSLATIONS))
