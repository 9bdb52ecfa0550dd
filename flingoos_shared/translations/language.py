"""
Language helpers for rendering translated content.
"""

from typing import Optional

from .schemas import TextDirection


# Scripts written right-to-left
RTL_LANGUAGES = frozenset({
    "ar",   # Arabic
    "he",   # Hebrew
    "iw",   # Hebrew (legacy code)
    "fa",   # Persian
    "ur",   # Urdu
    "yi",   # Yiddish
    "ps",   # Pashto
    "dv",   # Divehi
    "ug",   # Uyghur
    "sd",   # Sindhi
    "ckb",  # Central Kurdish
})


def get_text_direction(language: Optional[str]) -> TextDirection:
    """
    Text direction hint for a language code.

    Absent or "auto" defers to the renderer. Region subtags are ignored, so
    "he-IL" is treated as "he".
    """
    if not language or language == "auto":
        return "auto"
    base = language.replace("_", "-").split("-", 1)[0].lower()
    return "rtl" if base in RTL_LANGUAGES else "ltr"
