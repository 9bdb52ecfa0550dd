"""
Session translations: translation cache contracts and content resolution.
"""

from .schemas import (
    TranslationStatus,
    FreshnessStatus,
    TextDirection,
    TranslationEntrySchema,
    SessionTranslations,
    ContentMetadataSchema,
    SessionContentDoc,
    ResolvedContentResult,
)
from .language import RTL_LANGUAGES, get_text_direction
from .resolver import (
    FALLBACK_LANGUAGE,
    get_effective_original_language,
    get_canonical_content,
    get_resolved_content,
    is_translation_outdated,
)

__all__ = [
    "TranslationStatus",
    "FreshnessStatus",
    "TextDirection",
    "TranslationEntrySchema",
    "SessionTranslations",
    "ContentMetadataSchema",
    "SessionContentDoc",
    "ResolvedContentResult",
    "RTL_LANGUAGES",
    "get_text_direction",
    "FALLBACK_LANGUAGE",
    "get_effective_original_language",
    "get_canonical_content",
    "get_resolved_content",
    "is_translation_outdated",
]
