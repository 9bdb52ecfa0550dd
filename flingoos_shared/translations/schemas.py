"""
Session Translation Data Contracts
==================================
Translation cache entries and the session document fields the content
resolver reads.

Translations are a derived cache keyed by language code. Canonical content
lives in ``session.content`` and is only ever changed by authoring.
"""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Optional


class TranslationStatus(str, Enum):
    """Lifecycle state of a cached translation."""
    READY = "ready"
    STALE = "stale"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"


class FreshnessStatus(str, Enum):
    """How the resolved content relates to the canonical content."""
    CANONICAL = "canonical"
    READY = "ready"
    STALE = "stale"
    MISSING = "missing"


TextDirection = Literal["rtl", "ltr", "auto"]


class TranslationEntrySchema(BaseModel):
    """Cached translation of a session's canonical content for one language."""
    translated_content: Dict[str, Any] = Field(
        ..., alias="translatedContent", description="Same structure as the canonical content"
    )
    translated_at: str = Field(..., alias="translatedAt")
    source_revision: int = Field(..., alias="sourceRevision", description="contentRevision translated from")
    source_fingerprint: str = Field(..., alias="sourceFingerprint")
    status: TranslationStatus
    model: Optional[str] = None
    error: Optional[str] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "translatedContent": {"title": "שלום"},
                "translatedAt": "2024-01-15T10:30:00.000Z",
                "sourceRevision": 3,
                "sourceFingerprint": "sha256:4f2a",
                "status": "ready",
                "model": "gpt-4o-mini"
            }
        }


# language code -> entry
SessionTranslations = Dict[str, TranslationEntrySchema]


class ContentMetadataSchema(BaseModel):
    output_language: Optional[str] = Field(None, description='Language code or "auto"')
    detected_language: Optional[str] = Field(None, description='Used when output_language is "auto"')

    class Config:
        extra = "allow"


class SessionContentDoc(BaseModel):
    """
    Session document fields used for content resolution.

    Every field is optional; other session fields pass through untouched.
    """
    content: Any = None
    content_metadata: Optional[ContentMetadataSchema] = None
    original_language: Optional[str] = Field(None, alias="originalLanguage")
    content_revision: Optional[int] = Field(None, alias="contentRevision")
    content_fingerprint: Optional[str] = Field(None, alias="contentFingerprint")
    translations: Optional[SessionTranslations] = None
    updated_at: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = "allow"


class ResolvedContentResult(BaseModel):
    """Content to render for a requested language, plus how it was chosen."""
    content_to_use: Any = Field(None, alias="contentToUse")
    direction: TextDirection = Field(..., alias="dir")
    language_used: str = Field(..., alias="languageUsed")
    freshness_status: FreshnessStatus = Field(..., alias="freshnessStatus")

    class Config:
        populate_by_name = True
