"""
Content Resolution
==================
Canonical vs. resolved (translated) session content.

- ``get_canonical_content``: the authoring content. Search indexing,
  analytics, classification, extraction, summarization, version history,
  diffs and collaboration anchoring use this and nothing else.
- ``get_resolved_content``: content to display for a selected language.
  Only the viewer, PDF/DOCX/CSV exporters and share links use this.

Neither function raises or mutates the session document.
"""

from typing import Any, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel

from .language import get_text_direction
from .schemas import FreshnessStatus, ResolvedContentResult, SessionContentDoc, TranslationStatus


FALLBACK_LANGUAGE = "en"
AUTO_LANGUAGE = "auto"

SessionLike = Union[SessionContentDoc, Mapping[str, Any]]


def _as_mapping(value: Any) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    return value


def get_effective_original_language(session: Optional[SessionLike]) -> Optional[str]:
    """
    Language the canonical content was authored in.

    ``originalLanguage`` wins; otherwise ``content_metadata.output_language``,
    or ``detected_language`` when the output language is "auto".
    """
    doc = _as_mapping(session)
    if doc is None:
        return None

    original = doc.get("originalLanguage")
    if original is not None:
        return original

    metadata = _as_mapping(doc.get("content_metadata"))
    if metadata is None:
        return None
    if metadata.get("output_language") == AUTO_LANGUAGE:
        return metadata.get("detected_language")
    return metadata.get("output_language")


def get_canonical_content(session: Optional[SessionLike]) -> Any:
    """Return ``session.content`` verbatim, or None when there is none."""
    if session is None:
        return None
    if isinstance(session, SessionContentDoc):
        return session.content
    return session.get("content")


def get_resolved_content(
    session: Optional[SessionLike],
    selected_lang: Optional[str],
) -> Optional[ResolvedContentResult]:
    """
    Pick the content to render for ``selected_lang``.

    Args:
        session: Session document (mapping or SessionContentDoc), may be None
        selected_lang: Language code, "auto" or None (both mean original)

    Returns:
        ResolvedContentResult, or None when the session has no content

    Rules:
        - requested language is the original: canonical, freshness canonical
        - translation ready: translation, freshness ready
        - translation stale: translation anyway, freshness stale
        - in progress, failed or no translation: canonical, freshness missing
    """
    doc = _as_mapping(session)
    if doc is None:
        return None

    canonical = doc.get("content")
    if canonical is None:
        return None

    original_lang = get_effective_original_language(doc)
    if selected_lang and selected_lang != AUTO_LANGUAGE:
        lang = selected_lang
    else:
        lang = original_lang
    direction = get_text_direction(lang)

    if not lang or lang == original_lang:
        return ResolvedContentResult(
            content_to_use=canonical,
            direction=direction,
            language_used=original_lang or lang or FALLBACK_LANGUAGE,
            freshness_status=FreshnessStatus.CANONICAL,
        )

    fallback_lang = original_lang if original_lang is not None else FALLBACK_LANGUAGE
    translations = doc.get("translations") or {}
    entry = _as_mapping(translations.get(lang))

    if entry is None:
        return ResolvedContentResult(
            content_to_use=canonical,
            direction=direction,
            language_used=fallback_lang,
            freshness_status=FreshnessStatus.MISSING,
        )

    status = entry.get("status")
    if status == TranslationStatus.READY:
        return ResolvedContentResult(
            content_to_use=entry.get("translatedContent"),
            direction=direction,
            language_used=lang,
            freshness_status=FreshnessStatus.READY,
        )

    if status == TranslationStatus.STALE:
        return ResolvedContentResult(
            content_to_use=entry.get("translatedContent"),
            direction=direction,
            language_used=lang,
            freshness_status=FreshnessStatus.STALE,
        )

    logger.debug(f"Translation '{lang}' is {status}; serving canonical content")
    return ResolvedContentResult(
        content_to_use=canonical,
        direction=direction,
        language_used=fallback_lang,
        freshness_status=FreshnessStatus.MISSING,
    )


def is_translation_outdated(session: Optional[SessionLike], language: str) -> bool:
    """
    True when the cached translation for ``language`` was made from an older
    revision (or a different fingerprint) of the canonical content.

    Used by cache writers to decide when to mark an entry stale. Returns
    False when there is no entry.
    """
    doc = _as_mapping(session)
    if doc is None:
        return False

    entry = _as_mapping((doc.get("translations") or {}).get(language))
    if entry is None:
        return False

    revision = doc.get("contentRevision")
    source_revision = entry.get("sourceRevision")
    if revision is not None and source_revision is not None and source_revision < revision:
        return True

    fingerprint = doc.get("contentFingerprint")
    source_fingerprint = entry.get("sourceFingerprint")
    if fingerprint is not None and source_fingerprint is not None:
        return fingerprint != source_fingerprint
    return False
