"""
/**
 * @file pollyglot/services/orchestrator.py
 * @description Primary/fallback backend selection with a single classified error on exhaustion.
 */
"""

from __future__ import annotations

import logging

from pollyglot.models.translate_request_model import TranslationResult
from pollyglot.models.translation_errors import TranslationError, TranslationFailedError, TransportError
from pollyglot.services.adapters.base import TranslationAdapter


logger = logging.getLogger(__name__)


def _attempt(adapter: TranslationAdapter, text: str, target_language: str) -> str:
    try:
        return adapter.translate(text, target_language)
    except TranslationError:
        raise
    except Exception as e:
        # Anything unclassified from an adapter still has to come out as a TranslationError.
        logger.exception("[%s] unexpected adapter failure", adapter.name)
        raise TransportError(str(e) or type(e).__name__) from e


class FallbackOrchestrator:
    def __init__(self, primary: TranslationAdapter, fallback: TranslationAdapter):
        self.primary = primary
        self.fallback = fallback

    def translate_with_fallback(self, text: str, target_language: str) -> TranslationResult:
        """
        Try the primary adapter once; on any failure try the fallback once.

        If both fail, the raised TranslationFailedError carries the primary's message and
        status. The fallback's failure is only logged.
        """
        try:
            translated = _attempt(self.primary, text, target_language)
            return TranslationResult(translated_text=translated, backend=self.primary.name)
        except TranslationError as primary_error:
            logger.warning("[%s] translation failed: %r", self.primary.name, primary_error)
            try:
                translated = _attempt(self.fallback, text, target_language)
            except TranslationError as fallback_error:
                logger.warning("[%s] fallback translation failed: %r", self.fallback.name, fallback_error)
                raise TranslationFailedError(primary_error, fallback_error) from primary_error
            logger.info("[%s] fallback translation succeeded", self.fallback.name)
            return TranslationResult(translated_text=translated, backend=self.fallback.name)
