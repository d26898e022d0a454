"""
/**
 * @file pollyglot/services/translator_session.py
 * @description Form state and submit handling for one client session.
 */
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pollyglot.config import Settings
from pollyglot.config.settings import DEFAULT_LANGUAGES
from pollyglot.models.translate_request_model import TranslationResult
from pollyglot.models.translation_errors import RateLimitedError, TranslationError, ValidationError
from pollyglot.services.adapters import LibreTranslateAdapter, ProxyAdapter
from pollyglot.services.error_messages import render_error
from pollyglot.services.orchestrator import FallbackOrchestrator
from pollyglot.services.rate_limiter import RateLimiter
from pollyglot.utils import is_blank


logger = logging.getLogger(__name__)


class TranslatorSession:
    """
    State behind the translate form: input text, selected language, the rendered result
    or error, and whether a request is in flight.

    Each session owns its RateLimiter, so two sessions never share a rate-limit window.
    While ``is_loading`` is set the submit action is disabled and ``handle_translate``
    does nothing.
    """

    def __init__(
        self,
        orchestrator: FallbackOrchestrator,
        languages: Optional[Iterable[str]] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self.orchestrator = orchestrator
        self.languages = list(languages or DEFAULT_LANGUAGES)
        self.rate_limiter = rate_limiter or RateLimiter()

        self.input_text = ""
        self.selected_language = self.languages[0]
        self.translated_text = ""
        self.error = ""
        self.is_loading = False
        self.last_error: Optional[TranslationError] = None
        self.last_wait_ms = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranslatorSession":
        orchestrator = FallbackOrchestrator(
            ProxyAdapter.from_settings(settings),
            LibreTranslateAdapter.from_settings(settings),
        )
        return cls(
            orchestrator,
            languages=settings.languages,
            rate_limiter=RateLimiter(settings.rate_limit_interval_ms),
        )

    @property
    def can_submit(self) -> bool:
        return not self.is_loading

    def _fail(self, error: TranslationError) -> None:
        self.last_error = error
        self.error = render_error(error)

    def submit(self, text: str, language: Optional[str] = None, now_ms: Optional[int] = None) -> Optional[TranslationResult]:
        self.input_text = text
        if language is not None:
            self.selected_language = language
        return self.handle_translate(now_ms=now_ms)

    def handle_translate(self, now_ms: Optional[int] = None) -> Optional[TranslationResult]:
        if self.is_loading:
            return None

        if is_blank(self.input_text):
            self._fail(ValidationError("Please enter text to translate"))
            return None
        if self.selected_language not in self.languages:
            self._fail(ValidationError(f"Please select a supported language ({', '.join(self.languages)})"))
            return None

        decision = self.rate_limiter.check_and_record(now_ms)
        if not decision.allowed:
            self.last_wait_ms = decision.wait_ms
            self._fail(RateLimitedError(decision.wait_ms))
            return None

        # Each attempt starts from a clean slate.
        self.is_loading = True
        self.error = ""
        self.translated_text = ""
        self.last_error = None
        try:
            result = self.orchestrator.translate_with_fallback(self.input_text, self.selected_language)
        except TranslationError as e:
            self._fail(e)
            return None
        finally:
            self.is_loading = False

        self.translated_text = result.translated_text
        logger.info("Translated via %s", result.backend)
        return result
