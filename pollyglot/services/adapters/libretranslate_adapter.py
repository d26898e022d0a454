"""
/**
 * @file pollyglot/services/adapters/libretranslate_adapter.py
 * @description REST dictionary-service adapter (LibreTranslate), used as the fallback backend.
 */
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from pollyglot.config.settings import DEFAULT_ENDPOINTS, DEFAULT_LANGUAGE_CODES, Settings
from pollyglot.services.adapters.base import DEFAULT_TIMEOUT, TranslationAdapter
from pollyglot.utils import first_text


logger = logging.getLogger(__name__)


class LibreTranslateAdapter(TranslationAdapter):
    name = "libretranslate"

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINTS["libretranslate"],
        language_codes: Optional[Dict[str, str]] = None,
        default_code: str = "fr",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(endpoint, timeout=timeout)
        self.language_codes = dict(language_codes or DEFAULT_LANGUAGE_CODES)
        self.default_code = default_code

    @classmethod
    def from_settings(cls, settings: Settings) -> "LibreTranslateAdapter":
        return cls(
            settings.endpoints["libretranslate"],
            language_codes=settings.fallback_language_codes,
            default_code=settings.fallback_default_code,
            timeout=settings.request_timeout,
        )

    def language_code(self, target_language: str) -> str:
        code = self.language_codes.get(target_language)
        if code is None:
            logger.warning("No language code for %r, using default %r", target_language, self.default_code)
            return self.default_code
        return code

    def translate(self, text: str, target_language: str) -> str:
        payload = {
            "q": text,
            "source": "auto",
            "target": self.language_code(target_language),
            "format": "text",
        }
        response = self._post(self.endpoint, payload, headers={"Content-Type": "application/json"})
        data = self._read_json(response)
        if not response.ok:
            self._raise_upstream(response, first_text(data, "error") or "Fallback translation failed")
        return self._require_text(first_text(data, "translatedText"))
