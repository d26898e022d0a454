"""
/**
 * @file pollyglot/services/adapters/gemini_adapter.py
 * @description Generative-language API adapter (generateContent). Server-side only: it holds the key.
 */
"""

from __future__ import annotations

from pollyglot.config.settings import DEFAULT_ENDPOINTS, DEFAULT_MODELS, Settings
from pollyglot.services.adapters.base import DEFAULT_TIMEOUT, TranslationAdapter, build_translation_prompt
from pollyglot.utils import dig


class GeminiAdapter(TranslationAdapter):
    name = "gemini"

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINTS["gemini"],
        model: str = DEFAULT_MODELS["gemini"],
        temperature: float = 0.1,
        max_output_tokens: int = 1000,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(endpoint, timeout=timeout)
        self._api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    @classmethod
    def from_settings(cls, settings: Settings, api_key: str) -> "GeminiAdapter":
        return cls(
            api_key,
            endpoint=settings.endpoints["gemini"],
            model=settings.models["gemini"],
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
            timeout=settings.request_timeout,
        )

    def translate(self, text: str, target_language: str) -> str:
        url = f"{self.endpoint.rstrip('/')}/{self.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": build_translation_prompt(text, target_language)}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }
        response = self._post(
            url,
            payload,
            headers={"Content-Type": "application/json"},
            params={"key": self._api_key},
        )
        data = self._read_json(response)
        if not response.ok:
            self._raise_upstream(response, dig(data, "error", "message"))
        return self._require_text(dig(data, "candidates", 0, "content", "parts", 0, "text"))
