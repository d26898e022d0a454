"""
/**
 * @file pollyglot/services/adapters/chat_completion_adapter.py
 * @description Chat-completion API adapter (OpenAI-compatible, e.g. DashScope compatible mode).
 */
"""

from __future__ import annotations

from pollyglot.config.settings import DEFAULT_ENDPOINTS, DEFAULT_MODELS, Settings
from pollyglot.services.adapters.base import DEFAULT_TIMEOUT, TranslationAdapter, build_translation_prompt
from pollyglot.utils import dig, first_text


class ChatCompletionAdapter(TranslationAdapter):
    name = "chat_completion"

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINTS["chat_completion"],
        model: str = DEFAULT_MODELS["chat_completion"],
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
    def from_settings(cls, settings: Settings, api_key: str) -> "ChatCompletionAdapter":
        return cls(
            api_key,
            endpoint=settings.endpoints["chat_completion"],
            model=settings.models["chat_completion"],
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
            timeout=settings.request_timeout,
        )

    def _get_headers(self):
        return {"Authorization": f"Bearer {self._api_key}", "Content-Type": "application/json"}

    def translate(self, text: str, target_language: str) -> str:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": build_translation_prompt(text, target_language)}],
            "temperature": self.temperature,
            "max_tokens": self.max_output_tokens,
        }
        response = self._post(self.endpoint, payload, headers=self._get_headers())
        data = self._read_json(response)
        if not response.ok:
            self._raise_upstream(response, dig(data, "error", "message") or first_text(data, "message"))
        return self._require_text(dig(data, "choices", 0, "message", "content"))
