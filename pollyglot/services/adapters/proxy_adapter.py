"""
/**
 * @file pollyglot/services/adapters/proxy_adapter.py
 * @description Client-side adapter for the /api/translate proxy. Sends no credential.
 */
"""

from __future__ import annotations

from pollyglot.config.settings import DEFAULT_ENDPOINTS, Settings
from pollyglot.models.translation_errors import ConfigurationError, EmptyResultError, ErrorKind
from pollyglot.services.adapters.base import DEFAULT_TIMEOUT, TranslationAdapter
from pollyglot.utils import dig, first_text


# translatedText is canonical; the others are what older proxy deployments answered with.
RESULT_FIELDS = ("translatedText", "translated", "translation")

# Error kinds the proxy reports that are rebuilt as-is instead of as an UpstreamError.
RELAYED_KINDS = {
    ErrorKind.CONFIGURATION.value: (ConfigurationError, "Server misconfigured"),
    ErrorKind.EMPTY_RESULT.value: (EmptyResultError, "No translation received"),
}


def _error_message(data):
    details = first_text(data, "details")
    if details:
        return details
    return dig(data, "error", "message") or first_text(data, "error")


class ProxyAdapter(TranslationAdapter):
    name = "proxy"

    def __init__(self, endpoint: str = DEFAULT_ENDPOINTS["proxy"], timeout: float = DEFAULT_TIMEOUT):
        super().__init__(endpoint, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProxyAdapter":
        return cls(settings.endpoints["proxy"], timeout=settings.request_timeout)

    def translate(self, text: str, target_language: str) -> str:
        response = self._post(
            self.endpoint,
            {"text": text, "targetLanguage": target_language},
            headers={"Content-Type": "application/json"},
        )
        data = self._read_json(response)
        if not response.ok:
            relayed = RELAYED_KINDS.get(first_text(data, "kind"))
            if relayed:
                error_cls, default_message = relayed
                raise error_cls(_error_message(data) or default_message, status=response.status_code)
            self._raise_upstream(response, _error_message(data))
        return self._require_text(first_text(data, *RESULT_FIELDS))
