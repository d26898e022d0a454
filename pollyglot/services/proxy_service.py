"""
/**
 * @file pollyglot/services/proxy_service.py
 * @description Server-side relay to the generative-language API. Owns the API key.
 * @note The upstream is chosen once at startup; changing proxy.upstream needs a restart.
 */
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pollyglot.config import Settings, load_settings
from pollyglot.config.settings import UPSTREAM_CHAT_COMPLETION, UPSTREAM_LABELS
from pollyglot.models.translation_errors import ConfigurationError
from pollyglot.services.adapters import ChatCompletionAdapter, GeminiAdapter, TranslationAdapter


logger = logging.getLogger(__name__)

AdapterFactory = Callable[[str], TranslationAdapter]


def adapter_factory_for(upstream: str, settings: Optional[Settings] = None) -> AdapterFactory:
    """Build adapters from ``settings`` if pinned, else from the currently loaded config."""
    adapter_cls = ChatCompletionAdapter if upstream == UPSTREAM_CHAT_COMPLETION else GeminiAdapter

    def _factory(api_key: str) -> TranslationAdapter:
        current = settings or load_settings()
        if current.upstream != upstream:
            logger.warning(
                "proxy.upstream changed to %r but %r stays active until restart",
                current.upstream,
                upstream,
            )
        return adapter_cls.from_settings(current, api_key)

    return _factory


class ProxyService:
    """
    Holds the key resolved at startup and checks it before every upstream call, so a
    missing or malformed credential fails fast with a ConfigurationError.
    """

    def __init__(self, api_key: Optional[str], adapter_factory: AdapterFactory, key_prefix: str = "AIza", upstream_name: str = "gemini"):
        self._api_key = api_key
        self._adapter_factory = adapter_factory
        self.key_prefix = key_prefix
        self.upstream_name = upstream_name

    @classmethod
    def from_settings(cls, settings: Settings, api_key: Optional[str] = None, pin_settings: bool = True) -> "ProxyService":
        return cls(
            api_key if api_key is not None else settings.resolve_api_key(),
            adapter_factory_for(settings.upstream, settings if pin_settings else None),
            key_prefix=settings.api_key_prefix,
            upstream_name=settings.upstream,
        )

    @property
    def upstream_label(self) -> str:
        return UPSTREAM_LABELS.get(self.upstream_name, self.upstream_name)

    @property
    def key_configured(self) -> bool:
        return bool(self._api_key)

    @property
    def key_format_ok(self) -> bool:
        return bool(self._api_key) and self._api_key.startswith(self.key_prefix)

    def check_credential(self) -> str:
        if not self._api_key:
            raise ConfigurationError("API key not configured", status=500)
        if not self._api_key.startswith(self.key_prefix):
            raise ConfigurationError("Invalid API key format", status=500)
        return self._api_key

    def translate(self, text: str, target_language: str) -> str:
        api_key = self.check_credential()
        return self._adapter_factory(api_key).translate(text, target_language)
