"""
/**
 * @file pollyglot/services/adapters/__init__.py
 * @description Backend adapter exports.
 */
"""

from .base import TranslationAdapter, build_translation_prompt
from .chat_completion_adapter import ChatCompletionAdapter
from .gemini_adapter import GeminiAdapter
from .libretranslate_adapter import LibreTranslateAdapter
from .proxy_adapter import ProxyAdapter

__all__ = [
    "TranslationAdapter",
    "build_translation_prompt",
    "GeminiAdapter",
    "ChatCompletionAdapter",
    "ProxyAdapter",
    "LibreTranslateAdapter",
]
