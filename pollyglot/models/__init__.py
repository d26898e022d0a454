"""
/**
 * @file pollyglot/models/__init__.py
 * @description Data model exports.
 */
"""

from .translate_request_model import TranslateRequest, TranslateResponse, TranslationResult
from .translation_errors import (
    ConfigurationError,
    EmptyResultError,
    ErrorKind,
    RateLimitedError,
    TranslationError,
    TranslationFailedError,
    TransportError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "TranslateRequest",
    "TranslateResponse",
    "TranslationResult",
    "ErrorKind",
    "TranslationError",
    "ValidationError",
    "ConfigurationError",
    "UpstreamError",
    "EmptyResultError",
    "TransportError",
    "RateLimitedError",
    "TranslationFailedError",
]
