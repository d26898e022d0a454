"""
/**
 * @file pollyglot/models/translation_errors.py
 * @description Classified translation failures, tagged with an ErrorKind at the point of detection.
 */
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    EMPTY_RESULT = "empty_result"
    TRANSPORT = "transport"
    RATE_LIMITED = "rate_limited"
    TRANSLATION_FAILED = "translation_failed"


class TranslationError(Exception):
    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(self, message: str = "", status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r}, status={self.status!r})"


class ValidationError(TranslationError):
    """Missing text or target language. User-correctable."""

    kind = ErrorKind.VALIDATION


class ConfigurationError(TranslationError):
    """Missing or malformed credential. Operator-facing."""

    kind = ErrorKind.CONFIGURATION


class UpstreamError(TranslationError):
    kind = ErrorKind.UPSTREAM


class EmptyResultError(TranslationError):
    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, message: str = "No translation received", status: Optional[int] = None):
        super().__init__(message, status)


class TransportError(TranslationError):
    """Connection failure or timeout before any upstream response arrived."""

    kind = ErrorKind.TRANSPORT


class RateLimitedError(TranslationError):
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, wait_ms: int):
        super().__init__(f"Rate limited, retry in {wait_ms} ms")
        self.wait_ms = wait_ms


class TranslationFailedError(TranslationError):
    """Primary and fallback both failed; message and status come from the primary."""

    kind = ErrorKind.TRANSLATION_FAILED

    def __init__(self, cause: TranslationError, fallback_cause: Optional[TranslationError] = None):
        super().__init__(cause.message, cause.status)
        self.cause = cause
        self.fallback_cause = fallback_cause
