"""
/**
 * @file pollyglot/services/error_messages.py
 * @description User-facing text for classified translation errors.
 */
"""

from __future__ import annotations

import math

from pollyglot.models.translation_errors import ErrorKind, TranslationError, TranslationFailedError


STATUS_MESSAGES = {
    401: "Authorization failed: the translation service rejected its credentials ({message}).",
    403: "Access forbidden: the translation service refused this request ({message}).",
    429: "Too many requests: translation quota or rate limit reached ({message}). Please try again later.",
}
CONFIGURATION_MESSAGE = "The translation service is not configured correctly. Please try again later."
GENERIC_MESSAGE = "Translation failed: {message}. Please check your internet connection."


def wait_seconds(wait_ms: int) -> int:
    return max(1, math.ceil(wait_ms / 1000))


def render_error(error: TranslationError) -> str:
    # A double failure is reported through the primary backend's error.
    source = error.cause if isinstance(error, TranslationFailedError) else error
    message = source.message or "Unknown error"

    if source.kind == ErrorKind.VALIDATION:
        return message
    if source.kind == ErrorKind.RATE_LIMITED:
        return f"Please wait {wait_seconds(source.wait_ms)} seconds before translating again"
    if source.kind == ErrorKind.CONFIGURATION:
        return CONFIGURATION_MESSAGE
    template = STATUS_MESSAGES.get(source.status)
    if template:
        return template.format(message=message)
    return GENERIC_MESSAGE.format(message=message)
