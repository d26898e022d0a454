"""
/**
 * @file pollyglot/services/__init__.py
 * @description Service layer exports.
 */
"""

from .error_messages import render_error
from .orchestrator import FallbackOrchestrator
from .proxy_service import ProxyService
from .rate_limiter import RateLimitDecision, RateLimiter, RateLimitState
from .translator_session import TranslatorSession

__all__ = [
    "FallbackOrchestrator",
    "ProxyService",
    "RateLimitDecision",
    "RateLimiter",
    "RateLimitState",
    "TranslatorSession",
    "render_error",
]
