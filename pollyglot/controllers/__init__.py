"""
/**
 * @file pollyglot/controllers/__init__.py
 * @description Controller (router) exports.
 */
"""

from .health_controller import router as health_router
from .translate_controller import router as translate_router

__all__ = [
    "health_router",
    "translate_router",
]
