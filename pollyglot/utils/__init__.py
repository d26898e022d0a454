"""
/**
 * @file pollyglot/utils/__init__.py
 * @description Utility exports.
 */
"""

from .payload_utils import dig, first_text, is_blank

__all__ = ["dig", "first_text", "is_blank"]
