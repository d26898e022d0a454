"""
/**
 * @file pollyglot/config/__init__.py
 * @description Configuration module exports.
 */
"""

from .settings import Settings, load_settings, read_settings, reload_settings, CONFIG_PATH, CONFIG_LOCAL_PATH

__all__ = ["Settings", "load_settings", "read_settings", "reload_settings", "CONFIG_PATH", "CONFIG_LOCAL_PATH"]
