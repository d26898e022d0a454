"""
/**
 * @file pollyglot/config/settings.py
 * @description Configuration loading and merging (config.json + config.local.json).
 * @note The upstream API key is never read from these files, only from the environment.
 */
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(PACKAGE_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(PACKAGE_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(PACKAGE_ROOT, "config.example.json")

UPSTREAM_GEMINI = "gemini"
UPSTREAM_CHAT_COMPLETION = "chat_completion"

DEFAULT_ENDPOINTS = {
    "gemini": "https://generativelanguage.googleapis.com/v1beta/models",
    "chat_completion": "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions",
    "libretranslate": "https://libretranslate.com/translate",
    "proxy": "http://localhost:5000/api/translate",
}
DEFAULT_MODELS = {"gemini": "gemini-1.5-flash", "chat_completion": "qwen-max"}
DEFAULT_LANGUAGES = ["French", "Spanish", "Japanese"]
DEFAULT_LANGUAGE_CODES = {"French": "fr", "Spanish": "es", "Japanese": "ja"}
DEFAULT_KEY_PREFIXES = {UPSTREAM_GEMINI: "AIza", UPSTREAM_CHAT_COMPLETION: "sk-"}
UPSTREAM_LABELS = {UPSTREAM_GEMINI: "Gemini", UPSTREAM_CHAT_COMPLETION: "Chat completion"}

# Looked up in order; "AI" is the variable name used by the edge-worker deployment.
API_KEY_ENV_VARS: Dict[str, Tuple[str, ...]] = {
    UPSTREAM_GEMINI: ("GEMINI_API_KEY", "AI"),
    UPSTREAM_CHAT_COMPLETION: ("DASHSCOPE_API_KEY", "CHAT_COMPLETION_API_KEY"),
}

logger = logging.getLogger("config_loader")


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name, {})
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def endpoints(self) -> Dict[str, str]:
        return {**DEFAULT_ENDPOINTS, **_section(self.raw, "endpoints")}

    @property
    def models(self) -> Dict[str, str]:
        return {**DEFAULT_MODELS, **_section(self.raw, "models")}

    @property
    def temperature(self) -> float:
        value = _section(self.raw, "generation").get("temperature")
        return float(value) if isinstance(value, (int, float)) else 0.1

    @property
    def max_output_tokens(self) -> int:
        value = _section(self.raw, "generation").get("max_output_tokens")
        return int(value) if isinstance(value, int) and value > 0 else 1000

    @property
    def request_timeout(self) -> float:
        value = self.raw.get("request_timeout")
        return float(value) if isinstance(value, (int, float)) and value > 0 else 30.0

    @property
    def rate_limit_interval_ms(self) -> int:
        value = _section(self.raw, "client").get("rate_limit_interval_ms")
        return int(value) if isinstance(value, int) and value >= 0 else 2000

    @property
    def languages(self) -> List[str]:
        value = _section(self.raw, "client").get("languages")
        if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
            return list(value)
        return list(DEFAULT_LANGUAGES)

    @property
    def fallback_language_codes(self) -> Dict[str, str]:
        value = _section(self.raw, "fallback").get("language_codes")
        return dict(value) if isinstance(value, dict) else dict(DEFAULT_LANGUAGE_CODES)

    @property
    def fallback_default_code(self) -> str:
        value = _section(self.raw, "fallback").get("default_code")
        return value if isinstance(value, str) and value else "fr"

    @property
    def upstream(self) -> str:
        value = _section(self.raw, "proxy").get("upstream")
        return value if value in (UPSTREAM_GEMINI, UPSTREAM_CHAT_COMPLETION) else UPSTREAM_GEMINI

    @property
    def api_key_prefix(self) -> str:
        prefixes = _section(self.raw, "proxy").get("api_key_prefix")
        if isinstance(prefixes, dict) and isinstance(prefixes.get(self.upstream), str):
            return prefixes[self.upstream]
        return DEFAULT_KEY_PREFIXES[self.upstream]

    def resolve_api_key(self) -> Optional[str]:
        for name in API_KEY_ENV_VARS[self.upstream]:
            value = os.getenv(name)
            if value:
                return value
        return None


_CACHED_SETTINGS: Optional[Settings] = None
_LAST_LOAD_TIME = 0.0
_CONFIG_HASH = ""
_SETTINGS_LOCK = threading.Lock()


def _deep_diff(d1: Dict[str, Any], d2: Dict[str, Any], path="") -> list:
    diffs = []
    for k in sorted(set(d1.keys()) | set(d2.keys())):
        p = f"{path}.{k}" if path else k
        if k not in d1:
            diffs.append(f"Added: {p}")
        elif k not in d2:
            diffs.append(f"Removed: {p}")
        elif isinstance(d1[k], dict) and isinstance(d2[k], dict):
            diffs.extend(_deep_diff(d1[k], d2[k], p))
        elif d1[k] != d2[k]:
            diffs.append(f"Changed: {p} ({d1[k]} -> {d2[k]})")
    return diffs


def read_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    """Read and merge the config files without touching the cache. Raises on corrupt JSON."""
    base_cfg = _load_json(base_path)
    if not base_cfg.get("endpoints") and os.path.exists(example_path):
        base_cfg = _merge_dicts(_load_json(example_path), base_cfg)
    merged = _merge_dicts(base_cfg, _load_json(local_path))
    return Settings(raw=merged)


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    global _CACHED_SETTINGS, _LAST_LOAD_TIME, _CONFIG_HASH

    with _SETTINGS_LOCK:
        now = time.time()
        # Debounce: 500ms
        if _CACHED_SETTINGS and (now - _LAST_LOAD_TIME < 0.5):
            return _CACHED_SETTINGS

        try:
            fresh = read_settings(base_path, local_path, example_path)
            new_hash = hashlib.md5(json.dumps(fresh.raw, sort_keys=True).encode("utf-8")).hexdigest()

            if _CACHED_SETTINGS and new_hash == _CONFIG_HASH:
                _LAST_LOAD_TIME = now
                return _CACHED_SETTINGS

            is_reload = _CACHED_SETTINGS is not None
            if is_reload:
                diffs = _deep_diff(_CACHED_SETTINGS.raw, fresh.raw)
                if diffs:
                    logger.info("Config changes detected: %s", "; ".join(diffs))

            _CACHED_SETTINGS = fresh
            _CONFIG_HASH = new_hash
            _LAST_LOAD_TIME = now

            if is_reload:
                logger.info("Configuration reloaded successfully.")

        except (OSError, ValueError) as e:
            logger.error("Failed to reload config: %s. Keeping old config.", e)
            if not _CACHED_SETTINGS:
                logger.warning("Initializing with default settings due to load failure.")
                _CACHED_SETTINGS = Settings(raw={})

    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Lazy loads on first call.
    Subsequent reloads are handled by the file watcher calling reload_settings().
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
