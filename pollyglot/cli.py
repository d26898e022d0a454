"""
/**
 * @file pollyglot/cli.py
 * @description Command-line front end: translates one text through a TranslatorSession and prints JSON.
 */
"""

import argparse
import json
import sys
from typing import List, Optional

from pollyglot.config import load_settings
from pollyglot.services.adapters import LibreTranslateAdapter, ProxyAdapter
from pollyglot.services.orchestrator import FallbackOrchestrator
from pollyglot.services.rate_limiter import RateLimiter
from pollyglot.services.translator_session import TranslatorSession


def build_session(proxy_url: Optional[str] = None) -> TranslatorSession:
    settings = load_settings()
    if proxy_url is None:
        return TranslatorSession.from_settings(settings)
    orchestrator = FallbackOrchestrator(
        ProxyAdapter(proxy_url, timeout=settings.request_timeout),
        LibreTranslateAdapter.from_settings(settings),
    )
    return TranslatorSession(orchestrator, languages=settings.languages, rate_limiter=RateLimiter(settings.rate_limit_interval_ms))


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Translate text through the PollyGlot proxy with fallback.")
    parser.add_argument("--text", required=True)
    parser.add_argument("--language", choices=settings.languages, default=settings.languages[0])
    parser.add_argument("--proxy-url", default=None)
    args = parser.parse_args(argv)

    session = build_session(args.proxy_url)
    session.submit(args.text, args.language)

    if session.error:
        out = {"error": session.error, "kind": session.last_error.kind.value if session.last_error else None}
    else:
        out = {"translatedText": session.translated_text}
    sys.stdout.write(json.dumps(out, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")
    return 1 if session.error else 0


if __name__ == "__main__":
    sys.exit(main())
