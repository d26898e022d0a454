"""
/**
 * @file pollyglot/services/adapters/base.py
 * @description Uniform translate(text, target_language) contract shared by every backend adapter.
 */
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from pollyglot.models.translation_errors import EmptyResultError, TransportError, UpstreamError
from pollyglot.utils import is_blank


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def build_translation_prompt(text: str, target_language: str) -> str:
    return (
        f"Translate the following text to {target_language}. "
        f"Only return the translation, no explanations:\n\n\"{text}\""
    )


class TranslationAdapter(ABC):
    """
    One backend's request/response shape behind a single-attempt ``translate`` call.

    Subclasses build the envelope and pick the result out of the response; this base
    normalizes transport failures, non-success statuses and empty results into
    TranslationError subclasses so callers never see a raw ``requests`` exception.
    """

    name = "adapter"

    def __init__(self, endpoint: str, timeout: float = DEFAULT_TIMEOUT):
        self.endpoint = endpoint
        self.timeout = timeout

    @abstractmethod
    def translate(self, text: str, target_language: str) -> str:
        raise NotImplementedError

    def _post(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        try:
            return requests.post(url, json=payload, headers=headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            # The exception text can echo the request URL, which may carry a key.
            logger.warning("[%s] transport failure: %s", self.name, type(e).__name__)
            raise TransportError(f"{self.name} request failed ({type(e).__name__})") from e

    @staticmethod
    def _read_json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _raise_upstream(self, response: requests.Response, message: Optional[str]) -> None:
        status = response.status_code
        logger.warning("[%s] upstream returned %s: %s", self.name, status, message)
        raise UpstreamError(message or "Request failed", status=status)

    def _require_text(self, value: Any) -> str:
        if not isinstance(value, str) or is_blank(value):
            raise EmptyResultError(f"No translation received from {self.name}")
        return value.strip()
