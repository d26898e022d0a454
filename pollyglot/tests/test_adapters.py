"""
/**
 * @file pollyglot/tests/test_adapters.py
 * @description Backend adapter unit tests (requests.post is mocked, no real network calls).
 */
"""

import unittest
from unittest.mock import Mock, patch

import requests

from pollyglot.models.translation_errors import (
    ConfigurationError,
    EmptyResultError,
    TransportError,
    UpstreamError,
)
from pollyglot.services.adapters import (
    ChatCompletionAdapter,
    GeminiAdapter,
    LibreTranslateAdapter,
    ProxyAdapter,
    build_translation_prompt,
)

POST = "pollyglot.services.adapters.base.requests.post"


def _response(status, payload=None):
    resp = Mock()
    resp.status_code = status
    resp.ok = status < 400
    if payload is None:
        resp.json.side_effect = ValueError("no json body")
    else:
        resp.json.return_value = payload
    return resp


def _candidate(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class TestPrompt(unittest.TestCase):
    def test_prompt_asks_for_translation_only(self):
        prompt = build_translation_prompt("How are you?", "French")
        self.assertIn("to French", prompt)
        self.assertIn("Only return the translation", prompt)
        self.assertTrue(prompt.endswith('"How are you?"'))


class TestGeminiAdapter(unittest.TestCase):
    def setUp(self):
        self.adapter = GeminiAdapter("AIzaTEST", model="gemini-1.5-flash", timeout=12)

    @patch(POST)
    def test_success_extracts_first_candidate_part(self, mock_post):
        mock_post.return_value = _response(200, _candidate("  Comment allez-vous?\n"))

        out = self.adapter.translate("How are you?", "French")

        self.assertEqual(out, "Comment allez-vous?")
        args, kwargs = mock_post.call_args
        self.assertTrue(args[0].endswith("/gemini-1.5-flash:generateContent"))
        self.assertEqual(kwargs["params"], {"key": "AIzaTEST"})
        self.assertEqual(kwargs["timeout"], 12)
        body = kwargs["json"]
        self.assertEqual(body["generationConfig"], {"temperature": 0.1, "maxOutputTokens": 1000})
        self.assertIn("How are you?", body["contents"][0]["parts"][0]["text"])

    @patch(POST)
    def test_error_status_carries_upstream_message(self, mock_post):
        mock_post.return_value = _response(429, {"error": {"message": "quota exceeded"}})
        with self.assertRaises(UpstreamError) as ctx:
            self.adapter.translate("hi", "Spanish")
        self.assertEqual(ctx.exception.status, 429)
        self.assertEqual(ctx.exception.message, "quota exceeded")

    @patch(POST)
    def test_error_without_json_body(self, mock_post):
        mock_post.return_value = _response(503)
        with self.assertRaises(UpstreamError) as ctx:
            self.adapter.translate("hi", "Spanish")
        self.assertEqual(ctx.exception.message, "Request failed")
        self.assertEqual(ctx.exception.status, 503)

    @patch(POST)
    def test_missing_candidate_is_empty_result(self, mock_post):
        for payload in ({"candidates": []}, {}, _candidate("   ")):
            mock_post.return_value = _response(200, payload)
            with self.assertRaises(EmptyResultError):
                self.adapter.translate("hi", "Japanese")

    @patch(POST)
    def test_transport_failure_does_not_leak_key(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("Max retries exceeded with url: /x?key=AIzaTEST")
        with self.assertRaises(TransportError) as ctx:
            self.adapter.translate("hi", "French")
        self.assertNotIn("AIzaTEST", ctx.exception.message)


class TestChatCompletionAdapter(unittest.TestCase):
    @patch(POST)
    def test_success_uses_bearer_header(self, mock_post):
        mock_post.return_value = _response(200, {"choices": [{"message": {"content": "Hola"}}]})
        adapter = ChatCompletionAdapter("sk-test", endpoint="http://chat.local/v1/chat/completions", model="qwen-max")

        self.assertEqual(adapter.translate("Hello", "Spanish"), "Hola")

        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], "http://chat.local/v1/chat/completions")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer sk-test")
        self.assertEqual(kwargs["json"]["model"], "qwen-max")
        self.assertEqual(kwargs["json"]["max_tokens"], 1000)
        self.assertEqual(kwargs["json"]["messages"][0]["role"], "user")

    @patch(POST)
    def test_error_message(self, mock_post):
        mock_post.return_value = _response(401, {"error": {"message": "Incorrect API key"}})
        with self.assertRaises(UpstreamError) as ctx:
            ChatCompletionAdapter("sk-test").translate("Hello", "Spanish")
        self.assertEqual(ctx.exception.status, 401)
        self.assertEqual(ctx.exception.message, "Incorrect API key")


class TestProxyAdapter(unittest.TestCase):
    def setUp(self):
        self.adapter = ProxyAdapter("http://proxy.local/api/translate")

    @patch(POST)
    def test_sends_no_credential(self, mock_post):
        mock_post.return_value = _response(200, {"translatedText": "Bonjour"})

        self.assertEqual(self.adapter.translate("Hello", "French"), "Bonjour")

        args, kwargs = mock_post.call_args
        self.assertEqual(kwargs["json"], {"text": "Hello", "targetLanguage": "French"})
        self.assertIsNone(kwargs["params"])
        self.assertNotIn("Authorization", kwargs["headers"])

    @patch(POST)
    def test_accepts_legacy_result_fields(self, mock_post):
        for payload in ({"translated": "Bonjour"}, {"translation": "Bonjour"}):
            mock_post.return_value = _response(200, payload)
            self.assertEqual(self.adapter.translate("Hello", "French"), "Bonjour")

    @patch(POST)
    def test_relayed_error_prefers_details(self, mock_post):
        mock_post.return_value = _response(429, {"error": "Gemini API error", "details": "quota exceeded"})
        with self.assertRaises(UpstreamError) as ctx:
            self.adapter.translate("Hello", "French")
        self.assertEqual(ctx.exception.message, "quota exceeded")
        self.assertEqual(ctx.exception.status, 429)

    @patch(POST)
    def test_nested_error_message(self, mock_post):
        mock_post.return_value = _response(500, {"error": {"message": "quota exceeded"}})
        with self.assertRaises(UpstreamError) as ctx:
            self.adapter.translate("Hello", "French")
        self.assertEqual(ctx.exception.message, "quota exceeded")

    @patch(POST)
    def test_configuration_kind_is_preserved(self, mock_post):
        mock_post.return_value = _response(500, {"error": "API key not configured", "kind": "configuration"})
        with self.assertRaises(ConfigurationError) as ctx:
            self.adapter.translate("Hello", "French")
        self.assertEqual(ctx.exception.message, "API key not configured")

    @patch(POST)
    def test_empty_result_kind_is_preserved(self, mock_post):
        mock_post.return_value = _response(
            500,
            {"error": "No translation received from upstream", "details": "No translation received from gemini", "kind": "empty_result"},
        )
        with self.assertRaises(EmptyResultError) as ctx:
            self.adapter.translate("Hello", "French")
        self.assertEqual(ctx.exception.message, "No translation received from gemini")
        self.assertEqual(ctx.exception.status, 500)


class TestLibreTranslateAdapter(unittest.TestCase):
    def setUp(self):
        self.adapter = LibreTranslateAdapter("http://libre.local/translate")

    @patch(POST)
    def test_request_shape(self, mock_post):
        mock_post.return_value = _response(200, {"translatedText": "こんにちは"})

        self.assertEqual(self.adapter.translate("Hello", "Japanese"), "こんにちは")

        kwargs = mock_post.call_args.kwargs
        self.assertEqual(kwargs["json"], {"q": "Hello", "source": "auto", "target": "ja", "format": "text"})

    def test_unmapped_language_uses_default_code(self):
        with self.assertLogs("pollyglot.services.adapters.libretranslate_adapter", level="WARNING"):
            self.assertEqual(self.adapter.language_code("Klingon"), "fr")
        self.assertEqual(LibreTranslateAdapter(default_code="en").language_code("Klingon"), "en")

    @patch(POST)
    def test_failure(self, mock_post):
        mock_post.return_value = _response(500)
        with self.assertRaises(UpstreamError) as ctx:
            self.adapter.translate("Hello", "French")
        self.assertEqual(ctx.exception.message, "Fallback translation failed")

    @patch(POST)
    def test_missing_translated_text(self, mock_post):
        mock_post.return_value = _response(200, {"detectedLanguage": {"language": "en"}})
        with self.assertRaises(EmptyResultError):
            self.adapter.translate("Hello", "French")


if __name__ == "__main__":
    unittest.main()
