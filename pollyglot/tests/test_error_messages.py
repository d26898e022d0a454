import unittest

from pollyglot.models.translation_errors import (
    ConfigurationError,
    RateLimitedError,
    TranslationFailedError,
    UpstreamError,
    ValidationError,
)
from pollyglot.services.error_messages import render_error


class TestRenderError(unittest.TestCase):
    def test_known_statuses_have_specific_messages(self):
        unauthorized = render_error(UpstreamError("API key not valid", status=401))
        forbidden = render_error(UpstreamError("denied", status=403))
        quota = render_error(UpstreamError("quota exceeded", status=429))

        self.assertTrue(unauthorized.startswith("Authorization failed"))
        self.assertTrue(forbidden.startswith("Access forbidden"))
        self.assertTrue(quota.startswith("Too many requests"))
        self.assertIn("quota exceeded", quota)

    def test_generic_message_includes_underlying_text(self):
        self.assertEqual(
            render_error(UpstreamError("Service unavailable", status=503)),
            "Translation failed: Service unavailable. Please check your internet connection.",
        )

    def test_double_failure_uses_primary(self):
        err = TranslationFailedError(UpstreamError("quota exceeded", status=500), UpstreamError("libre down", status=502))
        text = render_error(err)
        self.assertIn("quota exceeded", text)
        self.assertNotIn("libre down", text)

    def test_validation_and_rate_limit(self):
        self.assertEqual(render_error(ValidationError("Please enter text to translate")), "Please enter text to translate")
        self.assertEqual(render_error(RateLimitedError(1500)), "Please wait 2 seconds before translating again")

    def test_configuration_is_generic(self):
        text = render_error(ConfigurationError("API key not configured", status=500))
        self.assertIn("not configured correctly", text)
        self.assertNotIn("API key", text)


if __name__ == "__main__":
    unittest.main()
