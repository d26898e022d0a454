import unittest

from fastapi.testclient import TestClient

from pollyglot.config.settings import Settings
from pollyglot.main import create_app
from pollyglot.services.proxy_service import ProxyService


def _client(api_key):
    settings = Settings(raw={})
    service = ProxyService.from_settings(settings, api_key=api_key)
    return TestClient(create_app(settings=settings, proxy_service=service, watch_config=False))


class TestHealth(unittest.TestCase):
    def test_ok_with_valid_key(self):
        resp = _client("AIzaSECRET").get("/health")
        data = resp.json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["checks"]["upstream"], "gemini")
        self.assertNotIn("AIzaSECRET", resp.text)

    def test_degraded_without_key(self):
        data = _client(None).get("/health").json()
        self.assertEqual(data["status"], "degraded")
        self.assertEqual(data["checks"]["api_key"], {"configured": False, "format_ok": False})

    def test_degraded_with_malformed_key(self):
        data = _client("bogus").get("/health").json()
        self.assertEqual(data["checks"]["api_key"], {"configured": True, "format_ok": False})


if __name__ == "__main__":
    unittest.main()
