import os

import pytest

from billed.settings import Settings


def _clear_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("BILLED_"):
            monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self, monkeypatch):
        _clear_env(monkeypatch)
        s = Settings(_env_file=None)
        assert s.api_url == "http://localhost:5678"
        assert s.store_backend == "api"
        assert s.api_token == ""
        assert s.receipt_preview_width == 500
        assert s.log_level == "INFO"
        assert s.log_json is False

    def test_env_override(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("BILLED_API_URL", "https://api.example.com")
        monkeypatch.setenv("BILLED_STORE_BACKEND", "memory")
        monkeypatch.setenv("BILLED_API_TIMEOUT", "2.5")
        s = Settings(_env_file=None)
        assert s.api_url == "https://api.example.com"
        assert s.store_backend == "memory"
        assert s.api_timeout == pytest.approx(2.5)
