"""Tests for Settings loading and the service-role client factory."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from src.config import Settings
from src.storage.client import get_service_role_client


class TestSettings:
    def test_defaults(self) -> None:
        cfg = Settings(_env_file=None)  # type: ignore[call-arg]
        assert cfg.api_port == 8000
        assert cfg.debug_diagnostics is False
        assert cfg.llm_max_tokens > 0

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.setenv("DEBUG_DIAGNOSTICS", "true")
        monkeypatch.setenv("CORS_ORIGINS", '["https://notes.example.com"]')
        cfg = Settings(_env_file=None)  # type: ignore[call-arg]
        assert cfg.anthropic_api_key == "sk-test"
        assert cfg.debug_diagnostics is True
        assert cfg.cors_origins == ["https://notes.example.com"]

    def test_invalid_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not-a-port")
        with pytest.raises(ValueError):
            Settings(_env_file=None)  # type: ignore[call-arg]


class TestServiceRoleClient:
    @pytest.fixture(autouse=True)
    def _clear_cache(self) -> Iterator[None]:
        get_service_role_client.cache_clear()
        yield
        get_service_role_client.cache_clear()

    def test_missing_key_returns_none(self) -> None:
        with patch("src.storage.client.settings") as mock_settings:
            mock_settings.supabase_url = "https://example.supabase.co"
            mock_settings.supabase_service_role_key = ""
            assert get_service_role_client() is None

    def test_configured_client_is_cached(self) -> None:
        with (
            patch("src.storage.client.settings") as mock_settings,
            patch("src.storage.client.create_client", return_value=MagicMock()) as mock_create,
        ):
            mock_settings.supabase_url = "https://example.supabase.co"
            mock_settings.supabase_service_role_key = "service-key"
            first = get_service_role_client()
            second = get_service_role_client()

        assert first is second
        mock_create.assert_called_once()
        assert mock_create.call_args.args == ("https://example.supabase.co", "service-key")
