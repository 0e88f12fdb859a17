"""Tests for configuration parsing and normalization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sponsorblock_lookup.config import (
    BASE_URL_MAIN,
    DEFAULT_USER_AGENT,
    ClientConfig,
    get_config,
    update_config,
)


class TestDefaults:
    def test_from_env_defaults(self):
        cfg = ClientConfig.from_env()
        assert cfg.base_url == BASE_URL_MAIN
        assert cfg.hash_prefix_length == 4
        assert cfg.service == "YouTube"
        assert cfg.timeout is None
        assert cfg.user_agent == DEFAULT_USER_AGENT
        assert cfg.user_id == ""

    def test_user_id_not_in_repr(self):
        cfg = ClientConfig(user_id="very-secret-id")
        assert "very-secret-id" not in repr(cfg)


class TestFromEnv:
    def test_reads_all_vars(self, monkeypatch):
        monkeypatch.setenv("SPONSORBLOCK_BASE_URL", "https://sponsor.ajay.app/test/api/")
        monkeypatch.setenv("SPONSORBLOCK_HASH_PREFIX_LENGTH", "6")
        monkeypatch.setenv("SPONSORBLOCK_SERVICE", "PeerTube")
        monkeypatch.setenv("SPONSORBLOCK_TIMEOUT", "2.5")
        monkeypatch.setenv("SPONSORBLOCK_USER_AGENT", "my-app/1.0")
        monkeypatch.setenv("SPONSORBLOCK_USER_ID", "abc")
        cfg = ClientConfig.from_env()
        assert cfg.base_url == "https://sponsor.ajay.app/test/api"
        assert cfg.hash_prefix_length == 6
        assert cfg.service == "PeerTube"
        assert cfg.timeout == 2.5
        assert cfg.user_agent == "my-app/1.0"
        assert cfg.user_id == "abc"

    def test_unresolved_placeholder_is_treated_as_unset(self, monkeypatch):
        monkeypatch.setenv("SPONSORBLOCK_BASE_URL", "${SPONSORBLOCK_BASE_URL}")
        monkeypatch.setenv("SPONSORBLOCK_USER_ID", "${SPONSORBLOCK_USER_ID:-}")
        cfg = ClientConfig.from_env()
        assert cfg.base_url == BASE_URL_MAIN
        assert cfg.user_id == ""

    def test_non_numeric_prefix_length_is_validation_error(self, monkeypatch):
        monkeypatch.setenv("SPONSORBLOCK_HASH_PREFIX_LENGTH", "four")
        with pytest.raises(ValidationError, match="hash_prefix_length"):
            ClientConfig.from_env()

    def test_non_numeric_timeout_is_validation_error(self, monkeypatch):
        monkeypatch.setenv("SPONSORBLOCK_TIMEOUT", "soon")
        with pytest.raises(ValidationError, match="timeout"):
            ClientConfig.from_env()

    @pytest.mark.parametrize("raw", ["", "none", "0", "off"])
    def test_timeout_disabled(self, monkeypatch, raw):
        monkeypatch.setenv("SPONSORBLOCK_TIMEOUT", raw)
        assert ClientConfig.from_env().timeout is None


class TestValidation:
    @pytest.mark.parametrize("length", [3, 33])
    def test_prefix_length_bounds(self, length):
        with pytest.raises(ValidationError, match="hash_prefix_length"):
            ClientConfig(hash_prefix_length=length)

    def test_base_url_scheme_required(self):
        with pytest.raises(ValidationError, match="http"):
            ClientConfig(base_url="sponsor.ajay.app/api")

    def test_negative_timeout(self):
        with pytest.raises(ValidationError, match="timeout"):
            ClientConfig(timeout=-1)

    def test_blank_service(self):
        with pytest.raises(ValidationError):
            ClientConfig(service="  ")


class TestSingleton:
    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_update_config(self):
        cfg = update_config(service="PeerTube")
        assert cfg.service == "PeerTube"
        assert cfg.base_url == BASE_URL_MAIN
        assert get_config() is cfg

    def test_update_config_can_clear_timeout(self):
        assert update_config(timeout=5.0).timeout == 5.0
        cfg = update_config(timeout=None)
        assert cfg.timeout is None
        assert get_config().timeout is None
