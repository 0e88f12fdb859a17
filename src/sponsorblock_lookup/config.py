"""Client configuration via environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from . import __version__
from .hashing import DEFAULT_HASH_PREFIX_LENGTH, MAX_HASH_PREFIX_LENGTH, MIN_HASH_PREFIX_LENGTH

BASE_URL_MAIN = "https://sponsor.ajay.app/api"
BASE_URL_TESTING = "https://sponsor.ajay.app/test/api"
DEFAULT_SERVICE = "YouTube"
DEFAULT_USER_AGENT = f"sponsorblock-lookup/{__version__}"


def _is_env_placeholder(value: str) -> bool:
    """Return True when *value* looks like an unresolved shell placeholder."""
    if value.startswith("${") and value.endswith("}"):
        inner = value[2:-1].strip()
        if ":-" in inner:
            inner = inner.split(":-", 1)[0].strip()
        return bool(inner) and all(ch.isalnum() or ch == "_" for ch in inner)
    if value.startswith("$"):
        inner = value[1:].strip()
        return bool(inner) and all(ch.isalnum() or ch == "_" for ch in inner)
    return False


def _env(name: str, default: str = "") -> str:
    """Read an env var, treating blanks and placeholders as unset."""
    value = os.getenv(name, "").strip()
    if not value or _is_env_placeholder(value):
        return default
    return value


def _parse_timeout(raw: str) -> str | None:
    """Map the "disabled" spellings to None; pydantic coerces the rest."""
    if not raw or raw.lower() in ("none", "off", "0"):
        return None
    return raw


class ClientConfig(BaseModel):
    """Runtime configuration for SegmentClient.

    The endpoint layout and hash prefix length follow the published API
    version; change them only when targeting a different instance.
    """

    base_url: str = Field(default=BASE_URL_MAIN)
    hash_prefix_length: int = Field(default=DEFAULT_HASH_PREFIX_LENGTH)
    service: str = Field(default=DEFAULT_SERVICE)
    timeout: float | None = Field(default=None)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    user_id: str = Field(default="", repr=False)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        url = value.strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got '{value}'")
        return url

    @field_validator("hash_prefix_length")
    @classmethod
    def validate_hash_prefix_length(cls, value: int) -> int:
        if not MIN_HASH_PREFIX_LENGTH <= value <= MAX_HASH_PREFIX_LENGTH:
            raise ValueError(
                f"hash_prefix_length must be between {MIN_HASH_PREFIX_LENGTH} "
                f"and {MAX_HASH_PREFIX_LENGTH}"
            )
        return value

    @field_validator("service")
    @classmethod
    def validate_service(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("service must not be empty")
        return value.strip()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be > 0 (or None for no timeout)")
        return value

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build config from environment variables."""
        return cls(
            base_url=_env("SPONSORBLOCK_BASE_URL", BASE_URL_MAIN),
            hash_prefix_length=_env(
                "SPONSORBLOCK_HASH_PREFIX_LENGTH", str(DEFAULT_HASH_PREFIX_LENGTH)
            ),
            service=_env("SPONSORBLOCK_SERVICE", DEFAULT_SERVICE),
            timeout=_parse_timeout(_env("SPONSORBLOCK_TIMEOUT")),
            user_agent=_env("SPONSORBLOCK_USER_AGENT", DEFAULT_USER_AGENT),
            user_id=_env("SPONSORBLOCK_USER_ID"),
        )


_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Return the global config singleton, creating it on first access."""
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config


def update_config(**overrides: object) -> ClientConfig:
    """Patch the live config with *overrides*.

    Only the given keys change. Passing ``timeout=None`` disables the timeout.
    """
    global _config
    cfg = get_config()
    data = cfg.model_dump()
    data.update(overrides)
    _config = ClientConfig(**data)
    return _config
