"""Shared test fixtures for sponsorblock-lookup."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from sponsorblock_lookup.config import ClientConfig
from sponsorblock_lookup.hashing import hash_video_id


def raw_segment(
    start: float,
    end: float,
    category: str = "sponsor",
    *,
    action_type: str = "skip",
    uuid: str = "seg-uuid",
    votes: int = 0,
    locked: int = 0,
    video_duration: float = 600.0,
) -> dict:
    """Build one segment record the way the API serialises it."""
    return {
        "segment": [start, end],
        "category": category,
        "actionType": action_type,
        "UUID": uuid,
        "votes": votes,
        "locked": locked,
        "videoDuration": video_duration,
        "description": "",
    }


def hash_match(video_id: str, segments: list[dict]) -> dict:
    """Build one per-video record of a hash-prefix response."""
    return {"videoID": video_id, "hash": hash_video_id(video_id), "segments": segments}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_response(payload: object, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler returning *payload* as a JSON body."""
    return lambda request: httpx.Response(status_code, content=json.dumps(payload).encode())


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Reset the config singleton and clear SPONSORBLOCK_* vars between tests."""
    import sponsorblock_lookup.config as cfg_mod

    for name in (
        "SPONSORBLOCK_BASE_URL",
        "SPONSORBLOCK_HASH_PREFIX_LENGTH",
        "SPONSORBLOCK_SERVICE",
        "SPONSORBLOCK_TIMEOUT",
        "SPONSORBLOCK_USER_AGENT",
        "SPONSORBLOCK_USER_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    cfg_mod._config = None
    yield
    cfg_mod._config = None


@pytest.fixture()
def config() -> ClientConfig:
    return ClientConfig(base_url="https://sb.test/api")
