"""Async SponsorBlock lookup client using private hash-prefix searches.

Only the first few hex characters of the video ID's SHA-256 digest are sent.
The service answers with every video under that prefix; the client keeps the
one whose full digest matches and drops the rest before filtering segments.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from types import TracebackType

import httpx

from .config import ClientConfig, get_config
from .errors import InvalidInput, ServiceError, TransportError
from .filters import AcceptedActions, AcceptedCategories, accepts
from .hashing import hash_prefix, hash_video_id
from .models.segment import Segment, decode_hash_matches
from .models.status import ApiStatus, decode_api_status
from .types import SegmentUuid, VideoId

logger = logging.getLogger(__name__)

SKIP_SEGMENTS_ENDPOINT = "/skipSegments"
STATUS_ENDPOINT = "/status"
USER_ID_HEADER = "X-SponsorBlock-User"


class SegmentClient:
    """Read-only client for one caller identity.

    Holds the caller's local user ID, its configuration, and one pooled
    ``httpx.AsyncClient``. Safe to share between concurrent tasks.
    """

    def __init__(
        self,
        user_id: str,
        *,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not user_id or not user_id.strip():
            raise InvalidInput("user_id must not be empty")
        self._user_id = user_id
        self.config = config or get_config()
        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            self._http = httpx.AsyncClient(
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.timeout,
                transport=transport,
            )
            self._owns_http = True

    @classmethod
    def from_config(cls, config: ClientConfig | None = None, **kwargs) -> SegmentClient:
        """Create a client whose user ID comes from the config (``SPONSORBLOCK_USER_ID``)."""
        cfg = config or get_config()
        return cls(cfg.user_id, config=cfg, **kwargs)

    def __repr__(self) -> str:
        return f"SegmentClient(base_url={self.config.base_url!r}, service={self.config.service!r})"

    async def __aenter__(self) -> SegmentClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def fetch_segments(
        self,
        video_id: VideoId,
        categories: AcceptedCategories | None = None,
        actions: AcceptedActions | None = None,
        required_segments: Iterable[SegmentUuid] = (),
    ) -> list[Segment]:
        """Fetch the segments of *video_id* that pass both filters.

        Args:
            video_id: Platform video ID. Never sent to the service in full.
            categories: Accepted categories (default: all).
            actions: Accepted action types (default: all).
            required_segments: Segment UUIDs the service must include even
                when they are below its vote threshold.

        Returns:
            Matching segments in the order the service returned them. Empty
            when the service knows no segments for the video.

        Raises:
            InvalidInput: If *video_id* is empty.
            ServiceError: On any non-2xx status other than 404.
            DecodeError: If the body does not match the expected schema.
            TransportError: On network failure.
        """
        if not video_id or not video_id.strip():
            raise InvalidInput("video_id must not be empty")
        if categories is None:
            categories = AcceptedCategories.all()
        if actions is None:
            actions = AcceptedActions.all()

        digest = hash_video_id(video_id)
        prefix = hash_prefix(digest, self.config.hash_prefix_length)

        params = {
            "categories": categories.to_query_value(),
            "actionTypes": actions.to_query_value(),
            "service": self.config.service,
        }
        required = list(required_segments)
        if required:
            params["requiredSegments"] = json.dumps(required, separators=(",", ":"))

        response = await self._get(f"{SKIP_SEGMENTS_ENDPOINT}/{prefix}", params)
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("No videos under prefix %s", prefix)
            return []
        self._raise_for_status(response)

        matches = decode_hash_matches(response.content)
        segments = [
            raw.to_segment()
            for match in matches
            if match.video_hash.lower() == digest
            for raw in match.segments
            if accepts(categories, raw.category) and accepts(actions, raw.action_type)
        ]
        logger.debug(
            "Prefix %s: %d candidate video(s), kept %d segment(s)",
            prefix, len(matches), len(segments),
        )
        return segments

    async def fetch_api_status(self) -> ApiStatus:
        """Fetch the server status (uptime, commit, DB version, load).

        Raises:
            ServiceError, DecodeError, TransportError: As for fetch_segments,
            except that 404 is a ServiceError here.
        """
        response = await self._get(STATUS_ENDPOINT)
        self._raise_for_status(response)
        return decode_api_status(response.content)

    async def _get(self, path: str, params: dict[str, str] | None = None) -> httpx.Response:
        """Send one GET, wrapping network failures in TransportError."""
        url = f"{self.config.base_url}{path}"
        try:
            response = await self._http.get(
                url, params=params, headers={USER_ID_HEADER: self._user_id},
            )
        except httpx.RequestError as exc:
            raise TransportError(
                f"Unable to reach SponsorBlock API ({type(exc).__name__}: {exc})"
            ) from exc
        logger.debug("GET %s -> %d", path, response.status_code)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if not response.is_success:
            raise ServiceError(response.status_code, response.text[:200].strip())
