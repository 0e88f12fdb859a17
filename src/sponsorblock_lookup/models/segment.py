"""Segment models: closed category/action enums, wire records, and decoding.

The service sends loosely-typed strings for categories and action types.
They are mapped onto closed enums here, and any unmapped tag fails the whole
response with DecodeError rather than slipping through as "unknown".
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from ..errors import DecodeError
from ..types import HexDigest


class Category(str, Enum):
    """What kind of content a segment covers.

    Values are the wire names used by the SponsorBlock API.
    """

    SPONSOR = "sponsor"
    SELF_PROMOTION = "selfpromo"
    INTERACTION_REMINDER = "interaction"
    INTRO = "intro"
    OUTRO = "outro"
    PREVIEW_RECAP = "preview"
    NON_MUSIC = "music_offtopic"
    FILLER = "filler"
    HIGHLIGHT = "poi_highlight"
    EXCLUSIVE_ACCESS = "exclusive_access"


class ActionType(str, Enum):
    """What a player should do when it reaches a segment."""

    SKIP = "skip"
    MUTE = "mute"
    POINT_OF_INTEREST = "poi"
    FULL_VIDEO = "full"


# Action types whose segments may have start == end.
_ZERO_LENGTH_ACTIONS = frozenset({ActionType.POINT_OF_INTEREST, ActionType.FULL_VIDEO})


class Segment(BaseModel):
    """One annotated time range within a video, plus provenance metadata.

    ``video_duration`` is the video length the submitter saw; a mismatch with
    the current length suggests the video was re-edited after submission.
    """

    model_config = ConfigDict(frozen=True)

    category: Category
    action_type: ActionType
    start: float
    end: float
    uuid: str
    votes: int = 0
    locked: bool = False
    video_duration: float = 0.0

    @property
    def duration(self) -> float:
        return self.end - self.start


class RawSegment(BaseModel):
    """A segment exactly as the API serialises it."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    segment: tuple[float, float]
    category: Category
    action_type: ActionType = Field(alias="actionType")
    uuid: str = Field(alias="UUID")
    votes: int
    locked: bool
    video_duration: float = Field(alias="videoDuration")

    @model_validator(mode="after")
    def _check_time_range(self) -> RawSegment:
        start, end = self.segment
        if start < 0:
            raise ValueError(f"segment start ({start}) < 0")
        # Highlights arrive as [t, t], full-video labels as [0, 0].
        if self.action_type in _ZERO_LENGTH_ACTIONS:
            if start > end:
                raise ValueError(f"segment start ({start}) > end ({end})")
        elif start >= end:
            raise ValueError(f"segment start ({start}) >= end ({end})")
        return self

    def to_segment(self) -> Segment:
        start, end = self.segment
        return Segment(
            category=self.category,
            action_type=self.action_type,
            start=start,
            end=end,
            uuid=self.uuid,
            votes=self.votes,
            locked=self.locked,
            video_duration=self.video_duration,
        )


class HashMatch(BaseModel):
    """All segments of one video whose hash shares the queried prefix."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    video_id: str = Field(alias="videoID")
    video_hash: HexDigest = Field(alias="hash")
    segments: list[RawSegment] = Field(default_factory=list)


_HASH_MATCHES = TypeAdapter(list[HashMatch])


def decode_hash_matches(body: str | bytes) -> list[HashMatch]:
    """Parse a ``/skipSegments/{prefix}`` body into HashMatch records.

    Validation is all-or-nothing: one bad record rejects the whole body.

    Raises:
        DecodeError: With the first failing field and its input value.
    """
    try:
        return _HASH_MATCHES.validate_json(body)
    except ValidationError as exc:
        raise DecodeError.from_validation(exc) from exc
