"""Response models for the SponsorBlock lookup client."""

from .segment import (
    ActionType,
    Category,
    HashMatch,
    RawSegment,
    Segment,
    decode_hash_matches,
)
from .status import ApiStatus, decode_api_status

__all__ = [
    "ActionType",
    "ApiStatus",
    "Category",
    "HashMatch",
    "RawSegment",
    "Segment",
    "decode_api_status",
    "decode_hash_matches",
]
