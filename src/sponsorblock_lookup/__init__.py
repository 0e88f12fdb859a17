"""sponsorblock-lookup: async, privacy-preserving SponsorBlock segment lookups."""

__version__ = "0.1.0"

from .client import SegmentClient
from .config import BASE_URL_MAIN, BASE_URL_TESTING, ClientConfig
from .errors import DecodeError, FetchError, InvalidInput, ServiceError, TransportError
from .filters import AcceptedActions, AcceptedCategories, accepts
from .hashing import hash_prefix, hash_video_id
from .models.segment import ActionType, Category, Segment
from .models.status import ApiStatus
from .user_id import gen_user_id

__all__ = [
    "AcceptedActions",
    "AcceptedCategories",
    "ActionType",
    "ApiStatus",
    "BASE_URL_MAIN",
    "BASE_URL_TESTING",
    "Category",
    "ClientConfig",
    "DecodeError",
    "FetchError",
    "InvalidInput",
    "Segment",
    "SegmentClient",
    "ServiceError",
    "TransportError",
    "accepts",
    "gen_user_id",
    "hash_prefix",
    "hash_video_id",
]
