"""Video ID hashing for private (k-anonymity) segment lookups.

The service indexes videos by the SHA-256 hex digest of their ID. Only a
short prefix of that digest goes over the wire; the full digest stays local
and is used to pick the queried video out of the candidate set.
"""

from __future__ import annotations

import hashlib

from .errors import InvalidInput
from .types import HashDigest, VideoId

DEFAULT_HASH_PREFIX_LENGTH = 4
MIN_HASH_PREFIX_LENGTH = 4
MAX_HASH_PREFIX_LENGTH = 32


def hash_video_id(video_id: VideoId) -> HashDigest:
    """Return the lowercase SHA-256 hex digest (64 chars) of *video_id*."""
    return hashlib.sha256(video_id.encode("utf-8")).hexdigest()


def validate_prefix_length(length: int) -> int:
    """Check *length* is within the range the service accepts.

    Raises:
        InvalidInput: If the length is outside 4..32.
    """
    if not MIN_HASH_PREFIX_LENGTH <= length <= MAX_HASH_PREFIX_LENGTH:
        raise InvalidInput(
            f"Hash prefix length must be between {MIN_HASH_PREFIX_LENGTH} "
            f"and {MAX_HASH_PREFIX_LENGTH}, got {length}"
        )
    return length


def hash_prefix(digest: HashDigest, length: int = DEFAULT_HASH_PREFIX_LENGTH) -> str:
    """Return the first *length* hex characters of *digest*.

    Shorter prefixes match more videos, which means more privacy and a
    bigger response.
    """
    validate_prefix_length(length)
    return digest[:length]
