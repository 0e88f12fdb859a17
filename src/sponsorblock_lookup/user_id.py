"""Local user ID generation.

A local user ID identifies a caller to the service's rate limiting. Generate
one per user, persist it, and keep it private: anyone holding it shares the
same rate-limit bucket.
"""

from __future__ import annotations

import secrets
import string

from .types import LocalUserId

USER_ID_LENGTH = 36
USER_ID_ALPHABET = string.ascii_letters + string.digits


def gen_user_id() -> LocalUserId:
    """Return a new random 36-character alphanumeric user ID.

    Matches the format the official browser extension generates.
    """
    return "".join(secrets.choice(USER_ID_ALPHABET) for _ in range(USER_ID_LENGTH))
