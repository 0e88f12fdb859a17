"""Shared type aliases."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Plain aliases ────────────────────────────────────────────────────────────

VideoId = str
HashDigest = str
SegmentUuid = str
LocalUserId = str

# ── Annotated aliases ────────────────────────────────────────────────────────

HexDigest = Annotated[str, Field(pattern=r"^[0-9a-fA-F]{64}$", description="SHA-256 hex digest")]
