"""Server status model for the ``/status`` endpoint."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import DecodeError


class ApiStatus(BaseModel):
    """Health snapshot reported by the SponsorBlock server.

    ``start_time`` arrives as epoch milliseconds and ``process_time`` as
    milliseconds; ``uptime`` is in seconds. ``load_average`` holds the
    5- and 15-minute averages.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    uptime: float = 0.0
    commit: str = ""
    db_version: int = Field(default=0, alias="db")
    start_time: datetime | None = Field(default=None, alias="startTime")
    process_time: float = Field(default=0.0, alias="processTime")
    load_average: tuple[float, float] = Field(default=(0.0, 0.0), alias="loadavg")

    @field_validator("start_time", mode="before")
    @classmethod
    def _from_epoch_millis(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        return value


def decode_api_status(body: str | bytes) -> ApiStatus:
    """Parse a ``/status`` body.

    Raises:
        DecodeError: If the body is not a JSON object of the expected shape.
    """
    try:
        return ApiStatus.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError.from_validation(exc) from exc
