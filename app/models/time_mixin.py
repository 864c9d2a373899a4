from datetime import datetime
from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Current UTC time at the millisecond precision BSON dates store"""
    now = datetime.utcnow()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class TimeMixin(BaseModel):
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp")
    updated_at: datetime = Field(
        default_factory=utc_now, description="Last update timestamp")
