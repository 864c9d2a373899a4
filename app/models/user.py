from typing import Annotated, Optional
from beanie import Document, Indexed
from pydantic import Field

from app.models.time_mixin import TimeMixin


class User(TimeMixin, Document):
    username: Annotated[str, Indexed(unique=True)] = Field(..., min_length=1, max_length=50, description="Unique username, used as the credential subject")
    fullname: Optional[str] = Field(None, description="Display name")

    class Settings:
        name = "users"
