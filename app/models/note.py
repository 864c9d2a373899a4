from typing import Annotated, Optional
from beanie import Document, Indexed
from pydantic import Field
from pymongo import IndexModel, ASCENDING
from app.models.time_mixin import TimeMixin


class Note(TimeMixin, Document):
    owner_id: Annotated[str, Indexed()] = Field(..., description="User who owns the note")
    title: str = Field(..., min_length=1, description="Note title")
    content: Optional[str] = Field(None, description="Note body")
    folder_id: Optional[str] = Field(None, description="Folder the note is filed under")

    class Settings:
        name = "notes"
        indexes = [
            IndexModel([("owner_id", ASCENDING), ("folder_id", ASCENDING)]),
        ]
