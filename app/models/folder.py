from beanie import Document
from pydantic import Field
from pymongo import IndexModel, ASCENDING
from app.models.time_mixin import TimeMixin


class Folder(TimeMixin, Document):
    """Named grouping of notes owned by exactly one user"""

    owner_id: str = Field(..., description="User who owns the folder")
    name: str = Field(..., min_length=1, description="Folder name, unique per owner")

    class Settings:
        name = "folders"
        indexes = [
            IndexModel([("owner_id", ASCENDING), ("name", ASCENDING)], unique=True),
        ]
