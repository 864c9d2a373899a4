from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FolderWriteRequest(BaseModel):
    """Body of POST and PUT. `name` is taken as sent; the service rejects
    anything that is not a non-blank string with the missing-name 400."""
    name: Any = Field(None, description="Folder name")

    @classmethod
    def name_from(cls, body: Any) -> Any:
        """The `name` of a JSON object body; None for any other body"""
        if not isinstance(body, dict):
            return None
        return cls.model_validate(body).name

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Work"
            }
        }
    )


class FolderCreate(BaseModel):
    """Internal schema for creating a folder; the owner is injected by the scope"""
    name: str = Field(..., min_length=1)


class FolderUpdate(BaseModel):
    """Schema for updating a folder; only the name is mutable"""
    name: str = Field(..., min_length=1)


class FolderResponse(BaseModel):
    """Wire shape of a folder: exactly these five keys"""
    id: str = Field(..., description="Folder identifier")
    name: str = Field(..., description="Folder name")
    owner_id: str = Field(..., description="Owner ID")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "507f1f77bcf86cd799439011",
                "name": "Work",
                "ownerId": "507f1f77bcf86cd799439012",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z"
            }
        }
    )

    @classmethod
    def from_document(cls, folder) -> "FolderResponse":
        return cls(
            id=str(folder.id),
            name=folder.name,
            owner_id=folder.owner_id,
            created_at=folder.created_at,
            updated_at=folder.updated_at,
        )
