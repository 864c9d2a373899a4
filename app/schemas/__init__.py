from app.schemas.response import ApiError, ErrorDetail, HealthCheck
from app.schemas.folder import FolderCreate, FolderUpdate, FolderResponse, FolderWriteRequest

__all__ = [
    "ApiError",
    "ErrorDetail",
    "HealthCheck",
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "FolderWriteRequest",
]
