from app.models.time_mixin import TimeMixin
from app.models.user import User
from app.models.folder import Folder
from app.models.note import Note

# Export all models for easy import
__all__ = [
    "TimeMixin",
    "User",
    "Folder",
    "Note",
]

# List of all document models for Beanie initialization
DOCUMENT_MODELS = [
    User,
    Folder,
    Note,
]
