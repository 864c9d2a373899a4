from .uniqueness import UniquenessGuard
from .folder_service import FolderService, folder_service
__all__ = ["UniquenessGuard", "FolderService", "folder_service"]
