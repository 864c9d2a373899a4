from functools import wraps
from typing import Any, List, Optional

from pymongo.errors import PyMongoError

from app.core.exceptions import AppError, MissingFieldError, NotFoundError, StoreError
from app.core.ownership import OwnerScope
from app.crud.folder import FolderCRUD, folder_crud
from app.crud.note import NoteCRUD, note_crud as default_note_crud
from app.models.folder import Folder
from app.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from app.services.uniqueness import UniquenessGuard
from app.utils.logging import get_logger
from app.utils.object_id import validate_object_id

logger = get_logger(__name__)


def surface_store_errors(func):
    """Turn driver failures into a generic StoreError; client errors pass through"""
    @wraps(func)
    async def wrapper(self, scope: OwnerScope, *args, **kwargs):
        try:
            return await func(self, scope, *args, **kwargs)
        except AppError:
            raise
        except PyMongoError as e:
            logger.exception(f"{func.__name__} failed for user {scope.owner_id}: {str(e)}")
            raise StoreError()
    return wrapper


def _require_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise MissingFieldError("name")
    return name


class FolderService:
    def __init__(
        self,
        crud: Optional[FolderCRUD] = None,
        note_crud: Optional[NoteCRUD] = None,
        guard: Optional[UniquenessGuard] = None,
    ):
        self.crud = crud or folder_crud
        self._note_crud = note_crud or default_note_crud
        self._guard = guard or UniquenessGuard(self.crud)

    @surface_store_errors
    async def list_folders(self, scope: OwnerScope) -> List[FolderResponse]:
        folders = await self.crud.list_by_owner(scope)
        return [FolderResponse.from_document(folder) for folder in folders]

    @surface_store_errors
    async def get_folder(self, scope: OwnerScope, folder_id: str) -> FolderResponse:
        folder = await self._get_owned(scope, folder_id)
        return FolderResponse.from_document(folder)

    @surface_store_errors
    async def create_folder(self, scope: OwnerScope, name: Any) -> FolderResponse:
        name = _require_name(name)
        await self._guard.check_unique(scope, name)

        async with self._guard.translate(scope, name):
            folder = await self.crud.create_with_owner(scope, FolderCreate(name=name))

        logger.info(f"Folder {folder.id} created for user {scope.owner_id}")
        return FolderResponse.from_document(folder)

    @surface_store_errors
    async def update_folder(
        self,
        scope: OwnerScope,
        folder_id: str,
        name: Any,
    ) -> FolderResponse:
        object_id = validate_object_id(folder_id)
        name = _require_name(name)

        folder = await self.crud.get_by_owner_and_id(scope, object_id)
        if not folder:
            raise NotFoundError("Folder not found")

        await self._guard.check_unique(scope, name, exclude_id=object_id)

        async with self._guard.translate(scope, name):
            folder = await self.crud.update_by_owner_and_id(scope, object_id, FolderUpdate(name=name))
        if not folder:
            raise NotFoundError("Folder not found")

        logger.info(f"Folder {folder_id} renamed for user {scope.owner_id}")
        return FolderResponse.from_document(folder)

    @surface_store_errors
    async def delete_folder(self, scope: OwnerScope, folder_id: str) -> bool:
        """Idempotent: a well-formed id that matches nothing is not an error"""
        object_id = validate_object_id(folder_id)

        deleted = await self.crud.delete_by_owner_and_id(scope, object_id)
        if deleted:
            detached = await self._note_crud.detach_folder(scope, str(object_id))
            logger.info(f"Folder {folder_id} deleted for user {scope.owner_id}, {detached} notes detached")
        return deleted

    async def _get_owned(self, scope: OwnerScope, folder_id: str) -> Folder:
        object_id = validate_object_id(folder_id)
        folder = await self.crud.get_by_owner_and_id(scope, object_id)
        if not folder:
            raise NotFoundError("Folder not found")
        return folder


folder_service = FolderService()
