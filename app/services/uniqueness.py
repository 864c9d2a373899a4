from contextlib import asynccontextmanager
from typing import Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import DuplicateNameError
from app.core.ownership import OwnerScope
from app.crud.folder import FolderCRUD, folder_crud
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UniquenessGuard:
    """At most one folder per (owner_id, name).

    The pre-check gives an informative error; the unique index on
    ``folders(owner_id, name)`` closes the window between check and write.
    Both paths surface as ``DuplicateNameError``.
    """

    def __init__(self, crud: Optional[FolderCRUD] = None):
        self.crud = crud or folder_crud

    async def check_unique(
        self,
        scope: OwnerScope,
        name: str,
        exclude_id: Optional[ObjectId] = None,
    ) -> None:
        if await self.crud.check_name_exists(scope, name, exclude_id):
            logger.warning(f"Folder name '{name}' already exists for user {scope.owner_id}")
            raise DuplicateNameError()

    @asynccontextmanager
    async def translate(self, scope: OwnerScope, name: str):
        try:
            yield
        except DuplicateKeyError:
            logger.warning(f"Unique index rejected folder name '{name}' for user {scope.owner_id}")
            raise DuplicateNameError()
