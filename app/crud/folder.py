from typing import List, Optional
from beanie import UpdateResponse
from bson import ObjectId

from app.core.ownership import OwnerScope
from app.crud.base import BaseCRUD
from app.models.folder import Folder
from app.models.time_mixin import utc_now
from app.schemas.folder import FolderCreate, FolderUpdate


class FolderCRUD(BaseCRUD[Folder]):
    def __init__(self):
        super().__init__(Folder)

    async def list_by_owner(self, scope: OwnerScope) -> List[Folder]:
        """All folders of an owner, sorted by name"""
        return await self.list(scope.filter(), sort="+name")

    async def get_by_owner_and_id(self, scope: OwnerScope, folder_id: ObjectId) -> Optional[Folder]:
        return await self.model.find_one(scope.filter(_id=folder_id))

    async def check_name_exists(
        self,
        scope: OwnerScope,
        name: str,
        exclude_id: Optional[ObjectId] = None,
    ) -> bool:
        """Check if a folder name is already taken for an owner"""
        query = scope.filter(name=name)
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}

        existing = await self.model.find_one(query)
        return existing is not None

    async def create_with_owner(self, scope: OwnerScope, obj_in: FolderCreate) -> Folder:
        return await self.create(scope.inject(obj_in.model_dump()))

    async def update_by_owner_and_id(
        self,
        scope: OwnerScope,
        folder_id: ObjectId,
        obj_in: FolderUpdate,
    ) -> Optional[Folder]:
        """Apply an update to an owned folder in one round trip.

        Returns the stored document after the write, or None when no folder
        of this owner has the id (including one deleted since it was read).
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        update_data["updated_at"] = utc_now()

        return await self.model.find_one(scope.filter(_id=folder_id)).update(
            {"$set": update_data},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )

    async def delete_by_owner_and_id(self, scope: OwnerScope, folder_id: ObjectId) -> bool:
        """Delete an owned folder; returns whether anything was removed"""
        result = await self.model.find_one(scope.filter(_id=folder_id)).delete()
        return bool(result and result.deleted_count)


folder_crud = FolderCRUD()
