from app.core.ownership import OwnerScope
from app.crud.base import BaseCRUD
from app.models.note import Note


class NoteCRUD(BaseCRUD[Note]):
    def __init__(self):
        super().__init__(Note)

    async def detach_folder(self, scope: OwnerScope, folder_id: str) -> int:
        """Unset the folder reference on every owned note filed under it"""
        result = await self.model.find(scope.filter(folder_id=folder_id)).update(
            {"$set": {"folder_id": None}}
        )
        return result.modified_count if result else 0


note_crud = NoteCRUD()
