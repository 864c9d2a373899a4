from typing import Optional

from app.crud.base import BaseCRUD
from app.models.user import User


class UserCRUD(BaseCRUD[User]):
    def __init__(self):
        super().__init__(User)

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self.model.find_one(User.username == username)


user_crud = UserCRUD()
