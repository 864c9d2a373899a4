from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from beanie import Document
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=Document)


class BaseCRUD(Generic[ModelT]):
    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def list(
        self,
        filter_: Optional[Dict[str, Any]] = None,
        sort: Optional[str] = None,
        limit: int = 0,
        skip: int = 0,
    ) -> List[ModelT]:
        cursor = self.model.find(dict(filter_ or {}))
        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return await cursor.to_list()

    async def create(self, obj_in: BaseModel | Dict[str, Any]) -> ModelT:
        data = obj_in.model_dump() if isinstance(obj_in, BaseModel) else dict(obj_in)
        db_obj = self.model(**data)
        await db_obj.insert()
        return db_obj
