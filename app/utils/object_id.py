import re
from typing import Callable, Optional

from bson import ObjectId

from app.core.exceptions import InvalidIdError

_HEX_ID = re.compile(r"^[0-9a-fA-F]{24}$")


def is_object_id(value: str) -> bool:
    """Accept the same ids a MongoDB ODM does: 24 hex chars or 12 raw bytes."""
    if not isinstance(value, str):
        return False
    if _HEX_ID.match(value):
        return True
    return len(value.encode("utf-8")) == 12


def to_object_id(value: str) -> ObjectId:
    if _HEX_ID.match(value):
        return ObjectId(value)
    return ObjectId(value.encode("utf-8"))


class ObjectIdValidator:
    """Checks a path segment is a well-formed record key before any store I/O.

    The format predicate and converter are pluggable so that callers are not
    tied to one storage engine's key encoding.
    """

    def __init__(
        self,
        predicate: Callable[[str], bool] = is_object_id,
        converter: Callable[[str], ObjectId] = to_object_id,
    ):
        self.predicate = predicate
        self.converter = converter

    def is_valid(self, value: Optional[str]) -> bool:
        return value is not None and self.predicate(value)

    def validate(self, value: Optional[str], field: str = "id") -> ObjectId:
        if not self.is_valid(value):
            raise InvalidIdError(field)
        return self.converter(value)


object_id_validator = ObjectIdValidator()


def validate_object_id(value: Optional[str], field: str = "id") -> ObjectId:
    return object_id_validator.validate(value, field)
