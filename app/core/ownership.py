from dataclasses import dataclass
from typing import Any, Dict, Mapping

from app.models.user import User


@dataclass(frozen=True)
class OwnerScope:
    """Owner predicate that every folder query and write is conjoined with.

    A record outside the scope is indistinguishable from one that does not
    exist: lookups that miss the predicate simply find nothing.
    """

    owner_id: str

    @classmethod
    def from_user(cls, user: User) -> "OwnerScope":
        return cls(owner_id=str(user.id))

    def filter(self, **conditions: Any) -> Dict[str, Any]:
        query = dict(conditions)
        query["owner_id"] = self.owner_id
        return query

    def inject(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        payload = dict(data)
        payload["owner_id"] = self.owner_id
        return payload


def scope(caller: User) -> OwnerScope:
    return OwnerScope.from_user(caller)
