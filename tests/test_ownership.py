from types import SimpleNamespace

from bson import ObjectId

from app.core.ownership import OwnerScope, scope


class TestOwnerScope:

    def test_from_user(self):
        user = SimpleNamespace(id=ObjectId(), username="alice")

        owner_scope = scope(user)

        assert owner_scope == OwnerScope(owner_id=str(user.id))

    def test_filter_always_carries_owner(self):
        owner_scope = OwnerScope(owner_id="owner-1")

        assert owner_scope.filter() == {"owner_id": "owner-1"}
        assert owner_scope.filter(name="Work") == {"owner_id": "owner-1", "name": "Work"}

    def test_filter_cannot_be_widened(self):
        owner_scope = OwnerScope(owner_id="owner-1")

        assert owner_scope.filter(owner_id="owner-2")["owner_id"] == "owner-1"

    def test_inject_overwrites_client_owner(self):
        owner_scope = OwnerScope(owner_id="owner-1")
        data = {"name": "Work", "owner_id": "someone-else"}

        injected = owner_scope.inject(data)

        assert injected == {"name": "Work", "owner_id": "owner-1"}
        assert data["owner_id"] == "someone-else"
