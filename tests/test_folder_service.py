import logging

import pytest
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from app.core.exceptions import (
    DuplicateNameError,
    InvalidIdError,
    MissingFieldError,
    NotFoundError,
    StoreError,
)
from app.core.ownership import OwnerScope
from app.services.folder_service import FolderService


def make_folder(name="Work", owner_id="owner-1"):
    now = datetime.utcnow()
    return SimpleNamespace(id=ObjectId(), name=name, owner_id=owner_id, created_at=now, updated_at=now)


@pytest.fixture
def crud():
    crud = MagicMock()
    crud.check_name_exists = AsyncMock(return_value=False)
    crud.list_by_owner = AsyncMock(return_value=[])
    crud.get_by_owner_and_id = AsyncMock(return_value=None)
    crud.create_with_owner = AsyncMock()
    crud.update_by_owner_and_id = AsyncMock()
    crud.delete_by_owner_and_id = AsyncMock(return_value=False)
    return crud


@pytest.fixture
def note_crud():
    note_crud = MagicMock()
    note_crud.detach_folder = AsyncMock(return_value=0)
    return note_crud


@pytest.fixture
def service(crud, note_crud):
    return FolderService(crud=crud, note_crud=note_crud)


@pytest.fixture
def owner_scope():
    return OwnerScope(owner_id="owner-1")


class TestCreate:

    async def test_success(self, service, crud, owner_scope):
        folder = make_folder()
        crud.create_with_owner.return_value = folder

        result = await service.create_folder(owner_scope, "Work")

        assert result.id == str(folder.id)
        assert result.owner_id == "owner-1"
        crud.check_name_exists.assert_awaited_once_with(owner_scope, "Work", None)

    @pytest.mark.parametrize("name", [None, "", "  ", 42])
    async def test_missing_name(self, service, crud, owner_scope, name):
        with pytest.raises(MissingFieldError) as exc_info:
            await service.create_folder(owner_scope, name)

        assert exc_info.value.message == "Missing `name` in request body"
        crud.create_with_owner.assert_not_awaited()

    async def test_duplicate_precheck(self, service, crud, owner_scope):
        crud.check_name_exists.return_value = True

        with pytest.raises(DuplicateNameError):
            await service.create_folder(owner_scope, "Work")

        crud.create_with_owner.assert_not_awaited()

    async def test_duplicate_at_write_time(self, service, crud, owner_scope):
        crud.create_with_owner.side_effect = DuplicateKeyError("E11000 duplicate key error")

        with pytest.raises(DuplicateNameError) as exc_info:
            await service.create_folder(owner_scope, "Work")

        assert exc_info.value.message == "Folder name already exists"

    async def test_store_failure_is_generic(self, service, crud, owner_scope):
        crud.check_name_exists.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StoreError) as exc_info:
            await service.create_folder(owner_scope, "Work")

        assert exc_info.value.status_code == 500

    async def test_store_failure_is_logged_with_traceback(self, service, crud, owner_scope, caplog):
        crud.check_name_exists.side_effect = ServerSelectionTimeoutError("no servers")

        with caplog.at_level(logging.ERROR, logger="app.services.folder_service"):
            with pytest.raises(StoreError):
                await service.create_folder(owner_scope, "Work")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None
        assert record.exc_info[0] is ServerSelectionTimeoutError


class TestUpdate:

    async def test_invalid_id_checked_before_name(self, service, crud, owner_scope):
        with pytest.raises(InvalidIdError):
            await service.update_folder(owner_scope, "NOT-A-VALID-ID", None)

        crud.get_by_owner_and_id.assert_not_awaited()

    async def test_missing_name_checked_before_lookup(self, service, crud, owner_scope):
        with pytest.raises(MissingFieldError):
            await service.update_folder(owner_scope, str(ObjectId()), "")

        crud.get_by_owner_and_id.assert_not_awaited()

    async def test_not_found(self, service, owner_scope):
        with pytest.raises(NotFoundError):
            await service.update_folder(owner_scope, str(ObjectId()), "Work")

    async def test_uniqueness_excludes_itself(self, service, crud, owner_scope):
        folder = make_folder()
        crud.get_by_owner_and_id.return_value = folder
        crud.update_by_owner_and_id.return_value = folder

        await service.update_folder(owner_scope, str(folder.id), "Renamed")

        crud.check_name_exists.assert_awaited_once_with(owner_scope, "Renamed", folder.id)
        scope_arg, id_arg, update_schema = crud.update_by_owner_and_id.await_args.args
        assert scope_arg == owner_scope
        assert id_arg == folder.id
        assert update_schema.model_dump() == {"name": "Renamed"}

    async def test_duplicate_at_write_time(self, service, crud, owner_scope):
        folder = make_folder()
        crud.get_by_owner_and_id.return_value = folder
        crud.update_by_owner_and_id.side_effect = DuplicateKeyError("E11000 duplicate key error")

        with pytest.raises(DuplicateNameError):
            await service.update_folder(owner_scope, str(folder.id), "Taken")

    async def test_deleted_between_lookup_and_write(self, service, crud, owner_scope):
        folder = make_folder()
        crud.get_by_owner_and_id.return_value = folder
        crud.update_by_owner_and_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.update_folder(owner_scope, str(folder.id), "Renamed")


class TestGetAndList:

    async def test_get_not_found(self, service, owner_scope):
        with pytest.raises(NotFoundError):
            await service.get_folder(owner_scope, "DOESNOTEXIST")

    async def test_get_is_scoped(self, service, crud, owner_scope):
        folder = make_folder()
        crud.get_by_owner_and_id.return_value = folder

        await service.get_folder(owner_scope, str(folder.id))

        crud.get_by_owner_and_id.assert_awaited_once_with(owner_scope, folder.id)

    async def test_list(self, service, crud, owner_scope):
        crud.list_by_owner.return_value = [make_folder("A"), make_folder("B")]

        result = await service.list_folders(owner_scope)

        assert [f.name for f in result] == ["A", "B"]


class TestDelete:

    async def test_absent_is_not_an_error(self, service, note_crud, owner_scope):
        assert await service.delete_folder(owner_scope, "DOESNOTEXIST") is False
        note_crud.detach_folder.assert_not_awaited()

    async def test_detaches_notes(self, service, crud, note_crud, owner_scope):
        folder_id = ObjectId()
        crud.delete_by_owner_and_id.return_value = True

        assert await service.delete_folder(owner_scope, str(folder_id)) is True
        note_crud.detach_folder.assert_awaited_once_with(owner_scope, str(folder_id))

    async def test_invalid_id(self, service, crud, owner_scope):
        with pytest.raises(InvalidIdError):
            await service.delete_folder(owner_scope, "NOT-A-VALID-ID")

        crud.delete_by_owner_and_id.assert_not_awaited()
