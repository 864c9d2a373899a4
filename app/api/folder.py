from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, status

from app.core.ownership import OwnerScope
from app.schemas.folder import FolderResponse, FolderWriteRequest
from app.schemas.response import ApiError
from app.services.folder_service import FolderService, folder_service
from app.utils.api_response import created, no_content, ok
from app.utils.verify_token import get_owner_scope

router = APIRouter(
    tags=["Folders"],
    responses={
        400: {"model": ApiError, "description": "Bad Request"},
        401: {"model": ApiError, "description": "Unauthorized"},
        500: {"model": ApiError, "description": "Internal Server Error"}
    }
)


def get_folder_service() -> FolderService:
    return folder_service


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List folders",
    description="All folders owned by the caller, sorted by name",
)
async def list_folders(
    scope: OwnerScope = Depends(get_owner_scope),
    folder_service: FolderService = Depends(get_folder_service),
):
    folders = await folder_service.list_folders(scope)
    return ok(folders)


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    summary="Get folder",
    responses={404: {"description": "Folder not found (empty body)"}},
)
async def get_folder(
    folder_id: str,
    scope: OwnerScope = Depends(get_owner_scope),
    folder_service: FolderService = Depends(get_folder_service),
):
    folder = await folder_service.get_folder(scope, folder_id)
    return ok(folder)


@router.post(
    "",
    response_model=FolderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create folder",
)
async def create_folder(
    request: Request,
    body: Any = Body(None, examples=[{"name": "Work"}]),
    scope: OwnerScope = Depends(get_owner_scope),
    folder_service: FolderService = Depends(get_folder_service),
):
    folder = await folder_service.create_folder(scope, FolderWriteRequest.name_from(body))
    location = f"{request.url.path.rstrip('/')}/{folder.id}"
    return created(folder, location=location)


@router.put(
    "/{folder_id}",
    response_model=FolderResponse,
    summary="Rename folder",
    responses={404: {"description": "Folder not found (empty body)"}},
)
async def update_folder(
    folder_id: str,
    body: Any = Body(None, examples=[{"name": "Work"}]),
    scope: OwnerScope = Depends(get_owner_scope),
    folder_service: FolderService = Depends(get_folder_service),
):
    folder = await folder_service.update_folder(scope, folder_id, FolderWriteRequest.name_from(body))
    return ok(folder)


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete folder",
    description="Idempotent: deleting an absent folder also returns 204",
)
async def delete_folder(
    folder_id: str,
    scope: OwnerScope = Depends(get_owner_scope),
    folder_service: FolderService = Depends(get_folder_service),
):
    await folder_service.delete_folder(scope, folder_id)
    return no_content()
