from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, Response
from starlette import status

from app.schemas.response import ApiError


def ok(
    data: Any = None,
    status_code: int = status.HTTP_200_OK,
    headers: Optional[Dict[str, str]] = None,
):
    return JSONResponse(content=jsonable_encoder(data, by_alias=True), status_code=status_code, headers=headers)

def created(
    data: Any = None,
    location: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
):
    headers = dict(headers or {})
    if location:
        headers["Location"] = location
    return JSONResponse(content=jsonable_encoder(data, by_alias=True), status_code=status.HTTP_201_CREATED, headers=headers)


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def error(message: str, status_code: int, errors: Optional[list] = None) -> JSONResponse:
    body = ApiError(message=message, errors=errors).model_dump(mode="json", exclude_none=True)
    return JSONResponse(content=body, status_code=status_code)
