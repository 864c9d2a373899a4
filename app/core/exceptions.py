from typing import Any, Dict, List, Optional
from starlette import status

class AppError(Exception):
    def __init__(
        self,
        message: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        code: str = "bad_request",
        field: Optional[str] = None,
        errors: Optional[List[dict]] = None,  # [{'code':..., 'message':..., 'field':...}]
        details: Optional[Dict[str, Any]] = None,  # Additional details for the error
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.field = field
        self.errors = errors
        self.details = details


class InvalidIdError(AppError):
    """Raised before any store lookup when a path id is not a record key"""

    def __init__(self, field: str = "id"):
        super().__init__(
            f"The `{field}` is not valid",
            code="invalid_id",
            field=field,
        )


class MissingFieldError(AppError):
    def __init__(self, field: str):
        super().__init__(
            f"Missing `{field}` in request body",
            code="missing_field",
            field=field,
        )


class DuplicateNameError(AppError):
    """Same outcome whether caught by the pre-check or by the unique index"""

    def __init__(self, message: str = "Folder name already exists"):
        super().__init__(message, code="duplicate_name", field="name")


class NotFoundError(AppError):
    """Rendered as an empty 404 so foreign and missing records look alike"""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, code="not_found")


class AuthenticationError(AppError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=status.HTTP_401_UNAUTHORIZED, code="unauthorized")


class StoreError(AppError):
    """Unexpected persistence failure; details go to the log, not the client"""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, code="store_error")
