from app.utils.logging import get_logger, setup_logging
from app.utils.api_response import ok, created, no_content, error
from app.utils.object_id import validate_object_id, ObjectIdValidator


__all__= [
    "get_logger",
    "setup_logging",
    "ok",
    "created",
    "no_content",
    "error",
    "validate_object_id",
    "ObjectIdValidator",
]
