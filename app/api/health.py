import time

from fastapi import APIRouter

from app.configs.settings import settings
from app.schemas.response import HealthCheck
from app.utils.api_response import ok

router = APIRouter(tags=["Health"])

_started_at = time.monotonic()


@router.get("/health", response_model=HealthCheck, include_in_schema=False)
async def health():
    return ok(HealthCheck(
        status="healthy",
        version=settings.APP_VERSION,
        uptime=round(time.monotonic() - _started_at, 3),
    ))
