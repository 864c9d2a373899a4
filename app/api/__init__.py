from app.api.folder import router as folder_router
from app.api.health import router as health_router

__all__ = ["folder_router", "health_router"]
