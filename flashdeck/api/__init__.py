from flashdeck.api.exports import router as exports_router
from flashdeck.api.health import router as health_router
from flashdeck.api.imports import router as imports_router

__all__ = [
    "exports_router",
    "health_router",
    "imports_router",
]
