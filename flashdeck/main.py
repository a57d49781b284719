from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flashdeck.api import exports_router, health_router, imports_router
from flashdeck.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("flashdeck"),
    debug=settings.debug,
)

app.include_router(exports_router)
app.include_router(health_router)
app.include_router(imports_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)
