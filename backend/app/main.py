from fastapi import FastAPI
import logging
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from logging.config import dictConfig

# Support both execution modes:
# - "uvicorn backend.app.main:app" (package-relative imports)
# - "uvicorn main:app" with sys.path pointing to backend/app (flat imports)
try:
    from .core.logging_config import get_uvicorn_log_config  # type: ignore
    from .core.config import settings  # type: ignore
    from .api.v1.health import router as health_router  # type: ignore
    from .api.v1.drive import router as drive_router  # type: ignore
except Exception:  # pragma: no cover
    from core.logging_config import get_uvicorn_log_config  # type: ignore
    from core.config import settings  # type: ignore
    from api.v1.health import router as health_router  # type: ignore
    from api.v1.drive import router as drive_router  # type: ignore

# Apply logging configuration as early as possible (module import time)
dictConfig(get_uvicorn_log_config(settings.log_level))
logger = logging.getLogger("backend.app")

tags_metadata = [
    {"name": "health", "description": "Health checks and basic service info."},
    {"name": "drive", "description": "Turn Google Drive references into displayable image URLs."},
]

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description=(
        "API for normalizing Google Drive image references (sharing links, Sheets"
        " HYPERLINK formulas, bare file ids) into direct view and thumbnail URLs."
    ),
    openapi_tags=tags_metadata,
    # Serve docs under /api/* to match API prefix
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    contact={"name": settings.app_name},
    license_info={
        "name": "MIT",
    },
)

# CORS: allow Vite frontend during development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup():
    logger.info(
        "%s %s started (default thumbnail size=%s, max batch=%s)",
        settings.app_name,
        settings.version,
        settings.default_thumbnail_size,
        settings.max_batch_size,
    )


# Routes
app.include_router(health_router, prefix="/api/v1")
app.include_router(drive_router, prefix="/api/v1")


@app.get("/api")
def api_root():
    return {"name": settings.app_name, "version": settings.version}


# Convenience redirects for default FastAPI docs paths
@app.get("/docs", include_in_schema=False)
async def docs_redirect():
    return RedirectResponse(url="/api/docs")


@app.get("/redoc", include_in_schema=False)
async def redoc_redirect():
    return RedirectResponse(url="/api/redoc")
