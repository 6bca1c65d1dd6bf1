import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from core import db
from core.logging import configure_logging
from dinos import router as dinos_router

configure_logging()
logger = logging.getLogger(__name__)

# Shipped as package data of `dinos` (see pyproject.toml).
STATIC_DIR = Path(dinos_router.__file__).parent / "static"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Allow a local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(db.StorageError)
async def storage_error_handler(request: Request, exc: db.StorageError) -> JSONResponse:
    logger.error(
        "storage_error method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Storage error."})


app.include_router(dinos_router.router, tags=["dinos"])

# Browser helper script (public/js/api.js).
app.mount("/public", StaticFiles(directory=STATIC_DIR), name="public")


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "dino crud api"}
