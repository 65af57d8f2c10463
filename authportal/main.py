# authportal/main.py

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from authportal.api.api import api_router
from authportal.api.routes_pages import router as pages_router
from authportal.core.config import settings
from authportal.core.errors import AuthPortalError, auth_portal_error_handler
from authportal.core.logging import setup_logging

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_application() -> FastAPI:
    logger = setup_logging("api")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    app.add_exception_handler(AuthPortalError, auth_portal_error_handler)

    # ---------- STATIC FILES ----------
    # Form script and stylesheet for the login / signup pages
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(pages_router)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    logger.info("%s %s ready", settings.PROJECT_NAME, settings.VERSION)
    return app


app = create_application()
