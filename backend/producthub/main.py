"""FastAPI application bootstrap."""

from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from producthub.api.errors import register_exception_handlers
from producthub.api.routers import health, products
from producthub.core.config import Settings, get_settings
from producthub.core.logging import configure_logging
from producthub.db.seed import init_db

logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Static files that fall back to index.html for client-side routes."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as e:
            if e.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def _mount_frontend(app: FastAPI, static_dir: str | None) -> None:
    """Serve the built admin UI at / with index.html as SPA fallback."""
    if not static_dir:
        return
    if not (Path(static_dir) / "index.html").is_file():
        logger.warning(f"STATIC_DIR {static_dir} has no index.html; frontend not served")
        return
    app.mount("/", SPAStaticFiles(directory=static_dir, html=True), name="frontend")
    logger.info(f"Serving frontend from {static_dir}")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate the FastAPI app and include top-level routers."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(seed=settings.seed_sample_data)
        yield

    # Interactive docs only outside production-like environments
    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    cors_origins = settings.cors_origins
    logger.info(f"[CORS] Environment variable CORS_ORIGINS: {settings.cors_origins_raw}")
    logger.info(f"[CORS] Allowed origins: {cors_origins}")
    if not cors_origins:
        logger.warning("[CORS] No origins configured; cross-origin requests are refused")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(products.router, prefix="/api/products", tags=["products"])

    # Mounted last so API routes take precedence
    _mount_frontend(app, settings.static_dir)

    return app


app = create_app()
