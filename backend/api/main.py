"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.errors import register_exception_handlers  # noqa: E402
from api.routes import authors, books  # noqa: E402
from db import Store  # noqa: E402
from settings import settings  # noqa: E402

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[Store] = None) -> FastAPI:
    """
    Build the application around a store handle.

    When no store is given one is created from settings and disposed of on
    shutdown; a store passed in by the caller is left open.
    """
    owns_store = store is None
    store = store or Store()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Create tables once per process.
        store.init_db()
        logger.info("Library API started against %s", store.engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            if owns_store:
                store.dispose()

    app = FastAPI(
        title="Library API",
        description="CRUD API over authors and their books",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(authors.router, prefix="/api/author", tags=["authors"])
    app.include_router(books.router, prefix="/api/book", tags=["books"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "Library API"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
